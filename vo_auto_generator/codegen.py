import logging
from pathlib import Path
from typing import Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    select_autoescape,
)

from .constants import DefaultConfig
from .domain.models import EntityModel
from .domain.naming import getter_name, setter_name
from .exceptions import OutputWriteError


logger = logging.getLogger(__name__)

# Define the path to the templates directory relative to this file
TEMPLATE_DIR = Path(__file__).parent / "templates"


def setup_jinja_env() -> Environment:
    """Sets up and returns the Jinja2 environment."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,  # Remove first newline after a block tag
        lstrip_blocks=True,  # Strip leading whitespace from lines with block tags
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["getter"] = getter_name
    env.filters["setter"] = setter_name
    return env


def render_entity(
    entity: EntityModel,
    package_name: Optional[str] = None,
    env: Optional[Environment] = None,
) -> str:
    """
    Render the Java source of one value object.

    The output only depends on ``entity`` and ``package_name``.
    """
    env = env or setup_jinja_env()
    template = env.get_template(DefaultConfig.TEMPLATE_NAME)
    return template.render(entity=entity, package_name=package_name)


def ensure_output_dir(output_dir: Path) -> Path:
    """Create ``output_dir`` and its parents if missing."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            f"Could not create output directory: {e}", path=str(output_dir)
        ) from e
    return output_dir


def write_entity_file(entity: EntityModel, content: str, output_dir: Path) -> Path:
    """Write ``content`` to ``<output_dir>/<Entity>.java``, replacing any existing file."""
    output_path = Path(output_dir) / f"{entity.name}{DefaultConfig.SOURCE_EXTENSION}"
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(
            f"Could not write file: {e}", path=str(output_path), entity=entity.name
        ) from e
    logger.debug(f"Generated file: {output_path}")
    return output_path
