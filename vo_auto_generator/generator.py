"""
Generation pipeline for VO Auto Generator.

configuration -> schema introspection -> render each entity -> write each
entity. Any error aborts the run; files written before the error stay on disk.
"""

import logging
import time
from pathlib import Path
from typing import Callable, ContextManager, Optional, Union

from .codegen import ensure_output_dir, render_entity, setup_jinja_env, write_entity_file
from .colored_logging import log_highlight, log_progress, log_section, log_success
from .config_validation import ReEngineerConfig, load_config
from .domain.models import GenerationResult
from .introspection_django import DjangoMetadataSource
from .mapper import MetadataSource, read_schema


logger = logging.getLogger(__name__)

SourceFactory = Callable[[ReEngineerConfig], ContextManager[MetadataSource]]


def generate_value_objects(
    config: ReEngineerConfig,
    source_factory: SourceFactory = DjangoMetadataSource,
    base_dir: Optional[Path] = None,
) -> GenerationResult:
    """
    Read the schema described by ``config`` and write one Java file per entity.

    Args:
        config: Validated run configuration
        source_factory: Builds the metadata source; it is opened and closed
            around the schema read
        base_dir: Root used when ``packagePath`` is not configured
            (defaults to the working directory)
    """
    started = time.perf_counter()
    output_dir = config.resolve_output_dir(base_dir)

    log_section(logger, "Database Schema Introspection")
    log_progress(logger, "Reading database meta data...")
    with source_factory(config) as source:
        entities = read_schema(source, config)
    log_highlight(logger, f"Found {len(entities)} entity(ies) to generate.")

    log_section(logger, "Value Object Generation")
    log_progress(logger, f"Writing file(s) to {output_dir}")
    ensure_output_dir(output_dir)

    env = setup_jinja_env()
    result = GenerationResult()
    for entity in entities:
        content = render_entity(entity, config.package_name, env)
        result.files.append(write_entity_file(entity, content, output_dir))
        result.entities.append(entity)

    result.elapsed_ms = int((time.perf_counter() - started) * 1000)
    return result


def run(
    config_path: Optional[Union[str, Path]] = None,
    package_path: Optional[str] = None,
    source_factory: SourceFactory = DjangoMetadataSource,
) -> GenerationResult:
    """Load the configuration file and run the whole pipeline."""
    started = time.perf_counter()

    log_progress(logger, "Loading configuration...")
    config = load_config(config_path, package_path=package_path)
    logger.debug(f"Effective configuration: {config}")

    result = generate_value_objects(config, source_factory=source_factory)
    result.elapsed_ms = int((time.perf_counter() - started) * 1000)
    log_success(
        logger, f"{result.entity_count} VO class file(s) created in {result.elapsed_ms} ms."
    )
    return result
