"""
Core domain models for VO Auto Generator.

These models are the intermediate representation between database
introspection and Java source rendering. They carry no database or
filesystem handles and are not mutated once built.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..constants import JavaTypes


@dataclass(frozen=True)
class ColumnMetadata:
    """
    Raw column metadata as reported by a database metadata source.

    ``type_class`` is the class name a JDBC driver would report for the
    column (e.g. ``java.sql.Timestamp`` or ``byte[]``).
    """

    name: str
    type_name: str
    type_class: str
    display_size: int = 0


@dataclass(frozen=True)
class JavaType:
    """A resolved Java field type."""

    qualified_name: str

    @property
    def short_name(self) -> str:
        """Rightmost segment after the last package separator."""
        return self.qualified_name[self.qualified_name.rfind('.') + 1:]

    @property
    def import_name(self) -> Optional[str]:
        """
        Qualified name to import for this type, or None for primitives.

        Array types import their component type.
        """
        component = self.qualified_name
        while component.endswith("[]"):
            component = component[:-2]
        if component in JavaTypes.PRIMITIVES or '.' not in component:
            return None
        return component


@dataclass(frozen=True)
class ColumnModel:
    """One value-object field derived from a table column."""

    name: str
    column_name: str
    sql_type: str
    java_type: JavaType
    length: int = 0


@dataclass(frozen=True)
class EntityModel:
    """One value-object class derived from a table or view."""

    name: str
    table_name: str
    columns: Tuple[ColumnModel, ...] = ()

    @property
    def imports(self) -> List[str]:
        """Distinct imports required by the fields, sorted."""
        return sorted({
            column.java_type.import_name
            for column in self.columns
            if column.java_type.import_name
        })


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    entities: List[EntityModel] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)
    elapsed_ms: int = 0

    @property
    def entity_count(self) -> int:
        return len(self.entities)
