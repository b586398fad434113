import logging
from typing import Dict, List, Optional, Protocol, Sequence

from .config_validation import ReEngineerConfig
from .domain.field_mapping import FieldMapper, FieldMapperProtocol
from .domain.models import ColumnMetadata, ColumnModel, EntityModel
from .domain.naming import to_member_name, to_type_name
from .exceptions import ReEngineerError, SchemaIntrospectionError


logger = logging.getLogger(__name__)


class MetadataSource(Protocol):
    """Database capability the schema reader consumes."""

    def list_tables(self, pattern: Optional[str] = None) -> List[str]:
        """Names of the tables and views matching an SQL LIKE pattern."""
        ...

    def describe_table(self, table_name: str) -> List[ColumnMetadata]:
        """Column metadata of one table in natural column order."""
        ...


def build_entity(
    table_name: str,
    columns: Sequence[ColumnMetadata],
    prefix: str = "",
    suffix: str = "",
    field_mapper: Optional[FieldMapperProtocol] = None,
) -> EntityModel:
    """
    Map one table and its columns to an EntityModel.

    Column order is preserved. Two columns that translate to the same member
    name raise SchemaIntrospectionError.
    """
    field_mapper = field_mapper or FieldMapper()
    column_models: List[ColumnModel] = []
    seen: Dict[str, str] = {}

    for column in columns:
        member_name = to_member_name(column.name)
        if member_name in seen:
            raise SchemaIntrospectionError(
                f"Columns '{seen[member_name]}' and '{column.name}' both map to field '{member_name}'.",
                table=table_name,
                column=column.name,
                suggestions=["Rename one of the columns or exclude the table with tableNamePattern"],
            )
        seen[member_name] = column.name

        java_type = field_mapper.map_column(column)
        logger.debug(
            f"{table_name}.{column.name}: {column.type_name} / {column.type_class} -> {java_type.qualified_name}"
        )
        column_models.append(
            ColumnModel(
                name=member_name,
                column_name=column.name,
                sql_type=column.type_name,
                java_type=java_type,
                length=column.display_size,
            )
        )

    return EntityModel(
        name=to_type_name(table_name, prefix, suffix),
        table_name=table_name,
        columns=tuple(column_models),
    )


def check_unique_entity_names(entities: Sequence[EntityModel]) -> None:
    """
    Fail when two entities would be written to the same file.

    Names are compared case-insensitively since the output directory may live
    on a case-insensitive filesystem.
    """
    seen: Dict[str, EntityModel] = {}
    for entity in entities:
        key = entity.name.lower()
        if key in seen:
            raise SchemaIntrospectionError(
                f"Tables '{seen[key].table_name}' and '{entity.table_name}' both map to class "
                f"'{entity.name}'.",
                table=entity.table_name,
                suggestions=["Narrow tableNamePattern so only one of the tables is selected"],
            )
        seen[key] = entity


def read_schema(source: MetadataSource, config: ReEngineerConfig) -> List[EntityModel]:
    """
    Read every matching table/view from ``source`` into EntityModels.

    Any failure aborts the whole read; no partial result is returned.

    Raises:
        SchemaIntrospectionError: listing or describing a table failed, or
            generated names collide.
    """
    pattern = config.table_name_pattern
    try:
        table_names = source.list_tables(pattern)
    except ReEngineerError:
        raise
    except Exception as e:
        raise SchemaIntrospectionError(
            f"Could not list tables and views: {e}",
            context={"table_name_pattern": pattern or "<all>"},
        ) from e

    logger.info(f"Found {len(table_names)} table(s)/view(s) matching '{pattern or '%'}'.")

    entities: List[EntityModel] = []
    for table_name in table_names:
        logger.debug(f"Reading columns of '{table_name}'...")
        try:
            columns = source.describe_table(table_name)
        except ReEngineerError:
            raise
        except Exception as e:
            raise SchemaIntrospectionError(
                f"Could not read columns of '{table_name}': {e}", table=table_name
            ) from e
        entities.append(build_entity(table_name, columns, config.prefix, config.suffix))

    check_unique_entity_names(entities)
    return entities
