"""
Field type mapping for VO Auto Generator.

Translates the (native type name, driver-reported class) pair of a column
into the Java type used for the generated field.
"""

from typing import Optional, Protocol

from ..constants import (
    DJANGO_FIELD_TO_JAVA,
    EXCLUDED_BINARY_TYPES,
    SQL_TYPE_TO_JAVA,
    JavaTypes,
)
from .models import ColumnMetadata, JavaType


def _normalize_class(type_class: str) -> str:
    if type_class == JavaTypes.BYTE_ARRAY_DESCRIPTOR:
        return JavaTypes.BYTE_ARRAY
    return type_class


def resolve_java_type(sql_type: str, type_class: str, length: int = 0) -> JavaType:
    """
    Resolve the Java type of a column.

    Rules, in priority order:

    1. ``java.sql.Timestamp`` and ``java.sql.Date`` become ``java.util.Date``.
    2. A byte array whose native type is one of the large binary types
       (BIT, BLOB, LONGBLOB, MEDIUMBLOB, TINYBLOB, BINARY, VARBINARY)
       becomes ``java.lang.Character[]``.
    3. Anything else is passed through.

    ``length`` is carried for callers but does not affect the result.
    """
    type_class = _normalize_class(type_class)

    if type_class in JavaTypes.TEMPORAL:
        return JavaType(JavaTypes.UTIL_DATE)

    if (sql_type or "").upper() in EXCLUDED_BINARY_TYPES and type_class == JavaTypes.BYTE_ARRAY:
        return JavaType(JavaTypes.CHARACTER_ARRAY)

    return JavaType(type_class)


def java_class_for_sql_type(sql_type: Optional[str]) -> str:
    """Class a JDBC driver would report for a native type name like ``INT UNSIGNED``."""
    name = (sql_type or "").split("(", 1)[0].strip().upper()
    if name in SQL_TYPE_TO_JAVA:
        return SQL_TYPE_TO_JAVA[name]
    first_word = name.split(" ", 1)[0]
    return SQL_TYPE_TO_JAVA.get(first_word, JavaTypes.OBJECT)


def java_class_for_django_field(
    django_field_type: Optional[str], sql_type: Optional[str] = None
) -> str:
    """
    Class a JDBC driver would report for a Django introspection field type.

    Falls back to the native type name when the backend had no field type.
    """
    if django_field_type in DJANGO_FIELD_TO_JAVA:
        return DJANGO_FIELD_TO_JAVA[django_field_type]
    return java_class_for_sql_type(sql_type)


class FieldMapperProtocol(Protocol):
    """Protocol for column type mappers."""

    def map_column(self, column: ColumnMetadata) -> JavaType:
        ...


class FieldMapper:
    """Maps raw column metadata to Java field types."""

    def map_column(self, column: ColumnMetadata) -> JavaType:
        if not column.name:
            raise ValueError("Column name is required")
        return resolve_java_type(column.type_name, column.type_class, column.display_size)
