"""
Domain module for VO Auto Generator.

Holds the schema model and the pure naming and type translation rules,
separated from database access and file output.
"""

from .models import (
    ColumnMetadata,
    JavaType,
    ColumnModel,
    EntityModel,
    GenerationResult,
)

from .field_mapping import (
    FieldMapper,
    FieldMapperProtocol,
    resolve_java_type,
    java_class_for_django_field,
    java_class_for_sql_type,
)

from .naming import (
    capitalize_first,
    to_camel_case,
    to_type_name,
    to_member_name,
    getter_name,
    setter_name,
)

__all__ = [
    # Models
    'ColumnMetadata',
    'JavaType',
    'ColumnModel',
    'EntityModel',
    'GenerationResult',

    # Type mapping
    'FieldMapper',
    'FieldMapperProtocol',
    'resolve_java_type',
    'java_class_for_django_field',
    'java_class_for_sql_type',

    # Naming
    'capitalize_first',
    'to_camel_case',
    'to_type_name',
    'to_member_name',
    'getter_name',
    'setter_name',
]
