"""
Centralized constants for VO Auto Generator.

This module contains configuration defaults, database engine aliases and the
Java type tables used when translating database columns into value-object
fields.
"""

from typing import Dict, FrozenSet


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    CONFIG_FILE_NAME = "re-engineer.yaml"
    SOURCE_EXTENSION = ".java"
    TEMPLATE_NAME = "value_object.java.j2"
    DB_ALIAS = "default"


class SupportedDatabases:
    """Django database backends and the short names accepted for them."""

    POSTGRESQL = 'django.db.backends.postgresql'
    SQLITE = 'django.db.backends.sqlite3'
    MYSQL = 'django.db.backends.mysql'
    ORACLE = 'django.db.backends.oracle'

    ALL = [POSTGRESQL, SQLITE, MYSQL, ORACLE]

    ALIASES: Dict[str, str] = {
        'postgresql': POSTGRESQL,
        'postgres': POSTGRESQL,
        'postgis': POSTGRESQL,
        'sqlite': SQLITE,
        'sqlite3': SQLITE,
        'mysql': MYSQL,
        'mariadb': MYSQL,
        'oracle': ORACLE,
    }

    @classmethod
    def resolve_engine(cls, driver: str) -> str:
        """Return the Django backend path for a driver name or alias."""
        return cls.ALIASES.get(driver.strip().lower(), driver.strip())


# =============================================================================
# JAVA TYPES
# =============================================================================

class JavaTypes:
    """Fully qualified Java class names used by the type mapper."""

    OBJECT = "java.lang.Object"
    STRING = "java.lang.String"
    INTEGER = "java.lang.Integer"
    LONG = "java.lang.Long"
    SHORT = "java.lang.Short"
    DOUBLE = "java.lang.Double"
    BOOLEAN = "java.lang.Boolean"
    BIG_DECIMAL = "java.math.BigDecimal"
    UUID = "java.util.UUID"
    UTIL_DATE = "java.util.Date"
    SQL_DATE = "java.sql.Date"
    SQL_TIME = "java.sql.Time"
    SQL_TIMESTAMP = "java.sql.Timestamp"
    BYTE_ARRAY = "byte[]"
    BYTE_ARRAY_DESCRIPTOR = "[B"
    CHARACTER_ARRAY = "java.lang.Character[]"

    # Driver classes that are normalized to java.util.Date
    TEMPORAL: FrozenSet[str] = frozenset({SQL_TIMESTAMP, SQL_DATE})

    PRIMITIVES: FrozenSet[str] = frozenset({
        "boolean", "byte", "char", "short", "int", "long", "float", "double",
    })


# Native type names whose byte-array columns become Character[] fields
EXCLUDED_BINARY_TYPES: FrozenSet[str] = frozenset({
    "BIT", "BLOB", "LONGBLOB", "MEDIUMBLOB", "TINYBLOB", "BINARY", "VARBINARY",
})

# MySQL DATA_TYPE values a JDBC driver reports as byte[]
MYSQL_BINARY_TYPES: FrozenSet[str] = frozenset({
    "BINARY", "VARBINARY", "TINYBLOB", "BLOB", "MEDIUMBLOB", "LONGBLOB",
})


# Django introspection field type -> class a JDBC driver would report
DJANGO_FIELD_TO_JAVA: Dict[str, str] = {
    "AutoField": JavaTypes.INTEGER,
    "SmallAutoField": JavaTypes.INTEGER,
    "BigAutoField": JavaTypes.LONG,
    "IntegerField": JavaTypes.INTEGER,
    "PositiveIntegerField": JavaTypes.INTEGER,
    "SmallIntegerField": JavaTypes.SHORT,
    "PositiveSmallIntegerField": JavaTypes.SHORT,
    "BigIntegerField": JavaTypes.LONG,
    "PositiveBigIntegerField": JavaTypes.LONG,
    "FloatField": JavaTypes.DOUBLE,
    "DecimalField": JavaTypes.BIG_DECIMAL,
    "CharField": JavaTypes.STRING,
    "TextField": JavaTypes.STRING,
    "SlugField": JavaTypes.STRING,
    "EmailField": JavaTypes.STRING,
    "URLField": JavaTypes.STRING,
    "GenericIPAddressField": JavaTypes.STRING,
    "JSONField": JavaTypes.STRING,
    "DurationField": JavaTypes.STRING,
    "UUIDField": JavaTypes.UUID,
    "BooleanField": JavaTypes.BOOLEAN,
    "NullBooleanField": JavaTypes.BOOLEAN,
    "DateField": JavaTypes.SQL_DATE,
    "DateTimeField": JavaTypes.SQL_TIMESTAMP,
    "TimeField": JavaTypes.SQL_TIME,
    "BinaryField": JavaTypes.BYTE_ARRAY,
}


# Native type name -> class a JDBC driver would report, used when the
# Django backend has no field type for a column
SQL_TYPE_TO_JAVA: Dict[str, str] = {
    "BIT": JavaTypes.BOOLEAN,
    "BOOL": JavaTypes.BOOLEAN,
    "BOOLEAN": JavaTypes.BOOLEAN,
    "TINYINT": JavaTypes.INTEGER,
    "SMALLINT": JavaTypes.INTEGER,
    "MEDIUMINT": JavaTypes.INTEGER,
    "INT": JavaTypes.INTEGER,
    "INT2": JavaTypes.INTEGER,
    "INT4": JavaTypes.INTEGER,
    "INTEGER": JavaTypes.INTEGER,
    "SERIAL": JavaTypes.INTEGER,
    "BIGINT": JavaTypes.LONG,
    "INT8": JavaTypes.LONG,
    "BIGSERIAL": JavaTypes.LONG,
    "REAL": JavaTypes.DOUBLE,
    "FLOAT": JavaTypes.DOUBLE,
    "FLOAT4": JavaTypes.DOUBLE,
    "FLOAT8": JavaTypes.DOUBLE,
    "DOUBLE": JavaTypes.DOUBLE,
    "DECIMAL": JavaTypes.BIG_DECIMAL,
    "NUMERIC": JavaTypes.BIG_DECIMAL,
    "NUMBER": JavaTypes.BIG_DECIMAL,
    "CHAR": JavaTypes.STRING,
    "VARCHAR": JavaTypes.STRING,
    "VARCHAR2": JavaTypes.STRING,
    "NCHAR": JavaTypes.STRING,
    "NVARCHAR": JavaTypes.STRING,
    "TEXT": JavaTypes.STRING,
    "TINYTEXT": JavaTypes.STRING,
    "MEDIUMTEXT": JavaTypes.STRING,
    "LONGTEXT": JavaTypes.STRING,
    "CLOB": JavaTypes.STRING,
    "JSON": JavaTypes.STRING,
    "ENUM": JavaTypes.STRING,
    "UUID": JavaTypes.UUID,
    "DATE": JavaTypes.SQL_DATE,
    "TIME": JavaTypes.SQL_TIME,
    "DATETIME": JavaTypes.SQL_TIMESTAMP,
    "TIMESTAMP": JavaTypes.SQL_TIMESTAMP,
    "TIMESTAMPTZ": JavaTypes.SQL_TIMESTAMP,
    "BLOB": JavaTypes.BYTE_ARRAY,
    "TINYBLOB": JavaTypes.BYTE_ARRAY,
    "MEDIUMBLOB": JavaTypes.BYTE_ARRAY,
    "LONGBLOB": JavaTypes.BYTE_ARRAY,
    "BINARY": JavaTypes.BYTE_ARRAY,
    "VARBINARY": JavaTypes.BYTE_ARRAY,
    "BYTEA": JavaTypes.BYTE_ARRAY,
}


JAVA_KEYWORDS: FrozenSet[str] = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
})
