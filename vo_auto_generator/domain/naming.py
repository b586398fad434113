"""
Naming convention utilities for VO Auto Generator.

Converts snake_case database identifiers into the camelCase member names and
PascalCase type names used in generated Java value objects.
"""

import re

from ..constants import JAVA_KEYWORDS


_DELIMITERS = re.compile(r"[_\-\s]+")


def capitalize_first(name: str) -> str:
    """
    Upper-case the first character of ``name`` and leave the rest untouched.

    Applying it twice gives the same result as applying it once.

    Example:
        >>> capitalize_first("userProfileId")
        'UserProfileId'
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")
    return name[:1].upper() + name[1:]


def to_camel_case(name: str) -> str:
    """
    Convert a delimiter-separated identifier to camelCase.

    Delimiters are removed and every segment after the first has its first
    letter capitalized. The first segment keeps its case.

    Example:
        >>> to_camel_case("user_profile_id")
        'userProfileId'
        >>> to_camel_case("")
        ''
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected string, got {type(name).__name__}")

    segments = [segment for segment in _DELIMITERS.split(name) if segment]
    if not segments:
        return ""
    return segments[0] + "".join(capitalize_first(segment) for segment in segments[1:])


def _java_identifier(name: str, fallback: str) -> str:
    name = re.sub(r"[^A-Za-z0-9_$]", "", name)
    if name and name[0].isdigit():
        name = "_" + name
    if name in JAVA_KEYWORDS:
        name += "_"
    return name if name else fallback


def to_type_name(table_name: str, prefix: str = "", suffix: str = "") -> str:
    """
    Build a value-object class name from a table name.

    The result is a legal Java identifier, with the same clean-up rules as
    ``to_member_name``.

    Example:
        >>> to_type_name("order_item", "T", "VO")
        'TOrderItemVO'
        >>> to_type_name("2024_sales")
        '_2024Sales'
    """
    name = f"{prefix or ''}{capitalize_first(to_camel_case(table_name))}{suffix or ''}"
    return _java_identifier(name, "_Entity")


def to_member_name(column_name: str) -> str:
    """
    Convert a column name to a legal Java field name.

    Characters Java does not allow are dropped, a leading digit gets an
    underscore prefix and reserved words get an underscore suffix.

    Example:
        >>> to_member_name("created_at")
        'createdAt'
        >>> to_member_name("class")
        'class_'
    """
    return _java_identifier(to_camel_case(column_name), "_field")


def getter_name(member_name: str) -> str:
    return "get" + capitalize_first(member_name)


def setter_name(member_name: str) -> str:
    return "set" + capitalize_first(member_name)
