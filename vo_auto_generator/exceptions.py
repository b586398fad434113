"""
Exception hierarchy for VO Auto Generator.

Every fatal condition of a generation run maps to one of four error kinds:
configuration, database connection, schema introspection and output write.
Each carries context and recovery suggestions for the user.
"""

import re
from typing import Dict, Any, Optional, List


class ReEngineerError(Exception):
    """
    Base exception for all VO Auto Generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [self.message]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(ReEngineerError):
    """Raised when the configuration file is missing, unparsable or invalid."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file exists and is readable",
                "Check the configuration file syntax",
                "Verify 'driver' and 'url' are present",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class DatabaseConnectionError(ReEngineerError):
    """Raised when the database backend cannot be loaded or connection fails."""

    def __init__(self, message: str, database_url: str = None, engine: str = None, **kwargs):
        context = kwargs.get('context', {})
        if database_url:
            context['database_url'] = self._mask_credentials(database_url)
        if engine:
            context['engine'] = engine

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check database server is running",
                "Verify connection credentials",
                "Ensure the database driver package is installed",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="DATABASE_CONNECTION_ERROR"
        )

    @staticmethod
    def _mask_credentials(url: str) -> str:
        """Mask the password in a database URL."""
        return re.sub(r'://([^:/@]+):([^@]+)@', r'://\1:***@', url)


class SchemaIntrospectionError(ReEngineerError):
    """Raised when reading tables or columns fails, or generated names collide."""

    def __init__(self, message: str, table: str = None, column: str = None, **kwargs):
        context = kwargs.get('context', {})
        if table:
            context['table'] = table
        if column:
            context['column'] = column

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Verify the table/view exists and is readable",
                "Check database user permissions",
                "Review the tableNamePattern filter",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="INTROSPECTION_ERROR"
        )


class OutputWriteError(ReEngineerError):
    """Raised when the output directory or a generated file cannot be written."""

    def __init__(self, message: str, path: str = None, entity: str = None, **kwargs):
        context = kwargs.get('context', {})
        if path:
            context['path'] = path
        if entity:
            context['entity'] = entity

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check write permissions on the output directory",
                "Verify packagePath points to a writable location",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="OUTPUT_WRITE_ERROR"
        )
