# ============================================================================
# CLAUDE CONTEXT - ERRORS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Foundation - Exception hierarchy
# PURPOSE: Errors surfaced to callers of the schema engine and services
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: SchemaGenerationError, InvalidInputError, DescriptorLoadError,
#          SchemaOutputError
# ============================================================================
"""
Schema generation exceptions.

Unsupported shapes and malformed collections are NOT errors; they are
recorded on the Schema as skipped fields. Only the conditions below
are raised.
"""

from typing import Optional


class SchemaGenerationError(Exception):
    """Base exception for schema generation failures."""
    pass


class InvalidInputError(SchemaGenerationError, ValueError):
    """Raised when the root type descriptor (or a required name) is absent."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class DescriptorLoadError(SchemaGenerationError):
    """Raised when a descriptor file cannot be read, parsed or validated."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class SchemaOutputError(SchemaGenerationError):
    """
    Raised when the output directory or a .sql file cannot be written.

    Files written before the failure are left in place.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


__all__ = [
    "SchemaGenerationError",
    "InvalidInputError",
    "DescriptorLoadError",
    "SchemaOutputError",
]
