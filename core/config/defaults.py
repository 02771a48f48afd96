# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Default configuration values
# PURPOSE: Naming conventions, SQL column types and output settings
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Conventions the schema engine relies on, collected in one place.
The engine never reads the environment: callers pass a GeneratorDefaults
(or get the module defaults). Only the command surface calls from_env().

Design:
- Immutable dataclasses for defaults
- Environment variable overrides at the edge
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class NamingDefaults:
    """
    Structural naming conventions of the source object model.

    SuiteTalk-style records carry an "internalId" identity, WSDL
    serializer flags ending in "Specified", and "*List" wrappers
    around arrays of line items.
    """
    identity_field: str = "internalId"
    artifact_suffix: str = "Specified"
    collection_suffix: str = "List"

    # Reference flattening: {field}_rf_{label}
    reference_infix: str = "_rf_"
    reference_id_label: str = "InternalId"
    reference_name_label: str = "Name"
    reference_type_label: str = "Type"

    # Class names treated as references by model introspection
    reference_type_names: Tuple[str, ...] = ("RecordRef",)

    def is_artifact(self, field_name: str) -> bool:
        """Serializer helper flag (e.g. "tranDateSpecified")."""
        return field_name.endswith(self.artifact_suffix)

    def is_identity(self, field_name: str) -> bool:
        """Identity field match is case-insensitive."""
        return field_name.lower() == self.identity_field.lower()

    def is_collection_name(self, field_name: str) -> bool:
        return field_name.endswith(self.collection_suffix)

    def reference_column(self, field_name: str, label: str) -> str:
        return f"{field_name}{self.reference_infix}{label}"

    @classmethod
    def from_env(cls) -> "NamingDefaults":
        """Create from environment variables."""
        return cls(
            identity_field=os.getenv("DDL_IDENTITY_FIELD", "internalId"),
            artifact_suffix=os.getenv("DDL_ARTIFACT_SUFFIX", "Specified"),
            collection_suffix=os.getenv("DDL_COLLECTION_SUFFIX", "List"),
        )


@dataclass(frozen=True)
class SqlTypeDefaults:
    """
    SQL column types for synthesized and flattened columns.

    Scalar mappings live in core.schema.ddl_utils; these are the
    types the synthesizer invents on its own.
    """
    identity_type: str = "NVARCHAR(50)"      # root PK (natural or synthetic)
    foreign_key_type: str = "NVARCHAR(50)"   # child -> parent column
    child_key_type: str = "BIGINT"           # child synthetic PK

    # Reference triple
    reference_id_type: str = "NVARCHAR(50)"
    reference_name_type: str = "NVARCHAR(MAX)"
    reference_type_type: str = "NVARCHAR(50)"

    @classmethod
    def from_env(cls) -> "SqlTypeDefaults":
        """Create from environment variables."""
        return cls(
            identity_type=os.getenv("DDL_IDENTITY_TYPE", "NVARCHAR(50)"),
            child_key_type=os.getenv("DDL_CHILD_KEY_TYPE", "BIGINT"),
        )


@dataclass(frozen=True)
class OutputDefaults:
    """
    Defaults for DDL rendering and file output.
    """
    output_dir: str = "sql"
    file_extension: str = ".sql"
    encoding: str = "utf-8"
    indent: str = "    "

    def file_name(self, table_name: str) -> str:
        return f"{table_name}{self.file_extension}"

    @classmethod
    def from_env(cls) -> "OutputDefaults":
        """Create from environment variables."""
        return cls(
            output_dir=os.getenv("DDL_OUTPUT_DIR", "sql"),
            encoding=os.getenv("DDL_FILE_ENCODING", "utf-8"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class GeneratorDefaults:
    """Container for all default configurations."""
    naming: NamingDefaults = field(default_factory=NamingDefaults)
    sql_types: SqlTypeDefaults = field(default_factory=SqlTypeDefaults)
    output: OutputDefaults = field(default_factory=OutputDefaults)

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create all defaults from environment variables."""
        return cls(
            naming=NamingDefaults.from_env(),
            sql_types=SqlTypeDefaults.from_env(),
            output=OutputDefaults.from_env(),
        )


_defaults: Optional[GeneratorDefaults] = None


def get_defaults() -> GeneratorDefaults:
    """Get global defaults instance (environment-aware, for the CLI)."""
    global _defaults
    if _defaults is None:
        _defaults = GeneratorDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "NamingDefaults",
    "SqlTypeDefaults",
    "OutputDefaults",
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
