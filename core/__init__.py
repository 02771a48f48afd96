# ============================================================================
# CLAUDE CONTEXT - CORE MODULE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core module initialization
# PURPOSE: Export contracts, models, errors and schema engine
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import FieldShape, ScalarKind, SkipReason
from core.errors import (
    SchemaGenerationError,
    InvalidInputError,
    DescriptorLoadError,
    SchemaOutputError,
)
from core.models import (
    FieldDescriptor,
    TypeDescriptor,
    Column,
    Table,
    Schema,
    SkippedField,
)
from core.schema import (
    TableSynthesizer,
    DDLEmitter,
    synthesize,
    emit_table,
    emit_schema,
    emit_schema_to_files,
)
from core.introspection import describe_model

__all__ = [
    # Enums
    "FieldShape",
    "ScalarKind",
    "SkipReason",
    # Errors
    "SchemaGenerationError",
    "InvalidInputError",
    "DescriptorLoadError",
    "SchemaOutputError",
    # Models
    "FieldDescriptor",
    "TypeDescriptor",
    "Column",
    "Table",
    "Schema",
    "SkippedField",
    # Schema
    "TableSynthesizer",
    "DDLEmitter",
    "synthesize",
    "emit_table",
    "emit_schema",
    "emit_schema_to_files",
    # Introspection
    "describe_model",
]
