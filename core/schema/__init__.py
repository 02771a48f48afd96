# ============================================================================
# CLAUDE CONTEXT - SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Relational schema and DDL generation
# PURPOSE: Turn type descriptors into tables and CREATE TABLE scripts
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.schema.ddl_utils import (
    TYPE_MAP,
    map_scalar,
    reference_columns,
    quote_identifier,
)
from core.schema.walker import walk_fields, walk_element_fields
from core.schema.synthesizer import TableSynthesizer, synthesize
from core.schema.ddl_emitter import (
    DDLEmitter,
    emit_table,
    emit_schema,
    emit_schema_to_files,
)

__all__ = [
    # Synthesis
    "TableSynthesizer",
    "synthesize",
    "walk_fields",
    "walk_element_fields",
    # Emission
    "DDLEmitter",
    "emit_table",
    "emit_schema",
    "emit_schema_to_files",
    # Utilities
    "TYPE_MAP",
    "map_scalar",
    "reference_columns",
    "quote_identifier",
]
