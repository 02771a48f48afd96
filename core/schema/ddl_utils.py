# ============================================================================
# CLAUDE CONTEXT - DDL UTILITIES
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Scalar type mapping, reference flattening, quoting
# PURPOSE: Pure helpers shared by the synthesizer and the DDL emitter
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: TYPE_MAP, map_scalar, reference_columns, quote_identifier
# DEPENDENCIES: none
# ============================================================================
"""
DDL Utilities - Shared SQL Generation Patterns.

All functions are pure. Target dialect uses bracket-quoted identifiers
([Name]) and NVARCHAR/BIT/DATETIME column types.

Usage:
    from core.schema.ddl_utils import map_scalar, reference_columns

    map_scalar(ScalarKind.DECIMAL)       # "DECIMAL(18,6)"
    map_scalar(ScalarKind.ARRAY)         # None -> caller tries next rule
    reference_columns("entity")          # entity_rf_InternalId, ...
"""

from typing import List, Optional, Union

from core.config.defaults import NamingDefaults, SqlTypeDefaults
from core.contracts import ScalarKind
from core.models.table import Column


# ============================================================================
# TYPE MAPPING
# ============================================================================

TYPE_MAP = {
    ScalarKind.TEXT: "NVARCHAR(MAX)",
    ScalarKind.CHAR: "NVARCHAR(MAX)",
    ScalarKind.INT32: "INT",
    ScalarKind.INT64: "BIGINT",
    ScalarKind.INT16: "SMALLINT",
    ScalarKind.INT8: "TINYINT",
    ScalarKind.BOOLEAN: "BIT",
    ScalarKind.DATETIME: "DATETIME",
    ScalarKind.DECIMAL: "DECIMAL(18,6)",
    ScalarKind.DOUBLE: "DECIMAL(18,6)",
    ScalarKind.SINGLE: "REAL",
    # Enums stored as their text label
    ScalarKind.ENUM: "NVARCHAR(50)",
}


def map_scalar(kind: Optional[Union[ScalarKind, str]]) -> Optional[str]:
    """
    Map a scalar kind to its SQL column type.

    Nullable-wrapped values map exactly like their unwrapped kind;
    nullability is decided by the caller.

    Args:
        kind: ScalarKind, kind alias, or None

    Returns:
        SQL type string, or None for composite/array/object kinds
    """
    if kind is None:
        return None
    if not isinstance(kind, ScalarKind):
        try:
            kind = ScalarKind.parse(kind)
        except ValueError:
            return None
    if kind.is_composite():
        return None
    return TYPE_MAP.get(kind)


# ============================================================================
# REFERENCE FLATTENING
# ============================================================================

def reference_columns(
    field_name: str,
    naming: Optional[NamingDefaults] = None,
    sql_types: Optional[SqlTypeDefaults] = None,
) -> List[Column]:
    """
    Flatten a reference field into its id/name/type columns.

    Fixed convention: the three sub-fields are assumed present on every
    reference, whatever the referenced type declares.

    Args:
        field_name: Name of the reference-shaped field (e.g. "entity")
        naming: Naming conventions (infix and labels)
        sql_types: Column types for the triple

    Returns:
        [{F}_rf_InternalId, {F}_rf_Name, {F}_rf_Type], all nullable
    """
    naming = naming or NamingDefaults()
    sql_types = sql_types or SqlTypeDefaults()

    triple = (
        (naming.reference_id_label, sql_types.reference_id_type),
        (naming.reference_name_label, sql_types.reference_name_type),
        (naming.reference_type_label, sql_types.reference_type_type),
    )
    return [
        Column(name=naming.reference_column(field_name, label), sql_type=sql_type, nullable=True)
        for label, sql_type in triple
    ]


# ============================================================================
# QUOTING
# ============================================================================

def quote_identifier(name: str) -> str:
    """
    Bracket-quote an identifier.

    A closing bracket inside the name is doubled, as the dialect requires.
    """
    return "[" + name.replace("]", "]]") + "]"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "TYPE_MAP",
    "map_scalar",
    "reference_columns",
    "quote_identifier",
]
