# ============================================================================
# CLAUDE CONTEXT - BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Foundation - Core enums shared by descriptors and schema engine
# PURPOSE: Define field shapes and scalar kinds for type descriptors
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: FieldShape, ScalarKind, SkipReason
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for record schema generation.

These enums cross every boundary of the system:
- Descriptor files (YAML/JSON)
- Model introspection (pydantic classes)
- Schema engine (walker, synthesizer, emitter)
"""

from enum import Enum
from typing import Optional


# ============================================================================
# FIELD SHAPES
# ============================================================================

class FieldShape(str, Enum):
    """
    Structural shape of a field on a record type.

    The set is sealed: anything that is not a scalar, a reference or a
    collection is OTHER and is skipped by the synthesizer.
    """
    SCALAR = "scalar"            # Primitive value (string, number, date, enum)
    REFERENCE = "reference"      # id/name/type triple pointing at another entity
    COLLECTION = "collection"    # Wrapper exposing an array of child records
    OTHER = "other"              # Unsupported composite (address, custom fields)

    def is_supported(self) -> bool:
        """Check if the synthesizer has a rule for this shape."""
        return self in (FieldShape.SCALAR, FieldShape.REFERENCE, FieldShape.COLLECTION)


# ============================================================================
# SCALAR KINDS
# ============================================================================

class ScalarKind(str, Enum):
    """
    Semantic kind of a scalar value.

    OBJECT and ARRAY are composite kinds; the scalar mapper returns
    None for them so the caller tries the next rule.
    """
    TEXT = "text"
    CHAR = "char"
    INT32 = "int32"
    INT64 = "int64"
    INT16 = "int16"
    INT8 = "int8"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DECIMAL = "decimal"
    DOUBLE = "double"
    SINGLE = "single"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"

    def is_composite(self) -> bool:
        """Check if this kind describes a non-scalar value."""
        return self in (ScalarKind.ARRAY, ScalarKind.OBJECT)

    @classmethod
    def parse(cls, value) -> "ScalarKind":
        """
        Resolve a kind from its value or a common alias.

        Args:
            value: ScalarKind, canonical value ("int32") or alias ("int", "long")

        Returns:
            ScalarKind

        Raises:
            ValueError if the value is not a known kind or alias
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        kind = _KIND_ALIASES.get(key)
        if kind is None:
            raise ValueError(f"Unknown scalar kind: {value!r}")
        return kind


_KIND_ALIASES = {
    "string": ScalarKind.TEXT,
    "str": ScalarKind.TEXT,
    "int": ScalarKind.INT32,
    "integer": ScalarKind.INT32,
    "long": ScalarKind.INT64,
    "bigint": ScalarKind.INT64,
    "short": ScalarKind.INT16,
    "smallint": ScalarKind.INT16,
    "byte": ScalarKind.INT8,
    "tinyint": ScalarKind.INT8,
    "bool": ScalarKind.BOOLEAN,
    "date": ScalarKind.DATETIME,
    "timestamp": ScalarKind.DATETIME,
    "float64": ScalarKind.DOUBLE,
    "float": ScalarKind.SINGLE,
    "float32": ScalarKind.SINGLE,
    "real": ScalarKind.SINGLE,
    "money": ScalarKind.DECIMAL,
    "enumeration": ScalarKind.ENUM,
    "list": ScalarKind.ARRAY,
    "class": ScalarKind.OBJECT,
    "record": ScalarKind.OBJECT,
}


# ============================================================================
# SKIP REASONS
# ============================================================================

class SkipReason(str, Enum):
    """Why the synthesizer dropped a field without emitting columns."""
    UNSUPPORTED_SHAPE = "unsupported_shape"          # No rule matched
    MALFORMED_COLLECTION = "malformed_collection"    # *List without element array
    KEY_COLLISION = "key_collision"                  # Name taken by a PK/FK column
    DUPLICATE_TABLE = "duplicate_table"              # Child table name already used

    def describe(self, field_name: Optional[str] = None) -> str:
        """Human-readable reason, used in log lines."""
        target = f"'{field_name}'" if field_name else "field"
        if self is SkipReason.MALFORMED_COLLECTION:
            return f"collection {target} exposes no element array"
        if self is SkipReason.KEY_COLLISION:
            return f"{target} would overwrite a key column"
        if self is SkipReason.DUPLICATE_TABLE:
            return f"collection {target} maps to a table name already in use"
        return f"{target} has no supported shape"


__all__ = [
    "FieldShape",
    "ScalarKind",
    "SkipReason",
]
