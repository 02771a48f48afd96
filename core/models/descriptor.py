# ============================================================================
# CLAUDE CONTEXT - TYPE DESCRIPTOR MODELS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core model - Input boundary of the schema engine
# PURPOSE: Describe a record type's ordered fields and their shapes
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: FieldDescriptor, TypeDescriptor
# DEPENDENCIES: pydantic
# ============================================================================
"""
Type Descriptor Models

A TypeDescriptor is a static, read-only description of a record type:
its name and an ordered list of fields, each tagged with a shape.

Descriptors are built once (by hand, from YAML/JSON files, or by
introspecting a pydantic model at the edge of the system) and then
handed to the schema engine, which never inspects live types itself.

YAML forms accepted for "fields":

    fields:                              # list form
      - {name: internalId, kind: string}
      - {name: entity, shape: reference}

    fields:                              # mapping shorthand
      internalId: string
      entity: reference
      itemList:
        shape: collection
        element_type: {name: InvoiceItem, fields: {amount: decimal}}
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from core.contracts import FieldShape, ScalarKind


class FieldDescriptor(BaseModel):
    """
    One named member of a record type.

    shape decides which synthesizer rule applies:
    - SCALAR: kind is required for a column to be produced
    - REFERENCE: flattened into three columns
    - COLLECTION: element_type describes the array element; None means
      the wrapper exposes no array member
    - OTHER: skipped
    """
    name: str = Field(..., min_length=1, max_length=128)
    shape: FieldShape = Field(default=FieldShape.SCALAR)
    kind: Optional[ScalarKind] = Field(
        default=None,
        description="Semantic scalar kind (SCALAR fields only)"
    )
    nullable: bool = Field(
        default=True,
        description="Column nullability; False forces NOT NULL"
    )
    element_type: Optional["TypeDescriptor"] = Field(
        default=None,
        description="Array element type (COLLECTION fields only)"
    )
    description: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def infer_shape(cls, data: Any) -> Any:
        """Default the shape from whichever of kind/element_type is given."""
        if isinstance(data, dict) and data.get("shape") is None:
            data = dict(data)
            if data.get("kind") is not None:
                data["shape"] = FieldShape.SCALAR
            elif data.get("element_type") is not None:
                data["shape"] = FieldShape.COLLECTION
            else:
                data["shape"] = FieldShape.OTHER
        return data

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, v):
        """Accept aliases such as "string", "long", "bool"."""
        if v is None:
            return v
        return ScalarKind.parse(v)

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def scalar(cls, name: str, kind, nullable: bool = True) -> "FieldDescriptor":
        return cls(name=name, shape=FieldShape.SCALAR, kind=kind, nullable=nullable)

    @classmethod
    def reference(cls, name: str) -> "FieldDescriptor":
        return cls(name=name, shape=FieldShape.REFERENCE)

    @classmethod
    def collection(
        cls, name: str, element_type: Optional["TypeDescriptor"] = None
    ) -> "FieldDescriptor":
        return cls(name=name, shape=FieldShape.COLLECTION, element_type=element_type)

    @classmethod
    def other(cls, name: str) -> "FieldDescriptor":
        return cls(name=name, shape=FieldShape.OTHER)


class TypeDescriptor(BaseModel):
    """
    Ordered description of a record type.

    Field order is the source declaration order and drives column order.
    """
    name: str = Field(..., min_length=1, max_length=128)
    fields: List[FieldDescriptor] = Field(default_factory=list)
    description: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("fields", mode="before")
    @classmethod
    def expand_mapping(cls, v):
        """Expand the {name: spec} shorthand into the list form."""
        if not isinstance(v, dict):
            return v
        expanded = []
        for name, spec in v.items():
            expanded.append(_expand_field_spec(name, spec))
        return expanded

    def get_field(self, name: str, ignore_case: bool = False) -> Optional[FieldDescriptor]:
        """Find a field by name."""
        for fd in self.fields:
            if fd.name == name or (ignore_case and fd.name.lower() == name.lower()):
                return fd
        return None

    def has_field(self, name: str, ignore_case: bool = False) -> bool:
        return self.get_field(name, ignore_case=ignore_case) is not None

    @property
    def field_names(self) -> List[str]:
        return [fd.name for fd in self.fields]


def _expand_field_spec(name: str, spec: Any) -> Dict[str, Any]:
    """
    Turn a shorthand spec into FieldDescriptor input.

    A bare string is a shape ("reference", "collection", "other")
    or else a scalar kind ("string", "decimal").
    """
    if spec is None:
        return {"name": name, "shape": FieldShape.OTHER}
    if isinstance(spec, str):
        shapes = {s.value for s in FieldShape}
        if spec.strip().lower() in shapes:
            return {"name": name, "shape": spec.strip().lower()}
        return {"name": name, "shape": FieldShape.SCALAR, "kind": spec}
    if isinstance(spec, dict):
        return {"name": name, **spec}
    return spec


FieldDescriptor.model_rebuild()


__all__ = [
    "FieldDescriptor",
    "TypeDescriptor",
]
