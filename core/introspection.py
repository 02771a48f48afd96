# ============================================================================
# CLAUDE CONTEXT - MODEL INTROSPECTION
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Boundary - Build type descriptors from pydantic models
# PURPOSE: Confine runtime reflection to the edge of the system
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: describe_model
# DEPENDENCIES: pydantic
# ============================================================================
"""
Pydantic Model to TypeDescriptor.

The schema engine never reflects on live types. When the record model is
available as pydantic classes (e.g. generated from a WSDL), this module
turns a model class or instance into a TypeDescriptor once, at the edge.

Type rules:
    str -> TEXT, int -> INT64, float -> DOUBLE, Decimal -> DECIMAL,
    bool -> BOOLEAN, datetime/date -> DATETIME, Enum -> ENUM
    Optional[X] -> same as X
    model named in NamingDefaults.reference_type_names -> REFERENCE
    other model -> COLLECTION, element = first List[Model] member
                   (element None when the model has no such member)
    anything else (lists, dicts, bytes) -> OTHER

Model Metadata Convention:
    __sql_kinds__: Dict of {field: kind} overriding the scalar kind,
    e.g. {"quantity": "int32", "rate": "single"}

Nesting is described to two levels (root, collection element); deeper
models become OTHER.
"""

import types
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel

from core.config.defaults import NamingDefaults
from core.contracts import ScalarKind
from core.errors import InvalidInputError
from core.logging import ComponentType, get_logger
from core.models.descriptor import FieldDescriptor, TypeDescriptor

logger = get_logger(__name__, ComponentType.INTROSPECTION)

MAX_DEPTH = 2

# Order matters: Enum before str (str-enums), bool before int, datetime before date
_PYTHON_KINDS: List[Tuple[type, ScalarKind]] = [
    (Enum, ScalarKind.ENUM),
    (bool, ScalarKind.BOOLEAN),
    (str, ScalarKind.TEXT),
    (int, ScalarKind.INT64),
    (float, ScalarKind.DOUBLE),
    (Decimal, ScalarKind.DECIMAL),
    (datetime, ScalarKind.DATETIME),
    (date, ScalarKind.DATETIME),
]


def describe_model(
    model: Any,
    naming: Optional[NamingDefaults] = None,
) -> TypeDescriptor:
    """
    Build a TypeDescriptor from a pydantic model class or instance.

    Args:
        model: BaseModel subclass or instance (e.g. a sample Invoice)
        naming: Conventions (reference type names)

    Returns:
        TypeDescriptor named after the model class

    Raises:
        InvalidInputError if model is absent or not a pydantic model
    """
    if model is None:
        raise InvalidInputError("Model is required", field="model")
    if isinstance(model, BaseModel):
        model = type(model)
    if not _is_model(model):
        raise InvalidInputError(
            f"Expected a pydantic model, got {model!r}", field="model"
        )
    return _describe(model, naming or NamingDefaults(), depth=1)


# ============================================================================
# INTERNALS
# ============================================================================

def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _unwrap_optional(annotation: Any) -> Any:
    """Optional[X] / X | None -> X; other unions are left alone."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _scalar_kind(tp: Any) -> Optional[ScalarKind]:
    if not isinstance(tp, type):
        return None
    for python_type, kind in _PYTHON_KINDS:
        if issubclass(tp, python_type):
            return kind
    return None


def _kind_overrides(model: Type[BaseModel]) -> Dict[str, Any]:
    overrides = getattr(model, "__sql_kinds__", None)
    return dict(overrides) if isinstance(overrides, dict) else {}


def _list_element(model: Type[BaseModel]) -> Optional[Type[BaseModel]]:
    """Element model of the first list member of a wrapper model."""
    for info in model.model_fields.values():
        annotation = _unwrap_optional(info.annotation)
        if get_origin(annotation) in (list, List, tuple):
            args = get_args(annotation)
            element = _unwrap_optional(args[0]) if args else None
            return element if _is_model(element) else None
    return None


def _describe(model: Type[BaseModel], naming: NamingDefaults, depth: int) -> TypeDescriptor:
    overrides = _kind_overrides(model)
    fields = []
    for attr_name, info in model.model_fields.items():
        name = info.alias or attr_name
        override = overrides.get(attr_name, overrides.get(name))
        fields.append(_describe_field(name, info.annotation, override, naming, depth))
    logger.debug(f"Described {model.__name__} with {len(fields)} field(s) at depth {depth}")
    return TypeDescriptor(name=model.__name__, fields=fields)


def _describe_field(
    name: str,
    annotation: Any,
    override: Any,
    naming: NamingDefaults,
    depth: int,
) -> FieldDescriptor:
    actual = _unwrap_optional(annotation)

    if override is not None:
        return FieldDescriptor.scalar(name, override)

    kind = _scalar_kind(actual)
    if kind is not None:
        return FieldDescriptor.scalar(name, kind)

    if _is_model(actual):
        if actual.__name__ in naming.reference_type_names:
            return FieldDescriptor.reference(name)
        if depth < MAX_DEPTH:
            element = _list_element(actual)
            if element is None:
                return FieldDescriptor.collection(name, None)
            return FieldDescriptor.collection(name, _describe(element, naming, depth + 1))

    return FieldDescriptor.other(name)


__all__ = [
    "describe_model",
]
