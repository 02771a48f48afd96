# ============================================================================
# CLAUDE CONTEXT - TYPE DESCRIPTOR WALKER
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Field normalization ahead of synthesis
# PURPOSE: Produce the ordered list of fields a table should be built from
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: walk_fields, walk_element_fields
# DEPENDENCIES: none
# ============================================================================
"""
Type Descriptor Walker.

Hides source artifacts from the synthesizer:
- WSDL serializer flags ("tranDateSpecified")
- The identity field, which the synthesizer materializes itself
"""

from typing import List, Optional

from core.config.defaults import NamingDefaults
from core.errors import InvalidInputError
from core.models.descriptor import FieldDescriptor, TypeDescriptor


def _require(descriptor: Optional[TypeDescriptor]) -> TypeDescriptor:
    if descriptor is None:
        raise InvalidInputError("Type descriptor is required", field="descriptor")
    if not isinstance(descriptor, TypeDescriptor):
        raise InvalidInputError(
            f"Expected TypeDescriptor, got {type(descriptor).__name__}",
            field="descriptor",
        )
    return descriptor


def walk_fields(
    descriptor: Optional[TypeDescriptor],
    naming: Optional[NamingDefaults] = None,
) -> List[FieldDescriptor]:
    """
    Fields of a root type to process, in declaration order.

    Args:
        descriptor: Root type descriptor
        naming: Naming conventions (artifact suffix, identity field)

    Returns:
        Fields minus serializer artifacts and the identity field

    Raises:
        InvalidInputError if descriptor is absent
    """
    descriptor = _require(descriptor)
    naming = naming or NamingDefaults()
    return [
        fd for fd in descriptor.fields
        if not naming.is_artifact(fd.name) and not naming.is_identity(fd.name)
    ]


def walk_element_fields(
    descriptor: Optional[TypeDescriptor],
    naming: Optional[NamingDefaults] = None,
) -> List[FieldDescriptor]:
    """
    Fields of a collection element type, in declaration order.

    Only serializer artifacts are dropped; an element's own identity
    field is an ordinary column on the child table.
    """
    descriptor = _require(descriptor)
    naming = naming or NamingDefaults()
    return [fd for fd in descriptor.fields if not naming.is_artifact(fd.name)]


__all__ = [
    "walk_fields",
    "walk_element_fields",
]
