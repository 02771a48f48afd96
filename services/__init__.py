# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Pipeline layer
# PURPOSE: Descriptor loading and schema generation services
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Services coordinate descriptor sources with the schema engine.

Usage:
    from services import SchemaService

    result = SchemaService().generate("Invoice", dry_run=True)
"""

from .descriptor_service import DescriptorService
from .schema_service import SchemaService, GenerationResult

__all__ = [
    "DescriptorService",
    "SchemaService",
    "GenerationResult",
]
