# ============================================================================
# CLAUDE CONTEXT - MODELS MODULE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Input side:
    - TypeDescriptor / FieldDescriptor describe a record type

Output side:
    - Column / Table / Schema describe the relational result
    - SkippedField records fields dropped by the synthesizer
"""

from core.models.descriptor import FieldDescriptor, TypeDescriptor
from core.models.table import Column, Table, Schema, SkippedField

__all__ = [
    # Descriptors
    "FieldDescriptor",
    "TypeDescriptor",
    # Schema
    "Column",
    "Table",
    "Schema",
    "SkippedField",
]
