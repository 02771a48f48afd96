# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized naming, type and output conventions
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for schema generation.
"""

from core.config.defaults import (
    NamingDefaults,
    SqlTypeDefaults,
    OutputDefaults,
    GeneratorDefaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "NamingDefaults",
    "SqlTypeDefaults",
    "OutputDefaults",
    "GeneratorDefaults",
    "get_defaults",
    "reset_defaults",
]
