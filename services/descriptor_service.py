# ============================================================================
# DESCRIPTOR SERVICE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Type descriptor management
# PURPOSE: Load and cache type descriptors from YAML/JSON files
# CREATED: 19 OCT 2026
# ============================================================================
"""
Descriptor Service

Loads type descriptors from YAML (or JSON) files and provides lookup
by type name. Caches loaded descriptors.

Descriptor files are stored in the descriptors/ directory by default.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from core.errors import DescriptorLoadError
from core.logging import ComponentType, get_logger
from core.models import TypeDescriptor

logger = get_logger(__name__, ComponentType.SERVICE)

DESCRIPTOR_PATTERNS = ("*.yaml", "*.yml", "*.json")


class DescriptorService:
    """Service for loading and managing type descriptors."""

    def __init__(self, descriptors_dir: Optional[Union[str, Path]] = None):
        """
        Initialize descriptor service.

        Args:
            descriptors_dir: Directory containing descriptor files.
                            Defaults to ./descriptors/
        """
        if descriptors_dir:
            self.descriptors_dir = Path(descriptors_dir)
        else:
            self.descriptors_dir = Path(__file__).parent.parent / "descriptors"

        self._cache: Dict[str, TypeDescriptor] = {}
        self._loaded = False

    def load_all(self) -> int:
        """
        Load all descriptors from the descriptors directory.

        Files that fail to load are logged and skipped.

        Returns:
            Number of descriptors loaded
        """
        if not self.descriptors_dir.exists():
            logger.warning(f"Descriptors directory not found: {self.descriptors_dir}")
            self._loaded = True
            return 0

        count = 0
        for pattern in DESCRIPTOR_PATTERNS:
            for path in sorted(self.descriptors_dir.glob(pattern)):
                try:
                    descriptor = self.load_file(path)
                except DescriptorLoadError as e:
                    logger.error(f"Failed to load {path}: {e}")
                    continue
                self._cache[descriptor.name] = descriptor
                count += 1
                logger.info(f"Loaded descriptor: {descriptor.name} ({len(descriptor.fields)} fields)")

        self._loaded = True
        logger.info(f"Loaded {count} descriptors from {self.descriptors_dir}")
        return count

    def get(self, type_name: str) -> Optional[TypeDescriptor]:
        """
        Get a descriptor by type name.

        Args:
            type_name: Record type name (e.g. "Invoice")

        Returns:
            TypeDescriptor or None if not found
        """
        if not self._loaded:
            self.load_all()

        return self._cache.get(type_name)

    def get_or_raise(self, type_name: str) -> TypeDescriptor:
        """
        Get a descriptor, raising if not found.

        Raises:
            KeyError if descriptor not found
        """
        descriptor = self.get(type_name)
        if descriptor is None:
            raise KeyError(f"Descriptor not found: {type_name}")
        return descriptor

    def list_all(self) -> List[TypeDescriptor]:
        """List all loaded descriptors."""
        if not self._loaded:
            self.load_all()

        return list(self._cache.values())

    def register(self, descriptor: TypeDescriptor) -> None:
        """
        Register a descriptor (for testing or programmatic use).

        Args:
            descriptor: TypeDescriptor to register
        """
        if not isinstance(descriptor, TypeDescriptor):
            raise TypeError(f"Expected TypeDescriptor, got {type(descriptor).__name__}")

        self._cache[descriptor.name] = descriptor
        logger.info(f"Registered descriptor: {descriptor.name}")

    @staticmethod
    def load_file(path: Union[str, Path]) -> TypeDescriptor:
        """
        Load a descriptor from a YAML or JSON file.

        Args:
            path: Path to descriptor file

        Returns:
            TypeDescriptor instance

        Raises:
            DescriptorLoadError if the file is missing, unparsable or invalid
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except OSError as e:
            raise DescriptorLoadError(f"Cannot read {path}: {e}", path=str(path)) from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise DescriptorLoadError(f"Cannot parse {path}: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            raise DescriptorLoadError(
                f"Descriptor in {path} must be a mapping, got {type(data).__name__}",
                path=str(path),
            )

        try:
            return TypeDescriptor.model_validate(data)
        except ValidationError as e:
            raise DescriptorLoadError(f"Invalid descriptor in {path}: {e}", path=str(path)) from e

    def reload(self) -> int:
        """
        Reload all descriptors from disk.

        Returns:
            Number of descriptors loaded
        """
        self._cache.clear()
        self._loaded = False
        return self.load_all()
