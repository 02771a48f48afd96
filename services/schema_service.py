# ============================================================================
# SCHEMA SERVICE
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Generation pipeline
# PURPOSE: Resolve a source type, synthesize its schema, render/write DDL
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Service

Ties the pipeline together:

    source (descriptor | pydantic model | type name)
        -> TypeDescriptor
        -> TableSynthesizer -> Schema
        -> DDLEmitter -> script text (+ one .sql file per table)

Usage:
    service = SchemaService()
    result = service.generate("Invoice", output_dir="sql")
    print(result.sql)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import BaseModel

from core.config.defaults import GeneratorDefaults
from core.errors import InvalidInputError
from core.introspection import describe_model
from core.logging import ComponentType, get_logger
from core.models import Schema, TypeDescriptor
from core.schema import DDLEmitter, TableSynthesizer
from services.descriptor_service import DescriptorService

logger = get_logger(__name__, ComponentType.SERVICE)


@dataclass
class GenerationResult:
    """Outcome of one generation run."""
    schema: Schema
    sql: str
    output_dir: Optional[str] = None
    files: List[str] = field(default_factory=list)

    @property
    def written(self) -> bool:
        return self.output_dir is not None


class SchemaService:
    """Service that runs the descriptor -> schema -> DDL pipeline."""

    def __init__(
        self,
        defaults: Optional[GeneratorDefaults] = None,
        descriptor_service: Optional[DescriptorService] = None,
    ):
        """
        Initialize schema service.

        Args:
            defaults: Conventions for synthesis and output
            descriptor_service: Lookup for type names (default descriptors/ dir)
        """
        self.defaults = defaults or GeneratorDefaults()
        self.descriptors = descriptor_service or DescriptorService()
        self.synthesizer = TableSynthesizer(self.defaults)
        self.emitter = DDLEmitter(self.defaults.output)

    def resolve(self, source: Any) -> TypeDescriptor:
        """
        Turn a source into a TypeDescriptor.

        Args:
            source: TypeDescriptor, pydantic model class/instance, or a
                    registered type name

        Raises:
            InvalidInputError if source is absent or of an unknown kind
            KeyError if a type name is not registered
        """
        if source is None:
            raise InvalidInputError("Source type is required", field="source")
        if isinstance(source, TypeDescriptor):
            return source
        if isinstance(source, BaseModel) or (
            isinstance(source, type) and issubclass(source, BaseModel)
        ):
            return describe_model(source, self.defaults.naming)
        if isinstance(source, str):
            return self.descriptors.get_or_raise(source)
        raise InvalidInputError(
            f"Cannot build a descriptor from {type(source).__name__}", field="source"
        )

    def build_schema(self, source: Any, table_name: Optional[str] = None) -> Schema:
        """Resolve the source and synthesize its schema."""
        return self.synthesizer.synthesize(self.resolve(source), table_name)

    def render(self, schema: Schema, include_foreign_key: bool = True) -> str:
        """Render the schema as one DDL script."""
        return self.emitter.emit_schema(schema, include_foreign_key)

    def write(
        self,
        schema: Schema,
        output_dir: Optional[Union[str, Path]] = None,
        include_foreign_key: bool = True,
    ) -> str:
        """Render the schema and write one file per table."""
        directory = output_dir or self.defaults.output.output_dir
        return self.emitter.emit_schema_to_files(schema, directory, include_foreign_key)

    def generate(
        self,
        source: Any,
        table_name: Optional[str] = None,
        output_dir: Optional[Union[str, Path]] = None,
        dry_run: bool = False,
        include_foreign_key: bool = True,
    ) -> GenerationResult:
        """
        Run the full pipeline.

        Args:
            source: See resolve()
            table_name: Root table name override
            output_dir: Directory for .sql files (defaults from config)
            dry_run: Render only, write nothing
            include_foreign_key: Render FK constraints

        Returns:
            GenerationResult with schema, script text and written files
        """
        schema = self.build_schema(source, table_name)

        if dry_run:
            logger.info(f"[DRY RUN] Rendered {len(schema.tables)} table(s) for {schema.source_type}")
            return GenerationResult(schema=schema, sql=self.render(schema, include_foreign_key))

        directory = Path(output_dir or self.defaults.output.output_dir)
        sql = self.write(schema, directory, include_foreign_key)
        files = [str(directory / self.defaults.output.file_name(t.name)) for t in schema.tables]
        return GenerationResult(schema=schema, sql=sql, output_dir=str(directory), files=files)
