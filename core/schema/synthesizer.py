# ============================================================================
# CLAUDE CONTEXT - TABLE SYNTHESIZER
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - Relational schema synthesis from type descriptors
# PURPOSE: Derive root and child tables with PK/FK conventions
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: TableSynthesizer, synthesize
# DEPENDENCIES: pydantic
# ============================================================================
"""
Type Descriptor to Relational Schema Synthesizer.

Walks a root TypeDescriptor and produces a Schema: one root table plus
one child table per "*List" collection field.

Field rules, applied in order on the root type:
    1. Scalar   -> one column
    2. Reference -> three flattened columns ({F}_rf_InternalId/Name/Type)
    3. *List     -> child table {Parent}_{Field}
    4. anything else -> skipped (recorded on Schema.skipped)

Collection element types get rules 1 and 2 only, so traversal never goes
deeper than two levels.

Key columns belong to the synthesizer. A data field whose column name
matches a PK/FK column is skipped (key_collision), and a collection whose
child table name is already taken is skipped (duplicate_table).

Key conventions:
    root PK   internalId NVARCHAR(50) NOT NULL, or synthetic {Table}Id
    child FK  {Parent}_{ParentPk} NVARCHAR(50) NOT NULL
    child PK  {Child}Id BIGINT NOT NULL

Usage:
    synthesizer = TableSynthesizer()
    schema = synthesizer.synthesize(invoice_descriptor)
    schema.table_names   # ["Invoice", "Invoice_itemList", ...]
"""

from typing import List, Optional

from core.config.defaults import GeneratorDefaults
from core.contracts import FieldShape, SkipReason
from core.errors import InvalidInputError
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models.descriptor import FieldDescriptor, TypeDescriptor
from core.models.table import Column, Schema, SkippedField, Table
from core.schema.ddl_utils import map_scalar, reference_columns
from core.schema.walker import walk_element_fields, walk_fields

logger = get_logger(__name__, ComponentType.SYNTHESIZER)


class TableSynthesizer:
    """
    Convert a TypeDescriptor into an ordered relational Schema.

    Stateless between calls: every synthesize() builds a fresh Schema.
    """

    def __init__(self, defaults: Optional[GeneratorDefaults] = None):
        """
        Initialize the synthesizer.

        Args:
            defaults: Naming and SQL type conventions (module defaults if omitted)
        """
        self.defaults = defaults or GeneratorDefaults()
        self.naming = self.defaults.naming
        self.sql_types = self.defaults.sql_types

    # =========================================================================
    # ENTRY POINT
    # =========================================================================

    def synthesize(
        self,
        root_type: Optional[TypeDescriptor],
        root_table_name: Optional[str] = None,
    ) -> Schema:
        """
        Build the schema for a root type.

        Args:
            root_type: Descriptor of the record (e.g. Invoice)
            root_table_name: Root table name (defaults to the type name)

        Returns:
            Schema with the root table first

        Raises:
            InvalidInputError if root_type is absent or the table name is blank
        """
        if root_type is None:
            raise InvalidInputError("Root type descriptor is required", field="root_type")

        fields = walk_fields(root_type, self.naming)

        table_name = root_type.name if root_table_name is None else root_table_name.strip()
        if not table_name:
            raise InvalidInputError("Root table name must not be empty", field="root_table_name")

        child_tables: List[Table] = []
        skipped: List[SkippedField] = []

        with log_context(type_name=root_type.name, table=table_name, operation="synthesize"):
            log_checkpoint("synthesis_started", {"field_count": len(root_type.fields)})

            root = Table(name=table_name)
            self._add_identity(root, root_type)

            for fd in fields:
                self._add_field(fd, root, child_tables, skipped)

            schema = Schema(
                source_type=root_type.name,
                tables=[root, *child_tables],
                skipped=skipped,
            )

            logger.info(
                f"Synthesized {len(schema.tables)} table(s) from {root_type.name} "
                f"({len(root.columns)} root columns, {len(skipped)} field(s) skipped)"
            )
            log_checkpoint("synthesis_completed", {"tables": schema.table_names})

        return schema

    # =========================================================================
    # ROOT TABLE
    # =========================================================================

    def _add_identity(self, table: Table, root_type: TypeDescriptor) -> None:
        """Natural identity when the type declares one, else {Table}Id."""
        if root_type.has_field(self.naming.identity_field, ignore_case=True):
            pk_name = self.naming.identity_field
        else:
            pk_name = f"{table.name}Id"
            logger.debug(f"No {self.naming.identity_field} on {root_type.name}, using {pk_name}")

        table.add_or_ensure_column(pk_name, self.sql_types.identity_type, nullable=False)
        table.primary_key_column = pk_name

    def _add_field(
        self,
        fd: FieldDescriptor,
        table: Table,
        child_tables: List[Table],
        skipped: List[SkippedField],
    ) -> None:
        columns = self._columns_for(fd)
        if columns is not None:
            self._add_columns(fd, columns, table, skipped)
            return

        if self.naming.is_collection_name(fd.name):
            self._add_child_table(fd, table, child_tables, skipped)
            return

        # Address-style composites have no rule yet
        self._skip(table, fd, SkipReason.UNSUPPORTED_SHAPE, skipped)

    # =========================================================================
    # FIELD RULES
    # =========================================================================

    def _columns_for(self, fd: FieldDescriptor) -> Optional[List[Column]]:
        """Columns for a scalar or reference field; None for anything else."""
        if fd.shape is FieldShape.SCALAR:
            sql_type = map_scalar(fd.kind)
            if sql_type is None:
                return None
            return [Column(name=fd.name, sql_type=sql_type, nullable=fd.nullable)]
        if fd.shape is FieldShape.REFERENCE:
            return reference_columns(fd.name, self.naming, self.sql_types)
        return None

    def _add_columns(
        self,
        fd: FieldDescriptor,
        columns: List[Column],
        table: Table,
        skipped: List[SkippedField],
    ) -> None:
        # Key columns are owned by the synthesizer; data fields never retype them
        if any(table.is_key_column(col.name) for col in columns):
            self._skip(table, fd, SkipReason.KEY_COLLISION, skipped)
            return
        for col in columns:
            table.add_or_ensure_column(col.name, col.sql_type, nullable=col.nullable)
        logger.debug(f"Column(s) {table.name}.{', '.join(c.name for c in columns)}")

    def _add_child_table(
        self,
        fd: FieldDescriptor,
        parent: Table,
        child_tables: List[Table],
        skipped: List[SkippedField],
    ) -> None:
        """
        Child table for a *List wrapper.

        Args:
            fd: Collection field on the parent type
            parent: Parent table (its primary key must already be set)
            child_tables: Accumulator, appended in encounter order
            skipped: Accumulator for dropped fields
        """
        element = fd.element_type if fd.shape is FieldShape.COLLECTION else None
        if element is None:
            self._skip(parent, fd, SkipReason.MALFORMED_COLLECTION, skipped)
            return

        child_name = f"{parent.name}_{fd.name}"
        taken = {t.name.lower() for t in (parent, *child_tables)}
        if child_name.lower() in taken:
            self._skip(parent, fd, SkipReason.DUPLICATE_TABLE, skipped)
            return

        child = Table(name=child_name)

        with log_context(table=child.name, field_name=fd.name):
            fk_name = f"{parent.name}_{parent.primary_key_column}"
            child.add_or_ensure_column(fk_name, self.sql_types.foreign_key_type, nullable=False)
            child.link_parent(parent.name, parent.primary_key_column, fk_name)

            # List elements rarely carry their own identity
            pk_name = f"{child.name}Id"
            child.add_or_ensure_column(pk_name, self.sql_types.child_key_type, nullable=False)
            child.primary_key_column = pk_name

            for efd in walk_element_fields(element, self.naming):
                columns = self._columns_for(efd)
                if columns is None:
                    # Nested collections are never expanded
                    self._skip(child, efd, SkipReason.UNSUPPORTED_SHAPE, skipped)
                    continue
                self._add_columns(efd, columns, child, skipped)

        child_tables.append(child)
        logger.debug(f"Child table {child.name} with {len(child.columns)} columns")

    def _skip(
        self,
        table: Table,
        fd: FieldDescriptor,
        reason: SkipReason,
        skipped: List[SkippedField],
    ) -> None:
        skipped.append(SkippedField(table=table.name, field=fd.name, reason=reason))
        message = f"Skipping {table.name}.{fd.name}: {reason.describe(fd.name)}"
        if reason is SkipReason.UNSUPPORTED_SHAPE:
            logger.debug(message)
        else:
            logger.warning(message)


def synthesize(
    root_type: Optional[TypeDescriptor],
    root_table_name: Optional[str] = None,
    defaults: Optional[GeneratorDefaults] = None,
) -> Schema:
    """Convenience wrapper around TableSynthesizer.synthesize."""
    return TableSynthesizer(defaults).synthesize(root_type, root_table_name)


__all__ = [
    "TableSynthesizer",
    "synthesize",
]
