# ============================================================================
# CLAUDE CONTEXT - DDL EMITTER
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core - CREATE TABLE rendering
# PURPOSE: Render tables and schemas to bracket-identifier DDL text/files
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: DDLEmitter, emit_table, emit_schema, emit_schema_to_files
# DEPENDENCIES: none
# ============================================================================
"""
Schema to DDL Emitter.

Rendering of one table:

    CREATE TABLE [Invoice_itemList] (
        [Invoice_internalId] NVARCHAR(50) NOT NULL,
        [Invoice_itemListId] BIGINT NOT NULL,
        [amount] DECIMAL(18,6) NULL,
        CONSTRAINT [PK_Invoice_itemList] PRIMARY KEY ([Invoice_itemListId]),
        CONSTRAINT [FK_Invoice_itemList_Invoice] FOREIGN KEY ([Invoice_internalId]) REFERENCES [Invoice]([internalId])
    );

Clause order is fixed: columns, PK constraint, FK constraint.
Schemas render in table order, so parents always precede children.

Usage:
    emitter = DDLEmitter()
    script = emitter.emit_schema(schema)
    emitter.emit_schema_to_files(schema, "out/sql")
"""

from pathlib import Path
from typing import List, Optional, Union

from core.config.defaults import OutputDefaults
from core.errors import SchemaOutputError
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models.table import Schema, Table
from core.schema.ddl_utils import quote_identifier

logger = get_logger(__name__, ComponentType.EMITTER)


class DDLEmitter:
    """
    Render Table/Schema models as CREATE TABLE statements.
    """

    def __init__(self, output: Optional[OutputDefaults] = None):
        """
        Initialize the emitter.

        Args:
            output: Indentation, file naming and encoding settings
        """
        self.output = output or OutputDefaults()

    # =========================================================================
    # TABLE
    # =========================================================================

    def table_clauses(self, table: Table, include_foreign_key: bool = True) -> List[str]:
        """Column and constraint clauses of a table, in emission order."""
        clauses = [
            f"{quote_identifier(col.name)} {col.sql_type} {col.null_clause}"
            for col in table.columns
        ]

        if table.primary_key_column:
            clauses.append(
                f"CONSTRAINT {quote_identifier('PK_' + table.name)} "
                f"PRIMARY KEY ({quote_identifier(table.primary_key_column)})"
            )

        if include_foreign_key and table.has_foreign_key:
            clauses.append(
                f"CONSTRAINT {quote_identifier(f'FK_{table.name}_{table.parent_table_name}')} "
                f"FOREIGN KEY ({quote_identifier(table.foreign_key_column)}) "
                f"REFERENCES {quote_identifier(table.parent_table_name)}"
                f"({quote_identifier(table.parent_pk_column)})"
            )

        return clauses

    def emit_table(self, table: Table, include_foreign_key: bool = True) -> str:
        """
        Generate CREATE TABLE DDL for a single table.

        Args:
            table: Table definition
            include_foreign_key: Render the FK constraint when the table has one

        Returns:
            DDL text ending with ");" and a newline
        """
        indent = self.output.indent
        body = ",\n".join(f"{indent}{clause}" for clause in self.table_clauses(table, include_foreign_key))

        lines = [f"CREATE TABLE {quote_identifier(table.name)} ("]
        if body:
            lines.append(body)
        lines.append(");")
        return "\n".join(lines) + "\n"

    # =========================================================================
    # SCHEMA
    # =========================================================================

    def emit_schema(self, schema: Schema, include_foreign_key: bool = True) -> str:
        """
        Generate all CREATE TABLE statements as one script.

        Tables are separated by a blank line, parents before children.
        """
        return "\n".join(
            self.emit_table(table, include_foreign_key) for table in schema.tables
        )

    def emit_schema_to_files(
        self,
        schema: Schema,
        directory: Union[str, Path],
        include_foreign_key: bool = True,
    ) -> str:
        """
        Generate the schema script and write one .sql file per table.

        Args:
            schema: Schema to render
            directory: Target directory (created if absent)
            include_foreign_key: Render FK constraints

        Returns:
            Combined script, same as emit_schema()

        Raises:
            SchemaOutputError if the directory or a file cannot be written;
            files written before the failure are left in place
        """
        target = Path(directory)

        with log_context(type_name=schema.source_type, operation="write_files"):
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SchemaOutputError(
                    f"Cannot create output directory {target}: {e}", path=str(target)
                ) from e

            parts = []
            for table in schema.tables:
                sql = self.emit_table(table, include_foreign_key)
                parts.append(sql)

                file_path = target / self.output.file_name(table.name)
                try:
                    file_path.write_text(sql, encoding=self.output.encoding)
                except OSError as e:
                    raise SchemaOutputError(
                        f"Cannot write {file_path}: {e}", path=str(file_path)
                    ) from e
                logger.debug(f"Wrote {file_path}")

            log_checkpoint("schema_written", {"directory": str(target), "files": len(parts)})

        logger.info(f"Wrote {len(parts)} .sql file(s) to {target}")
        return "\n".join(parts)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def emit_table(table: Table, include_foreign_key: bool = True) -> str:
    """Render one table with the default emitter."""
    return DDLEmitter().emit_table(table, include_foreign_key)


def emit_schema(schema: Schema, include_foreign_key: bool = True) -> str:
    """Render a schema with the default emitter."""
    return DDLEmitter().emit_schema(schema, include_foreign_key)


def emit_schema_to_files(
    schema: Schema,
    directory: Union[str, Path],
    include_foreign_key: bool = True,
) -> str:
    """Render a schema and write one file per table with the default emitter."""
    return DDLEmitter().emit_schema_to_files(schema, directory, include_foreign_key)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DDLEmitter",
    "emit_table",
    "emit_schema",
    "emit_schema_to_files",
]
