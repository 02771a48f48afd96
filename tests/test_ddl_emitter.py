# ============================================================================
# DDL EMITTER TESTS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Tests - CREATE TABLE rendering and file output
# PURPOSE: Verify clause order, quoting, schema ordering and file writes
# CREATED: 19 OCT 2026
# ============================================================================
"""
DDL Emitter Tests

Tests:
1. Exact rendering of root and child tables
2. PK before FK, columns before constraints, no doubled commas
3. FK omitted on request or when the triple is incomplete
4. Schema script keeps parents before children
5. One .sql file per table, directory created on demand
6. Filesystem failures raise SchemaOutputError, earlier files stay

Run with:
    pytest tests/test_ddl_emitter.py -v
"""

import pytest

from core.config import OutputDefaults
from core.errors import SchemaOutputError
from core.models import FieldDescriptor, Table, TypeDescriptor
from core.schema import (
    DDLEmitter,
    emit_schema,
    emit_schema_to_files,
    emit_table,
    quote_identifier,
    synthesize,
)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def invoice_schema():
    item = TypeDescriptor(name="InvoiceItem", fields=[FieldDescriptor.scalar("price", "decimal")])
    invoice = TypeDescriptor(name="Invoice", fields=[
        FieldDescriptor.scalar("internalId", "string"),
        FieldDescriptor.scalar("amount", "decimal"),
        FieldDescriptor.collection("ItemList", item),
    ])
    return synthesize(invoice)


ROOT_DDL = (
    "CREATE TABLE [Invoice] (\n"
    "    [internalId] NVARCHAR(50) NOT NULL,\n"
    "    [amount] DECIMAL(18,6) NULL,\n"
    "    CONSTRAINT [PK_Invoice] PRIMARY KEY ([internalId])\n"
    ");\n"
)

CHILD_DDL = (
    "CREATE TABLE [Invoice_ItemList] (\n"
    "    [Invoice_internalId] NVARCHAR(50) NOT NULL,\n"
    "    [Invoice_ItemListId] BIGINT NOT NULL,\n"
    "    [price] DECIMAL(18,6) NULL,\n"
    "    CONSTRAINT [PK_Invoice_ItemList] PRIMARY KEY ([Invoice_ItemListId]),\n"
    "    CONSTRAINT [FK_Invoice_ItemList_Invoice] FOREIGN KEY ([Invoice_internalId]) "
    "REFERENCES [Invoice]([internalId])\n"
    ");\n"
)


# ============================================================================
# TABLE RENDERING
# ============================================================================

class TestEmitTable:

    def test_root_table(self, invoice_schema):
        assert emit_table(invoice_schema.root) == ROOT_DDL

    def test_child_table(self, invoice_schema):
        assert emit_table(invoice_schema.get_table("Invoice_ItemList")) == CHILD_DDL

    def test_pk_precedes_fk(self, invoice_schema):
        ddl = emit_table(invoice_schema.get_table("Invoice_ItemList"))
        assert ddl.index("[price]") < ddl.index("PRIMARY KEY") < ddl.index("FOREIGN KEY")

    def test_no_doubled_commas(self, invoice_schema):
        for table in invoice_schema.tables:
            ddl = emit_table(table)
            assert ",," not in ddl
            assert ",\n);" not in ddl

    def test_without_foreign_key(self, invoice_schema):
        ddl = emit_table(invoice_schema.get_table("Invoice_ItemList"), include_foreign_key=False)
        assert "FOREIGN KEY" not in ddl
        assert ddl.endswith("PRIMARY KEY ([Invoice_ItemListId])\n);\n")

    def test_partial_fk_not_rendered(self):
        table = Table(name="Loose", parent_table_name="Parent")
        table.add_or_ensure_column("a", "INT")
        ddl = emit_table(table)
        assert "FOREIGN KEY" not in ddl
        assert "PRIMARY KEY" not in ddl
        assert ddl == "CREATE TABLE [Loose] (\n    [a] INT NULL\n);\n"

    def test_custom_indent(self, invoice_schema):
        emitter = DDLEmitter(OutputDefaults(indent="\t"))
        assert "\t[internalId] NVARCHAR(50) NOT NULL," in emitter.emit_table(invoice_schema.root)

    def test_quote_identifier_escapes_bracket(self):
        assert quote_identifier("a]b") == "[a]]b]"


# ============================================================================
# SCHEMA RENDERING
# ============================================================================

class TestEmitSchema:

    def test_concatenation(self, invoice_schema):
        assert emit_schema(invoice_schema) == ROOT_DDL + "\n" + CHILD_DDL

    def test_parent_before_child(self, invoice_schema):
        script = emit_schema(invoice_schema)
        assert script.index("CREATE TABLE [Invoice] (") < script.index("CREATE TABLE [Invoice_ItemList] (")

    def test_blank_line_between_tables(self, invoice_schema):
        assert ");\n\nCREATE TABLE" in emit_schema(invoice_schema)


# ============================================================================
# FILE OUTPUT
# ============================================================================

class TestEmitSchemaToFiles:

    def test_writes_one_file_per_table(self, invoice_schema, tmp_path):
        target = tmp_path / "out" / "sql"
        script = emit_schema_to_files(invoice_schema, target)

        assert script == emit_schema(invoice_schema)
        assert sorted(p.name for p in target.iterdir()) == ["Invoice.sql", "Invoice_ItemList.sql"]
        assert (target / "Invoice.sql").read_text(encoding="utf-8") == ROOT_DDL
        assert (target / "Invoice_ItemList.sql").read_text(encoding="utf-8") == CHILD_DDL

    def test_overwrites_existing_files(self, invoice_schema, tmp_path):
        (tmp_path / "Invoice.sql").write_text("stale", encoding="utf-8")
        emit_schema_to_files(invoice_schema, tmp_path)
        assert (tmp_path / "Invoice.sql").read_text(encoding="utf-8") == ROOT_DDL

    def test_directory_failure(self, invoice_schema, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(SchemaOutputError) as exc_info:
            emit_schema_to_files(invoice_schema, blocker / "sql")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_write_failure_keeps_earlier_files(self, invoice_schema, tmp_path):
        # A directory where the child's file should go makes that write fail
        (tmp_path / "Invoice_ItemList.sql").mkdir()

        with pytest.raises(SchemaOutputError) as exc_info:
            emit_schema_to_files(invoice_schema, tmp_path)

        assert exc_info.value.path.endswith("Invoice_ItemList.sql")
        assert (tmp_path / "Invoice.sql").read_text(encoding="utf-8") == ROOT_DDL


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
