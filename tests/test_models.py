# ============================================================================
# MODEL TESTS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Tests - Contracts, descriptor and schema model unit tests
# PURPOSE: Verify enums, descriptor parsing and table/schema invariants
# CREATED: 19 OCT 2026
# ============================================================================
"""
Model Tests

Unit tests for the model layer:
- Enums: FieldShape, ScalarKind, SkipReason
- Descriptors: FieldDescriptor, TypeDescriptor (list and mapping forms)
- Schema: Column, Table, Schema invariants

Run with:
    pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from core.contracts import FieldShape, ScalarKind, SkipReason
from core.models import Column, FieldDescriptor, Schema, SkippedField, Table, TypeDescriptor


# ============================================================================
# ENUM TESTS
# ============================================================================


class TestFieldShape:
    def test_values(self):
        assert FieldShape.SCALAR.value == "scalar"
        assert FieldShape.REFERENCE.value == "reference"
        assert FieldShape.COLLECTION.value == "collection"
        assert FieldShape.OTHER.value == "other"

    def test_is_supported(self):
        assert FieldShape.SCALAR.is_supported()
        assert FieldShape.REFERENCE.is_supported()
        assert FieldShape.COLLECTION.is_supported()
        assert not FieldShape.OTHER.is_supported()


class TestScalarKind:
    def test_parse_canonical(self):
        assert ScalarKind.parse("int32") is ScalarKind.INT32
        assert ScalarKind.parse(ScalarKind.ENUM) is ScalarKind.ENUM

    def test_parse_aliases(self):
        assert ScalarKind.parse("string") is ScalarKind.TEXT
        assert ScalarKind.parse("int") is ScalarKind.INT32
        assert ScalarKind.parse("long") is ScalarKind.INT64
        assert ScalarKind.parse("short") is ScalarKind.INT16
        assert ScalarKind.parse("byte") is ScalarKind.INT8
        assert ScalarKind.parse("bool") is ScalarKind.BOOLEAN
        assert ScalarKind.parse("float") is ScalarKind.SINGLE
        assert ScalarKind.parse(" Decimal ") is ScalarKind.DECIMAL

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            ScalarKind.parse("uuid")

    def test_is_composite(self):
        assert ScalarKind.ARRAY.is_composite()
        assert ScalarKind.OBJECT.is_composite()
        assert not ScalarKind.TEXT.is_composite()


class TestSkipReason:
    def test_describe(self):
        assert "no element array" in SkipReason.MALFORMED_COLLECTION.describe("itemList")
        assert "'billingAddress'" in SkipReason.UNSUPPORTED_SHAPE.describe("billingAddress")
        assert "key column" in SkipReason.KEY_COLLISION.describe("widgetId")
        assert "already in use" in SkipReason.DUPLICATE_TABLE.describe("AList")


# ============================================================================
# DESCRIPTOR TESTS
# ============================================================================


class TestFieldDescriptor:
    def test_shape_inferred_from_kind(self):
        fd = FieldDescriptor(name="amount", kind="decimal")
        assert fd.shape is FieldShape.SCALAR
        assert fd.kind is ScalarKind.DECIMAL
        assert fd.nullable is True

    def test_shape_inferred_from_element_type(self):
        fd = FieldDescriptor(name="itemList", element_type={"name": "Item", "fields": []})
        assert fd.shape is FieldShape.COLLECTION
        assert fd.element_type.name == "Item"

    def test_shape_defaults_to_other(self):
        assert FieldDescriptor(name="billingAddress").shape is FieldShape.OTHER

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            FieldDescriptor(name="x", kind="geometry")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            FieldDescriptor(name="", kind="string")

    def test_constructors(self):
        assert FieldDescriptor.scalar("n", "int").kind is ScalarKind.INT32
        assert FieldDescriptor.reference("entity").shape is FieldShape.REFERENCE
        assert FieldDescriptor.collection("itemList").element_type is None
        assert FieldDescriptor.other("addr").shape is FieldShape.OTHER

    def test_frozen(self):
        fd = FieldDescriptor.scalar("n", "int")
        with pytest.raises(ValidationError):
            fd.name = "m"


class TestTypeDescriptor:
    def test_mapping_shorthand_preserves_order(self):
        td = TypeDescriptor.model_validate({
            "name": "Widget",
            "fields": {
                "name": "string",
                "vendor": "reference",
                "partsList": {"shape": "collection", "element_type": {"name": "Part", "fields": {"sku": "string"}}},
                "address": "other",
            },
        })
        assert td.field_names == ["name", "vendor", "partsList", "address"]
        assert td.fields[0].kind is ScalarKind.TEXT
        assert td.fields[1].shape is FieldShape.REFERENCE
        assert td.fields[2].element_type.fields[0].name == "sku"
        assert td.fields[3].shape is FieldShape.OTHER

    def test_get_field_ignore_case(self):
        td = TypeDescriptor(name="T", fields=[FieldDescriptor.scalar("InternalID", "string")])
        assert td.get_field("internalId") is None
        assert td.get_field("internalId", ignore_case=True).name == "InternalID"
        assert td.has_field("INTERNALID", ignore_case=True)


# ============================================================================
# TABLE TESTS
# ============================================================================


class TestTable:
    def test_add_or_ensure_appends(self):
        t = Table(name="T")
        t.add_or_ensure_column("a", "INT")
        t.add_or_ensure_column("b", "BIT", nullable=False)
        assert t.column_names == ["a", "b"]
        assert t.get_column("b").nullable is False

    def test_add_or_ensure_overwrites_case_insensitive(self):
        t = Table(name="T")
        t.add_or_ensure_column("Amount", "INT")
        t.add_or_ensure_column("b", "BIT")
        t.add_or_ensure_column("amount", "BIGINT", nullable=False)
        assert t.column_names == ["Amount", "b"]
        col = t.get_column("AMOUNT")
        assert col.sql_type == "BIGINT"
        assert col.nullable is False

    def test_is_key_column(self):
        t = Table(name="Child", primary_key_column="ChildId", foreign_key_column="Parent_id")
        assert t.is_key_column("childid")
        assert t.is_key_column("PARENT_ID")
        assert not t.is_key_column("amount")
        assert not Table(name="Bare").is_key_column("id")

    def test_sealed_copy_rejects_changes(self):
        t = Table(name="T")
        t.add_or_ensure_column("a", "INT")
        sealed = t.sealed()

        assert sealed.is_sealed and not t.is_sealed
        with pytest.raises(TypeError):
            sealed.add_or_ensure_column("b", "BIT")
        with pytest.raises(TypeError):
            sealed.link_parent("P", "id", "P_id")
        with pytest.raises(TypeError):
            sealed.primary_key_column = "a"

        # The original stays editable and independent
        t.add_or_ensure_column("b", "BIT")
        assert sealed.column_names == ["a"]

    def test_null_clause(self):
        assert Column(name="a", sql_type="INT").null_clause == "NULL"
        assert Column(name="a", sql_type="INT", nullable=False).null_clause == "NOT NULL"

    def test_has_foreign_key_requires_full_triple(self):
        t = Table(name="Child", parent_table_name="Parent", parent_pk_column="id")
        assert not t.has_foreign_key
        t.foreign_key_column = "Parent_id"
        assert t.has_foreign_key

    def test_validate_structure_partial_fk(self):
        t = Table(name="Child", parent_table_name="Parent")
        errors = t.validate_structure()
        assert any("partial foreign key" in e for e in errors)

    def test_validate_structure_missing_pk_column(self):
        t = Table(name="T", primary_key_column="id")
        assert any("primary key" in e for e in t.validate_structure())

    def test_validate_structure_duplicate_columns(self):
        t = Table(name="T", columns=[Column(name="a", sql_type="INT"), Column(name="A", sql_type="INT")])
        assert any("duplicate column" in e for e in t.validate_structure())


# ============================================================================
# SCHEMA TESTS
# ============================================================================


def _parent():
    t = Table(name="Parent")
    t.add_or_ensure_column("id", "NVARCHAR(50)", nullable=False)
    t.primary_key_column = "id"
    return t


def _child():
    t = Table(name="Parent_itemList")
    t.add_or_ensure_column("Parent_id", "NVARCHAR(50)", nullable=False)
    t.add_or_ensure_column("Parent_itemListId", "BIGINT", nullable=False)
    t.primary_key_column = "Parent_itemListId"
    t.link_parent("Parent", "id", "Parent_id")
    return t


class TestSchema:
    def test_valid_schema(self):
        schema = Schema(source_type="Parent", tables=[_parent(), _child()])
        assert schema.root.name == "Parent"
        assert [t.name for t in schema.children] == ["Parent_itemList"]
        assert schema.children_of("Parent")[0].name == "Parent_itemList"
        assert schema.get_table("Parent_itemList").has_foreign_key

    def test_tables_are_sealed(self):
        parent, child = _parent(), _child()
        schema = Schema(source_type="Parent", tables=[parent, child])

        assert isinstance(schema.tables, tuple)
        assert all(t.is_sealed for t in schema.tables)
        with pytest.raises(TypeError):
            schema.root.add_or_ensure_column("late", "INT")
        with pytest.raises(TypeError):
            schema.children[0].link_parent("Other", "id", "Other_id")

        # Changing the inputs afterwards does not reach the schema
        parent.add_or_ensure_column("late", "INT")
        assert "late" not in schema.root.column_names

    def test_child_before_parent_rejected(self):
        with pytest.raises(ValidationError, match="precedes its parent"):
            Schema(source_type="Parent", tables=[_child(), _parent()])

    def test_invalid_table_rejected(self):
        bad = Table(name="Bad", primary_key_column="missing")
        with pytest.raises(ValidationError):
            Schema(source_type="Bad", tables=[bad])

    def test_empty_schema_rejected(self):
        with pytest.raises(ValidationError):
            Schema(source_type="Nothing", tables=[])

    def test_get_table_missing(self):
        schema = Schema(source_type="Parent", tables=[_parent()])
        with pytest.raises(KeyError):
            schema.get_table("Nope")

    def test_skipped_fields(self):
        schema = Schema(
            source_type="Parent",
            tables=[_parent()],
            skipped=[SkippedField(table="Parent", field="addr", reason=SkipReason.UNSUPPORTED_SHAPE)],
        )
        assert schema.skipped[0].reason is SkipReason.UNSUPPORTED_SHAPE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
