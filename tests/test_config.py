# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Tests - Naming, SQL type and output defaults
# PURPOSE: Verify convention helpers and environment overrides
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import pytest

from core.config import (
    GeneratorDefaults,
    NamingDefaults,
    OutputDefaults,
    get_defaults,
    reset_defaults,
)


@pytest.fixture(autouse=True)
def fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


class TestNamingDefaults:

    def test_helpers(self):
        naming = NamingDefaults()
        assert naming.is_artifact("tranDateSpecified")
        assert not naming.is_artifact("tranDate")
        assert naming.is_identity("InternalID")
        assert naming.is_collection_name("itemList")
        assert not naming.is_collection_name("listPrice")
        assert naming.reference_column("entity", "Name") == "entity_rf_Name"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            NamingDefaults().identity_field = "id"


class TestFromEnv:

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DDL_IDENTITY_FIELD", "recordId")
        monkeypatch.setenv("DDL_CHILD_KEY_TYPE", "INT")
        monkeypatch.setenv("DDL_OUTPUT_DIR", "build/ddl")

        defaults = GeneratorDefaults.from_env()
        assert defaults.naming.identity_field == "recordId"
        assert defaults.naming.collection_suffix == "List"
        assert defaults.sql_types.child_key_type == "INT"
        assert defaults.output.output_dir == "build/ddl"

    def test_get_defaults_is_cached(self, monkeypatch):
        first = get_defaults()
        monkeypatch.setenv("DDL_OUTPUT_DIR", "elsewhere")
        assert get_defaults() is first

        reset_defaults()
        assert get_defaults().output.output_dir == "elsewhere"


class TestOutputDefaults:

    def test_file_name(self):
        assert OutputDefaults().file_name("Invoice_itemList") == "Invoice_itemList.sql"
        assert OutputDefaults(file_extension=".ddl").file_name("T") == "T.ddl"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
