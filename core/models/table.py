# ============================================================================
# CLAUDE CONTEXT - RELATIONAL SCHEMA MODELS
# ============================================================================
# EPOCH: 1 - RECORD SCHEMA GENERATION
# STATUS: Core model - Output of the table synthesizer
# PURPOSE: Columns, tables with PK/FK hints, and the ordered schema
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Column, Table, Schema, SkippedField
# DEPENDENCIES: pydantic
# ============================================================================
"""
Relational Schema Models

Table is built up column by column by the synthesizer, which exclusively
owns its construction. Schema is the finished, ordered result: root table
first, then child tables in field-encounter order. Schema validates every
table's structure when it is created and is frozen thereafter.

Invariants (see Table.validate_structure):
- Column names are unique within a table (case-insensitive)
- primary_key_column, when set, names an existing column
- parent_table_name / parent_pk_column / foreign_key_column are all
  set together or all absent
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from core.contracts import SkipReason


class Column(BaseModel):
    """A single column: name, SQL type text, nullability."""
    name: str = Field(..., min_length=1)
    sql_type: str = Field(..., min_length=1)
    nullable: bool = True

    model_config = {"frozen": True}

    @property
    def null_clause(self) -> str:
        return "NULL" if self.nullable else "NOT NULL"


class Table(BaseModel):
    """
    Table definition with optional relational hints.

    A child table carries the full FK triple pointing at its parent.
    Tables handed to a Schema are sealed copies and reject further changes.
    """
    name: str = Field(..., min_length=1)
    columns: List[Column] = Field(default_factory=list)

    primary_key_column: Optional[str] = None     # e.g. "internalId"
    parent_table_name: Optional[str] = None      # when this is a child table
    parent_pk_column: Optional[str] = None       # e.g. "internalId"
    foreign_key_column: Optional[str] = None     # e.g. "Invoice_internalId"

    _sealed: bool = PrivateAttr(default=False)

    def __setattr__(self, name, value):
        if not name.startswith("_"):
            self._check_writable()
        super().__setattr__(name, value)

    def _check_writable(self) -> None:
        if getattr(self, "_sealed", False):
            raise TypeError(f"Table '{self.name}' is sealed")

    def sealed(self) -> "Table":
        """Read-only deep copy."""
        copy = self.model_copy(deep=True)
        copy._sealed = True
        return copy

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def get_column(self, name: str) -> Optional[Column]:
        """Case-insensitive column lookup."""
        key = name.lower()
        for col in self.columns:
            if col.name.lower() == key:
                return col
        return None

    def add_or_ensure_column(
        self,
        name: str,
        sql_type: str,
        nullable: bool = True,
    ) -> Column:
        """
        Append a column, or overwrite type/nullability of an existing one.

        The existing column keeps its position and original spelling.
        """
        self._check_writable()
        key = name.lower()
        for i, col in enumerate(self.columns):
            if col.name.lower() == key:
                updated = Column(name=col.name, sql_type=sql_type, nullable=nullable)
                self.columns[i] = updated
                return updated
        column = Column(name=name, sql_type=sql_type, nullable=nullable)
        self.columns.append(column)
        return column

    def link_parent(self, parent_table_name: str, parent_pk_column: str, foreign_key_column: str) -> None:
        """Set the FK triple in one step."""
        self._check_writable()
        self.parent_table_name = parent_table_name
        self.parent_pk_column = parent_pk_column
        self.foreign_key_column = foreign_key_column

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def is_key_column(self, name: str) -> bool:
        """True when name (case-insensitive) is the PK or FK column."""
        key = name.lower()
        return any(
            col is not None and col.lower() == key
            for col in (self.primary_key_column, self.foreign_key_column)
        )

    @property
    def has_foreign_key(self) -> bool:
        return bool(self.parent_table_name and self.parent_pk_column and self.foreign_key_column)

    @property
    def is_child(self) -> bool:
        return self.has_foreign_key

    def validate_structure(self) -> List[str]:
        """
        Validate table structure.

        Returns list of validation errors (empty if valid).
        """
        errors = []

        seen = set()
        for col in self.columns:
            key = col.name.lower()
            if key in seen:
                errors.append(f"Table '{self.name}' has duplicate column '{col.name}'")
            seen.add(key)

        if self.primary_key_column and self.get_column(self.primary_key_column) is None:
            errors.append(
                f"Table '{self.name}' primary key '{self.primary_key_column}' is not a column"
            )

        fk_parts = [self.parent_table_name, self.parent_pk_column, self.foreign_key_column]
        if any(fk_parts) and not all(fk_parts):
            errors.append(f"Table '{self.name}' has a partial foreign key definition")

        if self.foreign_key_column and self.get_column(self.foreign_key_column) is None:
            errors.append(
                f"Table '{self.name}' foreign key '{self.foreign_key_column}' is not a column"
            )

        return errors


class SkippedField(BaseModel):
    """A field the synthesizer dropped without emitting columns."""
    table: str
    field: str
    reason: SkipReason

    model_config = {"frozen": True}


class Schema(BaseModel):
    """
    Ordered set of tables synthesized from one root type.

    tables[0] is the root table; children follow in the order their
    collection fields were encountered. Tables are stored as sealed copies,
    so neither the schema nor its tables change after construction.
    """
    source_type: str = Field(..., min_length=1)
    tables: Tuple[Table, ...] = Field(..., min_length=1)
    skipped: Tuple[SkippedField, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @field_validator("tables")
    @classmethod
    def seal_tables(cls, v: Tuple[Table, ...]) -> Tuple[Table, ...]:
        return tuple(t if t.is_sealed else t.sealed() for t in v)

    @model_validator(mode="after")
    def check_tables(self) -> "Schema":
        errors = []
        names = set()
        for table in self.tables:
            errors.extend(table.validate_structure())
            if table.name.lower() in names:
                errors.append(f"Duplicate table name '{table.name}'")
            names.add(table.name.lower())

        # Parents precede children
        position = {t.name: i for i, t in enumerate(self.tables)}
        for i, table in enumerate(self.tables):
            if table.has_foreign_key:
                parent_pos = position.get(table.parent_table_name)
                if parent_pos is None:
                    errors.append(
                        f"Table '{table.name}' references unknown parent '{table.parent_table_name}'"
                    )
                elif parent_pos >= i:
                    errors.append(f"Table '{table.name}' precedes its parent")

        if errors:
            raise ValueError(f"Invalid schema for {self.source_type}: {errors}")
        return self

    @property
    def root(self) -> Table:
        return self.tables[0]

    @property
    def children(self) -> List[Table]:
        return list(self.tables[1:])

    @property
    def table_names(self) -> List[str]:
        return [t.name for t in self.tables]

    def get_table(self, name: str) -> Table:
        """Get a table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        raise KeyError(f"Table '{name}' not found in schema for '{self.source_type}'")

    def children_of(self, parent_name: str) -> List[Table]:
        return [t for t in self.tables if t.parent_table_name == parent_name]


__all__ = [
    "Column",
    "Table",
    "SkippedField",
    "Schema",
]
