"""
Unit tests for the schema model and foreign-key target resolution.
"""

import pytest

from schema_sqlgen.model import (
    Constraint,
    ConstraintType,
    DatabaseSchema,
    Table,
    referenced_columns,
)


def foreign_key(**kwargs):
    kwargs.setdefault("refers_to_table", "CUSTOMERS")
    return Constraint(ConstraintType.FOREIGN_KEY, "FK", ["CUSTOMER_ID"], **kwargs)


@pytest.mark.unit
class TestTable:
    """Tests for Table helpers."""

    def test_add_constraint_files_by_kind(self, orders_table):
        assert orders_table.primary_key.name == "PK_ORDERS"
        assert [fk.name for fk in orders_table.foreign_keys] == ["FK_ORDERS_CUSTOMERS"]
        assert [c.name for c in orders_table.check_constraints] == [
            "CK_ORDERS_AMOUNT",
            "CK_ORDERS_STATUS",
        ]
        assert orders_table.unique_keys == []

    def test_second_primary_key_rejected(self, orders_table):
        with pytest.raises(ValueError, match="already has primary key"):
            orders_table.add_constraint(
                Constraint(ConstraintType.PRIMARY_KEY, "PK_OTHER", ["STATUS"])
            )

    def test_unsupported_type_rejected(self, orders_table):
        with pytest.raises(ValueError):
            orders_table.add_constraint(Constraint("DEFAULT", "DF", ["STATUS"]))


@pytest.mark.unit
class TestDatabaseSchema:
    """Tests for DatabaseSchema.find_table."""

    def test_find_by_name(self, sales_schema):
        assert sales_schema.find_table("ORDERS").name == "ORDERS"

    def test_missing_table(self, sales_schema):
        assert sales_schema.find_table("INVOICES") is None

    def test_owner_preferred(self):
        dbo = Table("CUSTOMERS", schema_owner="dbo")
        sales = Table("CUSTOMERS", schema_owner="SALES")
        schema = DatabaseSchema(tables=[dbo, sales])
        assert schema.find_table("CUSTOMERS", "SALES") is sales
        assert schema.find_table("CUSTOMERS") is dbo

    def test_unknown_owner_falls_back_to_name(self):
        dbo = Table("CUSTOMERS", schema_owner="dbo")
        assert DatabaseSchema(tables=[dbo]).find_table("CUSTOMERS", "HR") is dbo


@pytest.mark.unit
class TestReferencedColumns:
    """Tests for the default foreign-key target lookup."""

    def test_primary_key_of_referenced_table(self, sales_schema):
        assert referenced_columns(foreign_key(), sales_schema) == ["CUSTOMER_ID"]

    def test_already_resolved(self):
        fk = foreign_key(referenced_columns=["ID"])
        assert referenced_columns(fk, None) == ["ID"]

    def test_named_unique_key(self, sales_schema):
        fk = foreign_key(refers_to_constraint="UK_CUSTOMERS_EMAIL")
        assert referenced_columns(fk, sales_schema) == ["EMAIL"]

    def test_unknown_key_name_uses_primary_key(self, sales_schema):
        fk = foreign_key(refers_to_constraint="UK_MISSING")
        assert referenced_columns(fk, sales_schema) == ["CUSTOMER_ID"]

    def test_no_schema(self):
        assert referenced_columns(foreign_key(), None) is None

    def test_table_not_found(self, sales_schema):
        assert referenced_columns(foreign_key(refers_to_table="INVOICES"), sales_schema) is None

    def test_table_without_primary_key(self):
        schema = DatabaseSchema(tables=[Table("CUSTOMERS")])
        assert referenced_columns(foreign_key(), schema) is None

    def test_result_is_a_copy(self, sales_schema):
        result = referenced_columns(foreign_key(), sales_schema)
        result.append("X")
        assert sales_schema.find_table("CUSTOMERS").primary_key.columns == ["CUSTOMER_ID"]
