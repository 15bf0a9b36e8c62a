"""Shared pytest fixtures: a small order-entry schema and settings isolation."""

from __future__ import annotations

from typing import Generator

import pytest

from schema_sqlgen.config import get_settings
from schema_sqlgen.model import (
    Column,
    Constraint,
    ConstraintType,
    DatabaseSchema,
    Table,
)


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Each test sees settings built from its own environment."""
    for key in ("SQLGEN_DIALECT", "SQLGEN_INCLUDE_SCHEMA", "SQLGEN_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def customers_table() -> Table:
    table = Table(
        name="CUSTOMERS",
        schema_owner="SALES",
        columns=[
            Column("CUSTOMER_ID", "INT", nullable=False),
            Column("EMAIL", "VARCHAR", length=200),
            Column("STATUS", "CHAR", length=1),
        ],
    )
    table.add_constraint(
        Constraint(ConstraintType.PRIMARY_KEY, "PK_CUSTOMERS", ["CUSTOMER_ID"])
    )
    table.add_constraint(Constraint(ConstraintType.UNIQUE_KEY, "UK_CUSTOMERS_EMAIL", ["EMAIL"]))
    return table


@pytest.fixture
def orders_table() -> Table:
    table = Table(
        name="ORDERS",
        schema_owner="SALES",
        columns=[
            Column("ORDER_ID", "INT", nullable=False),
            Column("CUSTOMER_ID", "INT", nullable=False),
            Column("AMOUNT", "NUMBER", precision=10, scale=2),
            Column("STATUS", "VARCHAR", length=20),
        ],
    )
    table.add_constraint(Constraint(ConstraintType.PRIMARY_KEY, "PK_ORDERS", ["ORDER_ID"]))
    table.add_constraint(
        Constraint(
            ConstraintType.FOREIGN_KEY,
            "FK_ORDERS_CUSTOMERS",
            ["CUSTOMER_ID"],
            refers_to_table="CUSTOMERS",
            refers_to_schema="SALES",
            delete_rule="CASCADE",
        )
    )
    table.add_constraint(
        Constraint(ConstraintType.CHECK, "CK_ORDERS_AMOUNT", expression="(AMOUNT > 0)")
    )
    table.add_constraint(
        Constraint(ConstraintType.CHECK, "CK_ORDERS_STATUS", expression="(STATUS IS NOT NULL)")
    )
    return table


@pytest.fixture
def sales_schema(customers_table: Table, orders_table: Table) -> DatabaseSchema:
    return DatabaseSchema(tables=[customers_table, orders_table])
