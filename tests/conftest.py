# File: tests/conftest.py
# Shared fixtures: sample column metadata, an in-memory metadata source,
# an on-disk SQLite schema and configuration files.

import sqlite3
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest
import yaml

from vo_auto_generator.domain.models import ColumnMetadata


ORDER_ITEM_COLUMNS = [
    ColumnMetadata(name="id", type_name="INT", type_class="java.lang.Integer", display_size=11),
    ColumnMetadata(name="created_at", type_name="TIMESTAMP", type_class="java.sql.Timestamp", display_size=19),
    ColumnMetadata(name="note", type_name="BLOB", type_class="byte[]", display_size=65535),
]

EXPECTED_ORDER_ITEM = """\
package com.example.vo;

import java.lang.Character;
import java.lang.Integer;
import java.util.Date;

public class TOrderItemVO {

    private Integer id;
    private Date createdAt;
    private Character[] note;

    public Integer getId() {
        return id;
    }

    public void setId(Integer id) {
        this.id = id;
    }

    public Date getCreatedAt() {
        return createdAt;
    }

    public void setCreatedAt(Date createdAt) {
        this.createdAt = createdAt;
    }

    public Character[] getNote() {
        return note;
    }

    public void setNote(Character[] note) {
        this.note = note;
    }
}
"""

SQLITE_SCHEMA = """
CREATE TABLE order_item (
    id INT,
    created_at TIMESTAMP,
    note BLOB
);
CREATE TABLE customer (
    id integer PRIMARY KEY,
    full_name varchar(100) NOT NULL,
    birth_date date,
    balance decimal(10, 2),
    active bool
);
CREATE VIEW order_item_view AS SELECT id, created_at FROM order_item;
"""


class FakeMetadataSource:
    """In-memory metadata source recording how it was used."""

    def __init__(self, tables: Dict[str, List[ColumnMetadata]], fail_on: Optional[str] = None):
        self.tables = tables
        self.fail_on = fail_on
        self.opened = False
        self.closed = False
        self.patterns = []

    def __enter__(self):
        self.opened = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def list_tables(self, pattern=None):
        self.patterns.append(pattern)
        return sorted(self.tables)

    def describe_table(self, table_name):
        if table_name == self.fail_on:
            raise RuntimeError(f"relation \"{table_name}\" does not exist")
        return list(self.tables[table_name])


@pytest.fixture
def order_item_columns() -> List[ColumnMetadata]:
    return list(ORDER_ITEM_COLUMNS)


@pytest.fixture
def fake_source() -> FakeMetadataSource:
    return FakeMetadataSource({"order_item": list(ORDER_ITEM_COLUMNS)})


@pytest.fixture
def fake_source_factory(fake_source) -> Callable:
    """Factory with the signature generate_value_objects expects."""

    def factory(config):
        return fake_source

    return factory


@pytest.fixture
def sqlite_db(tmp_path: Path) -> Path:
    """SQLite database file holding the test schema. Tables are left empty."""
    db_path = tmp_path / "schema.sqlite3"
    connection = sqlite3.connect(db_path)
    try:
        connection.executescript(SQLITE_SCHEMA)
        connection.commit()
    finally:
        connection.close()
    return db_path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Writes a YAML config file and returns its path."""

    def _write(name: str = "re-engineer.yaml", **values) -> Path:
        config_file = tmp_path / name
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(values, f)
        return config_file

    return _write


@pytest.fixture
def sqlite_config_file(write_config, sqlite_db: Path, tmp_path: Path) -> Path:
    return write_config(
        driver="sqlite",
        url=str(sqlite_db),
        tableNamePattern="order%",
        packageName="com.example.vo",
        prefix="T",
        suffix="VO",
        packagePath=str(tmp_path / "src"),
    )
