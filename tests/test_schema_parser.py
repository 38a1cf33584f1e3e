"""Unit tests for the CREATE TABLE parser."""

import dataclasses

import pytest

from sqlgen.services.crud_generation import Table, parse_create_table
from sqlgen.services.crud_generation.schema_parser import split_top_level, extract_key_names


def test_inline_primary_key(users_table):
    assert users_table.name == "Users"
    assert [c.name for c in users_table.columns] == ["UserId", "Name"]
    user_id, name = users_table.columns
    assert user_id.is_primary_key is True
    assert user_id.type == "INT"
    assert name.is_primary_key is False
    assert name.type == "VARCHAR(100)"
    assert name.is_nullable is False
    assert users_table.primary_keys == ("UserId",)


def test_table_level_constraint_primary_key(order_lines_table):
    assert order_lines_table.name == "OrderLines"
    assert [c.name for c in order_lines_table.columns] == ["OrderId", "LineNo", "Sku", "Price"]
    assert order_lines_table.primary_keys == ("OrderId", "LineNo")
    assert [c.name for c in order_lines_table.pk_columns] == ["OrderId", "LineNo"]
    assert [c.name for c in order_lines_table.non_pk_columns] == ["Sku", "Price"]


def test_comma_inside_type_parameters_is_not_a_separator(order_lines_table):
    price = order_lines_table.columns[3]
    assert price.type == "DECIMAL(18,2)"
    assert price.is_nullable is False


def test_split_top_level_tracks_depth():
    parts = split_top_level("a INT, price DECIMAL(18,2) NOT NULL, PRIMARY KEY (a, price)")
    assert [p.strip() for p in parts] == [
        "a INT",
        "price DECIMAL(18,2) NOT NULL",
        "PRIMARY KEY (a, price)",
    ]


def test_primary_key_names_are_unquoted():
    assert extract_key_names("PRIMARY KEY ([Id], `Code`, \"Region\")") == ["Id", "Code", "Region"]


def test_primary_key_match_is_case_insensitive():
    table = parse_create_table("CREATE TABLE t (UserId INT, Name TEXT, PRIMARY KEY (userid))")
    assert table.columns[0].is_primary_key is True
    assert table.columns[1].is_primary_key is False
    assert table.primary_keys == ("userid",)


def test_identity_markers():
    table = parse_create_table(
        """CREATE TABLE t (
            a INT IDENTITY(1,1),
            b INT AUTO_INCREMENT,
            c INTEGER autoincrement,
            d serial,
            e INT
        )"""
    )
    flags = {c.name: c.is_identity for c in table.columns}
    assert flags == {"a": True, "b": True, "c": True, "d": False, "e": False}


def test_serial_in_modifier_text_marks_identity():
    table = parse_create_table("CREATE TABLE t (id BIGINT SERIAL, n TEXT)")
    assert table.columns[0].is_identity is True


def test_nullable_defaults_to_true():
    table = parse_create_table("CREATE TABLE t (a INT NULL, b INT NOT   NULL, c INT)")
    assert [c.is_nullable for c in table.columns] == [True, False, True]


def test_quoted_column_names():
    table = parse_create_table('CREATE TABLE t (`Id` INT, "Label" VARCHAR(10))')
    assert [c.name for c in table.columns] == ["Id", "Label"]


def test_unrecognised_clause_is_dropped():
    table = parse_create_table("CREATE TABLE t (id INT, UNIQUE (id), 42)")
    assert [c.name for c in table.columns] == ["id"]


def test_unparseable_clause_with_primary_key_still_yields_key_names():
    # "[Id]" has mismatched quote characters, so no column is recognised.
    table = parse_create_table("CREATE TABLE t ([Id] INT PRIMARY KEY (Id), Name TEXT)")
    assert [c.name for c in table.columns] == ["Name"]
    assert table.primary_keys == ("Id",)
    assert table.pk_columns == ()


def test_duplicate_column_names_are_kept():
    table = parse_create_table("CREATE TABLE t (Id INT, Id VARCHAR(5))")
    assert [c.type for c in table.columns] == ["INT", "VARCHAR(5)"]


def test_schema_qualified_name_is_kept_verbatim():
    table = parse_create_table("create table dbo.Customers(Id int primary key)")
    assert table.name == "dbo.Customers"
    assert table.columns[0].is_primary_key is True


def test_malformed_input_degrades_to_empty_table():
    table = parse_create_table("not sql at all")
    assert table == Table()
    assert table.name == "Table"
    assert table.columns == ()


def test_empty_and_whitespace_input():
    assert parse_create_table("") == Table()
    assert parse_create_table("   \n\t ") == Table()


def test_name_without_body():
    table = parse_create_table("CREATE TABLE Orphan")
    assert table.name == "Orphan"
    assert table.columns == ()


def test_parsed_table_is_immutable(users_table):
    with pytest.raises(dataclasses.FrozenInstanceError):
        users_table.name = "Other"
