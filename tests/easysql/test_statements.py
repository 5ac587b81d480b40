"""Tests for the SQL text builders."""

import pytest

from easysql import statements
from easysql.records import Argument, DataType, Max, Min, TableDataObject, TableEntryPair, Type


def pairs(**kwargs):
    return [TableEntryPair(key, value) for key, value in kwargs.items()]


class TestDatabaseStatements:
    """Tests for database-level builders."""

    def test_create_database(self):
        """Test CREATE DATABASE text."""
        statement = statements.create_database("shop")
        assert statement.sql == "CREATE DATABASE shop"
        assert statement.params == ()

    def test_drop_database(self):
        """Test DROP DATABASE text."""
        assert statements.drop_database("shop").sql == "DROP DATABASE shop"

    def test_backup_database(self):
        """Test BACKUP DATABASE text."""
        statement = statements.backup_database("shop", "/backups/shop.bak")
        assert statement.sql == "BACKUP DATABASE shop TO DISK = '/backups/shop.bak'"
        assert statement.params == ()


class TestCreateTable:
    """Tests for CREATE TABLE builder."""

    def test_columns_with_primary_key(self):
        """Test full CREATE TABLE text with arguments and primary key."""
        columns = [
            TableDataObject(
                "id", DataType(Type.INT), (Argument.NOT_NULL, Argument.AUTO_INCREMENT), primary=True
            ),
            TableDataObject("name", DataType(Type.VARCHAR, 64), (Argument.NOT_NULL,)),
            TableDataObject("bio", DataType(Type.TEXT)),
        ]

        statement = statements.create_table(False, "users", columns)

        assert statement.sql == (
            "CREATE TABLE users(id INT NOT NULL AUTO_INCREMENT,"
            "name VARCHAR(64) NOT NULL,bio TEXT, PRIMARY KEY (id));"
        )
        assert statement.params == ()

    def test_if_not_exists(self):
        """Test IF NOT EXISTS is added when requested."""
        columns = [TableDataObject("id", DataType(Type.INT))]
        statement = statements.create_table(True, "users", columns)
        assert statement.sql == "CREATE TABLE IF NOT EXISTS users(id INT);"

    def test_without_primary_key(self):
        """Test no PRIMARY KEY clause when no column is primary."""
        columns = [
            TableDataObject("a", DataType(Type.INT)),
            TableDataObject("b", DataType(Type.CHAR, 2)),
        ]
        statement = statements.create_table(False, "t", columns)
        assert "PRIMARY KEY" not in statement.sql
        assert statement.sql == "CREATE TABLE t(a INT,b CHAR(2));"

    @pytest.mark.parametrize("primary_index", [0, 1, 2])
    def test_single_primary_key_clause(self, primary_index):
        """Test exactly one PRIMARY KEY clause naming the primary column."""
        names = ["alpha", "beta", "gamma"]
        columns = [
            TableDataObject(name, DataType(Type.INT), primary=(i == primary_index))
            for i, name in enumerate(names)
        ]

        sql = statements.create_table(False, "t", columns).sql

        assert sql.count("PRIMARY KEY") == 1
        assert sql.endswith(f", PRIMARY KEY ({names[primary_index]}));")

    def test_multiple_primary_marks_keep_one_clause(self):
        """Test the clause is appended once even if several columns are marked."""
        columns = [
            TableDataObject("a", DataType(Type.INT), primary=True),
            TableDataObject("b", DataType(Type.INT), primary=True),
        ]
        sql = statements.create_table(False, "t", columns).sql
        assert sql.count("PRIMARY KEY") == 1
        assert sql.endswith("PRIMARY KEY (b));")

    def test_drop_table(self):
        """Test DROP TABLE text."""
        assert statements.drop_table("users").sql == "DROP TABLE users"


class TestInsert:
    """Tests for INSERT builder."""

    def test_insert(self):
        """Test INSERT text and parameter order."""
        statement = statements.insert("users", pairs(name="ada", age=36, email=None))
        assert statement.sql == "INSERT INTO users (name,age,email) VALUES (?,?,?);"
        assert statement.params == ("ada", 36, None)

    def test_single_entry(self):
        """Test INSERT with one column."""
        statement = statements.insert("users", pairs(name="ada"))
        assert statement.sql == "INSERT INTO users (name) VALUES (?);"
        assert statement.params == ("ada",)


class TestUpdate:
    """Tests for UPDATE builder."""

    def test_update_with_where(self):
        """Test set values are bound before where values."""
        statement = statements.update("users", pairs(name="bob", age=40), pairs(id=7, active=1))
        assert statement.sql == "UPDATE users SET `name`=?,`age`=? WHERE `id`=? AND `active`=?"
        assert statement.params == ("bob", 40, 7, 1)

    def test_update_more_where_than_set(self):
        """Test every where condition is joined with AND."""
        statement = statements.update("t", pairs(a=1), pairs(b=2, c=3, d=4))
        assert statement.sql == "UPDATE t SET `a`=? WHERE `b`=? AND `c`=? AND `d`=?"
        assert statement.params == (1, 2, 3, 4)

    @pytest.mark.parametrize("where", [None, []])
    def test_update_without_where(self, where):
        """Test no WHERE clause is emitted without conditions."""
        statement = statements.update("users", pairs(active=0), where)
        assert statement.sql == "UPDATE users SET `active`=?"
        assert statement.params == (0,)

    def test_update_custom_quote(self):
        """Test the identifier quote can be changed for other dialects."""
        statement = statements.update("t", pairs(a=1), pairs(b=2), quote='"')
        assert statement.sql == 'UPDATE t SET "a"=? WHERE "b"=?'


class TestDelete:
    """Tests for DELETE builder."""

    def test_delete_with_where(self):
        """Test DELETE text with conditions."""
        statement = statements.delete("users", pairs(id=3, name="ada"))
        assert statement.sql == "DELETE FROM users WHERE id=? AND name=?"
        assert statement.params == (3, "ada")

    @pytest.mark.parametrize("where", [None, []])
    def test_delete_everything(self, where):
        """Test DELETE without conditions uses WHERE 1."""
        statement = statements.delete("users", where)
        assert statement.sql == "DELETE FROM users WHERE 1"
        assert statement.params == ()

    def test_delete_custom_true_literal(self):
        """Test the unconditional literal can be changed for other dialects."""
        assert statements.delete("t", None, true_literal="TRUE").sql == "DELETE FROM t WHERE TRUE"


class TestSelect:
    """Tests for SELECT builder."""

    def test_select_everything(self):
        """Test SELECT with no columns and no conditions."""
        statement = statements.select(None, "users", None)
        assert statement.sql == "SELECT * FROM users WHERE 1;"
        assert statement.params == ()

    def test_empty_columns_select_everything(self):
        """Test an empty column list behaves like None."""
        assert statements.select([], "users", []).sql == "SELECT * FROM users WHERE 1;"

    def test_select_columns_and_where(self):
        """Test SELECT text and parameter order."""
        statement = statements.select(["id", "name"], "users", pairs(age=36, active=1))
        assert statement.sql == "SELECT id,name FROM users WHERE age=? AND active=?;"
        assert statement.params == (36, 1)

    def test_select_min_max(self):
        """Test MIN/MAX expressions render with aliases."""
        statement = statements.select([Min("age"), Max("age"), "name"], "users")
        assert statement.sql == (
            "SELECT MIN(age) AS age,MAX(age) AS age,name FROM users WHERE 1;"
        )


class TestPlaceholderCounts:
    """Bound parameters always match the placeholders in the text."""

    @pytest.mark.parametrize(
        "statement",
        [
            statements.insert("t", pairs(a=1, b=2, c=3)),
            statements.update("t", pairs(a=1), pairs(b=2, c=3)),
            statements.update("t", pairs(a=1, b=2)),
            statements.delete("t", pairs(a=1, b=None)),
            statements.delete("t"),
            statements.select(["a"], "t", pairs(a=1, b=2, c=3, d=4)),
            statements.select(None, "t"),
        ],
    )
    def test_params_match_placeholders(self, statement):
        """Test the number of params equals the number of ? in the text."""
        assert statement.sql.count("?") == len(statement.params)
