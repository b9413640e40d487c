from onlychurch.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_splitter_ignores_semicolons_in_quotes_and_comments():
    sql = """
    -- header; with a semicolon
    CREATE TABLE a (id INT);
    INSERT INTO a VALUES ('x;y');
    INSERT INTO a VALUES ("it's");
    """
    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (id INT)",
        "INSERT INTO a VALUES ('x;y')",
        'INSERT INTO a VALUES ("it\'s")',
    ]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE t (id INT);"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
