import pytest

from cosmetics_report.db.session import Database, build_engine
from cosmetics_report.errors import ConnectError, QueryError


class TestRun:
    def test_select_returns_text_cells(self, db):
        rs = db.run("SELECT product_name, price, stock_quantity FROM products ORDER BY product_id")
        assert rs.columns == ("product_name", "price", "stock_quantity")
        assert rs.rows[0] == ("Lotion", "2500", "12")

    def test_null_becomes_empty_cell(self, db):
        rs = db.run("SELECT stock_quantity FROM products WHERE product_name = 'Soap'")
        assert rs.rows == (("",),)

    def test_statement_without_rows(self, db):
        rs = db.run("CREATE TABLE reviews (review_id INTEGER)")
        assert rs.row_count == 0
        assert rs.columns == ()

    def test_failure_carries_driver_message(self, db):
        with pytest.raises(QueryError, match="no such table"):
            db.run("SELECT * FROM shipments")

    def test_failure_does_not_poison_the_session(self, db):
        with pytest.raises(QueryError):
            db.run("SELEC broken")
        rs = db.run("SELECT COUNT(*) AS n FROM products")
        assert rs.rows == (("3",),)

    def test_sql_runs_verbatim(self, db):
        rs = db.run("SELECT product_name FROM products WHERE price > 100000 OR 1=1")
        assert rs.row_count == 3

    def test_backend_name(self, db):
        assert db.backend == "sqlite"


class TestConnect:
    def test_unreachable_database(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing' / 'dir' / 'shop.db'}"
        with pytest.raises(ConnectError):
            with Database.connect(url):
                pass

    def test_unknown_dialect(self):
        with pytest.raises(ConnectError, match="Invalid connection settings"):
            with Database.connect("nosuchdb://localhost/x"):
                pass

    def test_connection_released_on_error(self, sqlite_url):
        with pytest.raises(RuntimeError):
            with Database.connect(sqlite_url) as d:
                conn = d._conn
                raise RuntimeError("boom")
        assert conn.closed


def test_libpq_conninfo_builds_psycopg2_engine():
    engine = build_engine("dbname=cosmetics_shop user=me host=localhost")
    try:
        assert engine.dialect.name == "postgresql"
        assert engine.dialect.driver == "psycopg2"
    finally:
        engine.dispose()


def test_driver_decode_error_becomes_query_error(decode_failing_db):
    flaky = decode_failing_db
    with pytest.raises(QueryError, match="invalid continuation byte") as info:
        flaky.run("SELECT 'latin1' AS enc")
    assert info.value.sql == "SELECT 'latin1' AS enc"
    assert flaky.run("SELECT COUNT(*) AS n FROM products").rows == (("3",),)
