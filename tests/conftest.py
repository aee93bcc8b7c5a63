import pytest

from cosmetics_report.db.session import Database

SCHEMA = [
    "CREATE TABLE brands (brand_id INTEGER PRIMARY KEY, brand_name TEXT)",
    "CREATE TABLE products (product_id INTEGER PRIMARY KEY, product_name TEXT, brand_id INTEGER, price NUMERIC, stock_quantity INTEGER)",
    "INSERT INTO brands VALUES (1, 'Lumière'), (2, 'Nordic Glow')",
    "INSERT INTO products VALUES (1, 'Lotion', 1, 2500, 12), (2, 'Soap', 2, 300, NULL), (3, 'Крем', 1, 4100, 7)",
]


def seed(db: Database) -> None:
    for sql in SCHEMA:
        db.run(sql)


@pytest.fixture
def db():
    with Database.connect("sqlite://") as d:
        seed(d)
        yield d


@pytest.fixture
def sqlite_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'shop.db'}"
    with Database.connect(url) as d:
        seed(d)
    return url


class DecodeFailingConnection:
    """Wraps a real connection; statements mentioning 'latin1' fail to decode."""

    def __init__(self, conn):
        self._conn = conn
        self.engine = conn.engine

    def exec_driver_sql(self, sql, *args, **kwargs):
        if "latin1" in sql:
            raise UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid continuation byte")
        return self._conn.exec_driver_sql(sql, *args, **kwargs)


@pytest.fixture
def decode_failing_db(db):
    return Database(DecodeFailingConnection(db._conn))
