from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from ..errors import ConnectError, QueryError
from .results import ResultSet

logger = logging.getLogger(__name__)


def _message(exc: BaseException) -> str:
    # Prefer the driver's own text over SQLAlchemy's wrapped form
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc).strip()


def build_engine(dsn: str, *, echo: bool = False) -> Engine:
    """
    Accept either a SQLAlchemy URL or a libpq keyword string.

    Statements run in autocommit mode so one failing statement does not
    leave the session in an aborted transaction for the next one.
    """
    if echo:
        # through our stderr handler, not SQLAlchemy's own stdout one
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    if "://" in dsn:
        return create_engine(make_url(dsn), isolation_level="AUTOCOMMIT")

    return create_engine(
        "postgresql+psycopg2://",
        connect_args={"dsn": dsn},
        isolation_level="AUTOCOMMIT",
    )


class Database:
    """A single open connection. Statements run strictly one after another."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    @property
    def backend(self) -> str:
        return self._conn.engine.dialect.name

    @classmethod
    @contextmanager
    def connect(cls, dsn: str, *, echo: bool = False) -> Iterator["Database"]:
        try:
            engine = build_engine(dsn, echo=echo)
        except (SQLAlchemyError, ImportError) as exc:
            raise ConnectError(f"Invalid connection settings: {exc}") from exc

        try:
            try:
                conn = engine.connect()
            except SQLAlchemyError as exc:
                raise ConnectError(_message(exc)) from exc

            logger.info("Connected: %s", engine.url.render_as_string(hide_password=True))
            try:
                yield cls(conn)
            finally:
                conn.close()
                logger.debug("Connection closed")
        finally:
            engine.dispose()

    def run(self, sql: str) -> ResultSet:
        """Execute the text verbatim and return its rows as text cells."""
        logger.debug("Executing: %s", sql.strip())
        try:
            res = self._conn.exec_driver_sql(sql, execution_options={"no_parameters": True})
            if not res.returns_rows:
                return ResultSet()
            columns = list(res.keys())
            records = res.fetchall()
        except (SQLAlchemyError, UnicodeDecodeError) as exc:
            # psycopg2 raises decode failures unwrapped while fetching
            raise QueryError(_message(exc), sql=sql) from exc

        return ResultSet.from_records(columns, records)
