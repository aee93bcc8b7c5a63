from __future__ import annotations


class ReportError(Exception):
    """Base class for failures raised while producing the report."""


class ConnectError(ReportError):
    """The database could not be reached. Fatal for the run."""


class QueryError(ReportError):
    """A single statement failed. The run continues with the next entry."""

    def __init__(self, message: str, sql: str = "") -> None:
        super().__init__(message)
        self.sql = sql
