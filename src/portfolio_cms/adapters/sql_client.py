"""Connection-pooled SQL client."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

import psycopg2.extras
import psycopg2.pool

logger = logging.getLogger(__name__)

Row = dict[str, Any]
T = TypeVar("T")

_LOGGED_SQL_LENGTH = 100


class ConnectionPool(Protocol):
    """The subset of the psycopg2 pool API the client relies on."""

    def getconn(self) -> Any:
        """Acquire a connection from the pool."""

    def putconn(self, conn: Any) -> None:
        """Return a connection to the pool."""

    def closeall(self) -> None:
        """Close every pooled connection."""


class SqlConnection(Protocol):
    """Connection handle passed to transaction work."""

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> list[Row]:
        """Run a statement and return its rows."""


class SqlClient(Protocol):
    """Database access interface used by repositories."""

    def query(self, sql: str, params: Sequence[Any] | None = None) -> list[Row]:
        """Run a single statement on a pooled connection."""

    def transaction(self, work: Callable[[SqlConnection], T]) -> T:
        """Run work inside a transaction on a pooled connection."""

    def check_connection(self) -> bool:
        """Return True when the database answers a trivial query."""


@dataclass
class PooledConnection(SqlConnection):
    """Wraps a raw DB-API connection so statements return lists of dicts."""

    raw: Any

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> list[Row]:
        """Run a statement and return its rows (empty without a result set)."""
        _log_statement(sql, params)
        with self.raw.cursor() as cursor:
            cursor.execute(sql, tuple(params or ()))
            if cursor.description is None:
                return []
            return [dict(row) for row in cursor.fetchall()]


@dataclass
class PooledSqlClient(SqlClient):
    """SQL client that borrows one pooled connection per call."""

    pool: ConnectionPool

    @classmethod
    def create(cls, dsn: str, min_size: int, max_size: int) -> "PooledSqlClient":
        """Create a client backed by a thread-safe psycopg2 pool."""
        pool = psycopg2.pool.ThreadedConnectionPool(
            min_size,
            max_size,
            dsn,
            cursor_factory=psycopg2.extras.RealDictCursor,
        )
        return cls(pool=pool)

    def query(self, sql: str, params: Sequence[Any] | None = None) -> list[Row]:
        """Run a single statement, committing on success."""
        raw = self.pool.getconn()
        try:
            rows = PooledConnection(raw).execute(sql, params)
            raw.commit()
            return rows
        except Exception as exc:
            logger.error("Database query failed: %s", exc)
            _rollback_quietly(raw)
            raise
        finally:
            self.pool.putconn(raw)

    def transaction(self, work: Callable[[SqlConnection], T]) -> T:
        """Run work in a transaction; commit on success, roll back on failure."""
        raw = self.pool.getconn()
        try:
            # psycopg2 opens the transaction implicitly on the first statement.
            logger.debug("Transaction started")
            result = work(PooledConnection(raw))
            raw.commit()
            return result
        except Exception as exc:
            logger.error("Transaction failed: %s", exc)
            _rollback_quietly(raw)
            raise
        finally:
            self.pool.putconn(raw)

    def check_connection(self) -> bool:
        """Return True when SELECT 1 succeeds; failures are logged, not raised."""
        try:
            self.query("SELECT 1")
        except Exception:
            logger.warning("Database connection check failed", exc_info=True)
            return False
        return True

    def close(self) -> None:
        """Close all pooled connections."""
        self.pool.closeall()


def _rollback_quietly(raw: Any) -> None:
    try:
        raw.rollback()
    except Exception:
        logger.exception("Error during transaction rollback")


def _log_statement(sql: str, params: Sequence[Any] | None) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    statement = " ".join(sql.split())
    if len(statement) > _LOGGED_SQL_LENGTH:
        statement = statement[:_LOGGED_SQL_LENGTH] + "..."
    logger.debug("SQL: %s params=%s", statement, list(params or ()))
