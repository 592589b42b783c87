"""Process-wide data store handle.

The handle is opened once and reused. Callers that arrive while the first
attempt is still in flight wait on that attempt instead of opening their own.
A failed attempt is forgotten so the next call starts a fresh one.
"""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Generic, TypeVar

from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.utils import ConnectionHandler

from events.domain.errors import ConnectionFailureError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectionCache(Generic[T]):
    """Memoizes the result of ``connect`` with single-flight initialization."""

    def __init__(self, connect: Callable[[], T]) -> None:
        self._connect = connect
        self._lock = threading.Lock()
        self._conn: T | None = None
        self._pending: Future[T] | None = None

    @property
    def connected(self) -> bool:
        return self._conn is not None

    def get(self) -> T:
        """Return the cached handle, connecting on first use.

        Raises whatever ``connect`` raised if the attempt this call joined
        failed.
        """
        with self._lock:
            if self._conn is not None:
                return self._conn
            pending = self._pending
            if pending is None:
                pending = self._pending = Future()
                owner = True
            else:
                owner = False

        if not owner:
            return pending.result()

        try:
            conn = self._connect()
        except BaseException as exc:
            with self._lock:
                self._pending = None
            pending.set_exception(exc)
            raise

        with self._lock:
            self._conn = conn
            self._pending = None
        pending.set_result(conn)
        return conn

    def reset(self) -> None:
        """Forget the cached handle so the next call reconnects."""
        with self._lock:
            self._conn = None


def _open_default_connection() -> ConnectionHandler:
    connection = connections[DEFAULT_DB_ALIAS]
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.error("Could not reach the %s database: %s", connection.vendor, exc)
        raise ConnectionFailureError() from exc
    logger.info("Connected to the %s database", connection.vendor)
    return connections


_default_cache: ConnectionCache[ConnectionHandler] = ConnectionCache(_open_default_connection)


def connect_db() -> ConnectionHandler:
    """Return Django's connection handler once the database is known reachable.

    Raises:
        ConnectionFailureError: If the database cannot be reached.
    """
    return _default_cache.get()


def reset_connection() -> None:
    _default_cache.reset()
