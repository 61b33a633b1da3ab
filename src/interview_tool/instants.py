"""Instant registry — labelled monotonic timestamps.

An *instant* is a point in time recorded under a caller-chosen label and
a generated identifier.  The registry is shared by every tool call the
server handles, so access is guarded by a reader/writer lock: lookups
share the lock, inserts take it exclusively.

Entries are never evicted; the registry lives as long as the server.
"""

from __future__ import annotations

import threading
import time
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from interview_tool.core.errors import InternalError, NotFoundError


@dataclass(frozen=True, slots=True)
class Instant:
    """A labelled monotonic clock reading."""

    label: str
    created_at: float


def format_duration(seconds: float) -> str:
    """Format whole elapsed seconds as ``mm:ss``.

    Minutes are not capped at 59: 3661 seconds is ``61:01``.
    """
    total = max(int(seconds), 0)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


class ReadWriteLock:
    """Many concurrent readers or one exclusive writer.

    Writers waiting for the lock block new readers, so a steady stream
    of lookups cannot starve inserts.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Iterator[None]:
        with self._cond:
            ok = self._cond.wait_for(
                lambda: not self._writer and not self._writers_waiting,
                timeout,
            )
            if not ok:
                msg = "Failed to acquire read lock"
                raise TimeoutError(msg)
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self, timeout: float | None = None) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                ok = self._cond.wait_for(
                    lambda: not self._writer and not self._readers,
                    timeout,
                )
            finally:
                self._writers_waiting -= 1
            if not ok:
                self._cond.notify_all()
                msg = "Failed to acquire write lock"
                raise TimeoutError(msg)
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class InstantRegistry:
    """Concurrency-safe store of :class:`Instant` keyed by opaque id.

    Args:
        clock: Monotonic seconds source. Defaults to :func:`time.monotonic`.
        id_factory: Produces fresh identifiers. Defaults to UUID4 text.
        lock_timeout: Seconds to wait for the lock before failing the
            request with :class:`InternalError`. ``None`` waits forever.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        id_factory: Callable[[], str] | None = None,
        lock_timeout: float | None = None,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._lock_timeout = lock_timeout
        self._lock = ReadWriteLock()
        self._instants: dict[str, Instant] = {}

    def create(self, label: str) -> str:
        """Record the current time under ``label`` and return its id."""
        instance_id = self._id_factory()
        instant = Instant(label=label, created_at=self._clock())
        try:
            with self._lock.write(self._lock_timeout):
                collision = instance_id in self._instants
                if not collision:
                    self._instants[instance_id] = instant
        except TimeoutError as exc:
            msg = f"Failed to acquire write lock: {exc}"
            raise InternalError(msg) from exc
        if collision:
            msg = f"Generated instance id {instance_id} is already in use"
            raise InternalError(msg)
        return instance_id

    def get(self, instance_id: str) -> Instant:
        """Return the stored instant.

        Raises:
            NotFoundError: If ``instance_id`` was never created.
            InternalError: If the lock cannot be acquired in time.
        """
        try:
            with self._lock.read(self._lock_timeout):
                instant = self._instants.get(instance_id)
        except TimeoutError as exc:
            msg = f"Failed to acquire read lock for instance id {instance_id}: {exc}"
            raise InternalError(msg) from exc
        if instant is None:
            msg = f"Nothing found for instance id {instance_id}"
            raise NotFoundError(msg)
        return instant

    def elapsed(self, instance_id: str) -> tuple[str, str]:
        """Return ``(label, "mm:ss")`` for time passed since creation."""
        instant = self.get(instance_id)
        return instant.label, format_duration(self._clock() - instant.created_at)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._instants)

    def __contains__(self, instance_id: object) -> bool:
        with self._lock.read():
            return instance_id in self._instants
