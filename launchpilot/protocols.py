"""Port interfaces (Protocols) for injectable collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class ClockPort(Protocol):
    """Source of the composition timestamp.

    Any zero-argument callable returning an aware ``datetime`` satisfies it,
    so tests can pass ``lambda: fixed`` instead of the wall clock.
    """

    def __call__(self) -> datetime: ...
