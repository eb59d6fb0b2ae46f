"""Error taxonomy for the wrap engine. No engine imports."""

from __future__ import annotations

from typing import Any


class WrapError(Exception):
    """Base class for every error raised by the wrap engine."""


class DegeneratePairError(WrapError):
    """Two circles share a center, so the tangent direction is undefined."""

    def __init__(self, a_id: str | int, b_id: str | int) -> None:
        super().__init__(f"Circles {a_id!r} and {b_id!r} have coincident centers")
        self.a_id = a_id
        self.b_id = b_id


class CircleRecordError(WrapError):
    """Circle records could not be turned into circles.

    ``errors`` holds one ``{"loc": ..., "msg": ...}`` dict per problem, in the
    same shape pydantic reports validation failures.
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        summary = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in errors)
        super().__init__(f"Invalid circle records: {summary}")
        self.errors = errors


class RegistryMismatchError(WrapError):
    """A hull vertex has no entry in the point registry.

    Hull vertices are always drawn from the registered points, so this means
    the coordinate keys were derived inconsistently. Never recovered from.
    """

    def __init__(self, vertex: tuple[float, float], key: str) -> None:
        super().__init__(f"Hull vertex {vertex!r} (key {key!r}) missing from point registry")
        self.vertex = vertex
        self.key = key
