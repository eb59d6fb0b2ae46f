"""Circle records — the wire shape of a circle and its conversion to Circle."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from circlewrap.engine.errors import CircleRecordError
from circlewrap.engine.primitives import Circle


class CircleRecord(BaseModel):
    id: Union[int, str] = Field(..., description="Circle identifier, unique within one request")
    x: float = Field(..., description="Center x")
    y: float = Field(..., description="Center y")
    radius: float = Field(..., ge=0, description="Radius, >= 0")
    kind: Literal["inner", "outer"] | None = Field(
        default=None,
        description="Additive (inner) or subtractive (outer) circle; carried, not used by the wrap",
    )

    @field_validator("x", "y", "radius")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be a finite number")
        return v

    def to_circle(self) -> Circle:
        return Circle(id=self.id, center=(self.x, self.y), radius=self.radius)


_records_adapter = TypeAdapter(list[CircleRecord])


def parse_circle_records(payload: Iterable[Any]) -> list[Circle]:
    """Validate raw records (dicts or CircleRecords) and build circles.

    Raises CircleRecordError listing every malformed field and duplicate id.
    """
    try:
        records = _records_adapter.validate_python(list(payload))
    except ValidationError as e:
        raise CircleRecordError(
            [{"loc": tuple(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        ) from e
    return records_to_circles(records)


def records_to_circles(records: Iterable[CircleRecord]) -> list[Circle]:
    circles: list[Circle] = []
    seen: set[Union[int, str]] = set()
    errors: list[dict[str, Any]] = []
    for i, record in enumerate(records):
        if record.id in seen:
            errors.append({"loc": (i, "id"), "msg": f"Duplicate circle id {record.id!r}"})
            continue
        seen.add(record.id)
        circles.append(record.to_circle())
    if errors:
        raise CircleRecordError(errors)
    return circles
