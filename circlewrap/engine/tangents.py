"""Bitangent solver — common tangent lines between two circles.

Two circles have up to four common tangents: the external pair (both
circles on the same side of the line) and the internal pair (the line
passes between them). With ``d`` the center distance and ``v`` the unit
vector from A to B, every tangent has a unit normal ``n`` with

    n · v = c,   c = (r_a - sign_1 * r_b) / d

``sign_1 = +1`` gives the external family, ``sign_1 = -1`` the internal
one. A family exists only while ``c² <= 1``; ``sign_2`` then picks one of
the two normals on either side of ``v``.
"""

from __future__ import annotations

import math

from circlewrap.engine.errors import DegeneratePairError
from circlewrap.engine.primitives import Circle, Tangent, TangentPoint, distance

TANGENT_SLOTS = 4

_SIGNS = (-1.0, 1.0)


def tangents(a: Circle, b: Circle) -> list[Tangent | None]:
    """Return the common tangents of ``a`` and ``b`` as four slots.

    Tangents fill the leading slots in generation order (internal family
    first, then external; ``sign_2 = -1`` before ``+1``); unused slots are
    trailing ``None``. Nested circles give four ``None``, intersecting ones
    two tangents, separated ones four.

    Raises DegeneratePairError when the centers coincide.
    """
    d = distance(a.center, b.center)
    if d == 0.0:
        raise DegeneratePairError(a.id, b.id)

    vx = (b.x - a.x) / d
    vy = (b.y - a.y) / d

    result: list[Tangent | None] = [None] * TANGENT_SLOTS
    i = 0

    for sign_1 in _SIGNS:
        c = (a.radius - sign_1 * b.radius) / d
        if c * c > 1.0:
            continue

        h = math.sqrt(max(0.0, 1.0 - c * c))

        for sign_2 in _SIGNS:
            nx = vx * c - sign_2 * h * vy
            ny = vy * c + sign_2 * h * vx

            result[i] = Tangent(
                TangentPoint(a.id, a.x + a.radius * nx, a.y + a.radius * ny),
                TangentPoint(b.id, b.x + sign_1 * b.radius * nx, b.y + sign_1 * b.radius * ny),
            )
            i += 1

    return result
