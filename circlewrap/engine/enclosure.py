"""Enclosure filter — drop circles that sit entirely inside another circle.

An enclosed circle cannot touch the outer wrap, and it would only feed
the hull points that lie inside it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from circlewrap.engine.primitives import Circle, distance

logger = logging.getLogger(__name__)


def is_enclosed(inner: Circle, outer: Circle) -> bool:
    """True iff ``inner`` fits inside ``outer``, touching boundaries included."""
    return distance(inner.center, outer.center) + inner.radius <= outer.radius


def _same_disk(a: Circle, b: Circle) -> bool:
    return a.center == b.center and a.radius == b.radius


def filter_non_enclosed(circles: Sequence[Circle]) -> list[Circle]:
    """Keep every circle not enclosed by some other circle, in input order.

    A circle is never enclosed by itself. Two identical disks under
    different ids enclose each other by the inclusive test, so they are not
    allowed to remove one another: both stay.
    """
    kept: list[Circle] = []
    for circle in circles:
        enclosing = next(
            (
                other
                for other in circles
                if other is not circle
                and other.id != circle.id
                and not _same_disk(circle, other)
                and is_enclosed(circle, other)
            ),
            None,
        )
        if enclosing is None:
            kept.append(circle)
        else:
            logger.debug("Circle %r enclosed by %r, dropped", circle.id, enclosing.id)
    return kept
