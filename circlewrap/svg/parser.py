"""Read circles out of SVG markup.

Regex-based on purpose: only ``<circle>`` elements matter, and their
attributes are flat.
"""

from __future__ import annotations

import logging
import re
from xml.sax.saxutils import unescape

from circlewrap.engine.primitives import Circle
from circlewrap.models.circles import parse_circle_records

logger = logging.getLogger(__name__)

_CIRCLE_TAG_RE = re.compile(r'<circle\b[^>]*/?\s*>', re.IGNORECASE)
_ATTR_RE = re.compile(r"""(\w[\w:-]*)\s*=\s*(["'])(.*?)\2""", re.DOTALL)
_QUOT = {"&quot;": '"', "&apos;": "'"}


def parse_svg_circles(svg_text: str) -> list[Circle]:
    """Every ``<circle>`` element becomes a Circle, in document order.

    Ids come from the element's ``id`` attribute, falling back to ``C1``,
    ``C2``, ... by position. Missing ``cx``/``cy`` default to 0 as in SVG;
    a missing or malformed ``r`` raises CircleRecordError.
    """
    records = []
    for n, match in enumerate(_CIRCLE_TAG_RE.finditer(svg_text), start=1):
        attrs = _extract_attrs(match.group(0))
        record = {
            "id": attrs.get("id") or f"C{n}",
            "x": attrs.get("cx", "0"),
            "y": attrs.get("cy", "0"),
            "radius": attrs.get("r"),
        }
        if "data-kind" in attrs:
            record["kind"] = attrs["data-kind"]
        records.append(record)

    logger.debug("Found %d <circle> elements", len(records))
    return parse_circle_records(records)


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string, either quote style, entities decoded."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        attrs[m.group(1)] = unescape(m.group(3), _QUOT)
    return attrs
