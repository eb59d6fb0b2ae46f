"""circle-wrap: convex wrapping outline around a cluster of circles."""

__version__ = "0.1.0"
