"""Wrap configuration — selects the optional stages and key strategy."""

from __future__ import annotations

from dataclasses import dataclass

# Fixed-point keys beyond 17 decimals stop telling doubles apart at useful scales
MAX_KEY_PRECISION = 17


@dataclass
class WrapConfig:
    """Controls how a circle set is wrapped."""

    # Drop circles enclosed by another circle before pairing
    filter_enclosed: bool = True

    # Registry key: None = exact float match, N = fixed-point with N decimals
    key_precision: int | None = None

    # Samples per arc when tracing the smooth outline
    arc_resolution: int = 128

    def __post_init__(self) -> None:
        if self.key_precision is not None and not 0 <= self.key_precision <= MAX_KEY_PRECISION:
            raise ValueError(
                f"key_precision must be in [0, {MAX_KEY_PRECISION}], got {self.key_precision}"
            )
        if self.arc_resolution < 1:
            raise ValueError(f"arc_resolution must be >= 1, got {self.arc_resolution}")
