"""Display helpers for a labelled numeric slider."""

from __future__ import annotations

from typing import Optional


def _precision(percentage: bool, precision: Optional[int]) -> int:
    if precision is not None:
        return precision
    return 1 if percentage else 0


def format_slider_value(
    value: float, percentage: bool = False, precision: Optional[int] = None
) -> str:
    """Text shown next to the slider."""
    p = _precision(percentage, precision)
    if percentage:
        return f"{100.0 * value:.{p}f}%"
    return f"{value:.{p}f}"


def slider_step(
    percentage: bool = False, precision: Optional[int] = None, step: Optional[float] = None
) -> float:
    """Step of the slider, derived from the display precision unless given."""
    if step is not None:
        return step
    p = _precision(percentage, precision)
    if percentage:
        p += 2
    return 10.0 ** -p