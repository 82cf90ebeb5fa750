from __future__ import annotations

DEFAULT_RADIUS = 4
_MIN_RADIUS = 4.0
_RADIUS_SPAN = 50.0


def scatter_radius(x: float, minimum: float, maximum: float) -> float:
    """Bubble radius for ``x`` given its column bounds.

    Narrow columns (a range under 50, equal bounds included) keep a flat offset from the minimum;
    wider ones are scaled linearly into [4, 54].
    """

    spread = maximum - minimum
    if spread < _RADIUS_SPAN:
        return x - minimum + _MIN_RADIUS
    return _MIN_RADIUS + (x - minimum) / spread * _RADIUS_SPAN
