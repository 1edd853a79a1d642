"""Linear color interpolation.

A gradient is the list of colors an LED passes through when moving from
``start`` to ``target`` in ``steps`` updates. Step ``n`` (1-based) sits at
``n / steps`` of the way along each channel::

    channel = start * (1 - n / steps) + target * (n / steps)

and is truncated toward zero, never rounded. The last step is always
exactly ``target`` because ``n / steps == 1.0`` there. Interpolation is
linear in raw channel bytes; no gamma or HSL correction is applied.
"""

from stickfx.models import Color


def _blend(start: int, target: int, step_percent: float) -> int:
    return int(start * (1 - step_percent) + target * step_percent)


def gradient(start: Color, target: Color, steps: int) -> list[Color]:
    """
    Build the full list of intermediate colors from ``start`` to ``target``.

    The result never contains ``start`` itself (step 0) and always ends
    with ``target``.

    Args:
        start: Color the LED currently shows
        target: Color the LED should end on
        steps: Number of colors to produce (>= 1)

    Returns:
        List of exactly ``steps`` colors

    Raises:
        ValueError: If steps is less than 1

    Example:
        >>> [c.r for c in gradient(Color(r=0, g=0, b=0), Color(r=10, g=0, b=0), 3)]
        [3, 6, 10]
    """
    if steps < 1:
        raise ValueError(f"A gradient needs at least one step, got {steps}")

    colors = []
    for step in range(1, steps + 1):
        step_percent = step / steps
        colors.append(
            Color(
                r=_blend(start.r, target.r, step_percent),
                g=_blend(start.g, target.g, step_percent),
                b=_blend(start.b, target.b, step_percent),
            )
        )
    return colors
