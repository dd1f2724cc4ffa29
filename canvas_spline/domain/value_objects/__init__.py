"""Canvas Spline 값 객체 (불변, 동등성 기반 비교)."""

from canvas_spline.domain.value_objects.color import (
    Color,
    ColorGradient,
    GradientKey,
)
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.projection import (
    NO_PROJECTION,
    Projection,
)
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import RIGHT, ZERO, Vec2

__all__ = [
    'Color',
    'ColorGradient',
    'GradientKey',
    'Knot',
    'NO_PROJECTION',
    'Projection',
    'RIGHT',
    'Rect',
    'Vec2',
    'ZERO',
]
