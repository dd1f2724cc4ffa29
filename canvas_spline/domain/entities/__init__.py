"""Canvas Spline 도메인 엔티티."""

from canvas_spline.domain.entities.arc_length_table import (
    DEFAULT_LUT_SAMPLES,
    ArcLengthTable,
)
from canvas_spline.domain.entities.spline import Spline

__all__ = [
    'ArcLengthTable',
    'DEFAULT_LUT_SAMPLES',
    'Spline',
]
