"""공통 테스트 fixture."""

import pytest

from canvas_spline.domain.entities.arc_length_table import ArcLengthTable
from canvas_spline.domain.entities.spline import Spline
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.usecase.ports.config_port import (
    AppConfig,
    ParticleConfig,
    SplineConfig,
)


@pytest.fixture
def straight_knots():
    """(0,0) → (10,0) 직선, 탄젠트 0."""
    return [
        Knot(position=Vec2(0.0, 0.0)),
        Knot(position=Vec2(10.0, 0.0)),
    ]


@pytest.fixture
def straight_spline(straight_knots):
    return Spline(straight_knots)


@pytest.fixture
def straight_table(straight_spline):
    return ArcLengthTable(straight_spline)


@pytest.fixture
def unit_line_knots():
    """정규화 좌표 (0,0) → (1,0) 직선."""
    return [
        Knot(position=Vec2(0.0, 0.0)),
        Knot(position=Vec2(1.0, 0.0)),
    ]


@pytest.fixture
def curved_knots():
    """세그먼트 2개짜리 S자 곡선."""
    return [
        Knot(
            position=Vec2(0.0, 0.0),
            tangent_out=Vec2(0.2, 0.6),
        ),
        Knot(
            position=Vec2(0.5, 0.5),
            tangent_in=Vec2(-0.2, 0.0),
            tangent_out=Vec2(0.2, 0.0),
        ),
        Knot(
            position=Vec2(1.0, 0.0),
            tangent_in=Vec2(-0.2, 0.6),
        ),
    ]


@pytest.fixture
def curved_spline(curved_knots):
    return Spline(curved_knots)


@pytest.fixture
def curved_table(curved_spline):
    return ArcLengthTable(curved_spline)


@pytest.fixture
def wide_rect():
    return Rect(x=0.0, y=0.0, width=100.0, height=50.0)


@pytest.fixture
def sample_config(unit_line_knots, wide_rect):
    return AppConfig(
        spline=SplineConfig(
            spline_id='test',
            lut_samples=128,
            rect=wide_rect,
            knots=tuple(unit_line_knots),
        ),
        particles=ParticleConfig(spacing=0.3, speed=0.3),
    )
