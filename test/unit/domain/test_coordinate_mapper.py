"""coordinate_mapper 단위 테스트."""

import pytest

from canvas_spline.domain.services.coordinate_mapper import (
    to_local,
    to_local_scalar,
    to_local_tangent,
    to_normalized,
)
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2


class TestToLocal:
    def test_scale_then_translate(self):
        rect = Rect(10.0, 20.0, 100.0, 50.0)
        assert to_local(Vec2(0.5, 0.5), rect) == Vec2(60.0, 45.0)

    def test_origin_maps_to_rect_origin(self, wide_rect):
        assert to_local(Vec2(), wide_rect) == wide_rect.origin


class TestToLocalScalar:
    def test_uses_min_dimension(self, wide_rect):
        assert to_local_scalar(0.1, wide_rect) == pytest.approx(5.0)

    def test_isotropic_regardless_of_orientation(self):
        tall = Rect(0.0, 0.0, 50.0, 100.0)
        wide = Rect(0.0, 0.0, 100.0, 50.0)
        assert to_local_scalar(0.2, tall) == to_local_scalar(0.2, wide)


class TestToLocalTangent:
    def test_anisotropic(self, wide_rect):
        # 45도 접선이 비정사각형에서는 각도가 바뀐다
        assert to_local_tangent(Vec2(1.0, 1.0), wide_rect) == Vec2(100.0, 50.0)

    def test_ignores_origin(self):
        rect = Rect(500.0, 500.0, 2.0, 3.0)
        assert to_local_tangent(Vec2(1.0, 1.0), rect) == Vec2(2.0, 3.0)


class TestToNormalized:
    def test_inverse_of_to_local(self):
        rect = Rect(10.0, 20.0, 100.0, 50.0)
        p = Vec2(0.25, 0.75)
        back = to_normalized(to_local(p, rect), rect)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)

    def test_zero_size_axis(self):
        rect = Rect(0.0, 0.0, 0.0, 10.0)
        assert to_normalized(Vec2(5.0, 5.0), rect) == Vec2(0.0, 0.5)
