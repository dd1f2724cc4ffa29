"""SplineParticles 유스케이스 단위 테스트."""

from unittest.mock import MagicMock

import pytest

from canvas_spline.domain.entities.spline import Spline
from canvas_spline.domain.value_objects.color import (
    Color,
    ColorGradient,
    GradientKey,
)
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.usecase.ports.config_port import ParticleConfig
from canvas_spline.usecase.ports.container_transform import (
    ContainerTransform,
)
from canvas_spline.usecase.rect_spline import RectSpline
from canvas_spline.usecase.spline_particles import SplineParticles


@pytest.fixture
def rect_spline(unit_line_knots, wide_rect):
    return RectSpline(Spline(unit_line_knots), wide_rect)


@pytest.fixture
def particles(rect_spline):
    return SplineParticles(
        rect_spline, ParticleConfig(spacing=0.3, speed=0.3)
    )


class TestParticleConfig:
    def test_sanitized_clamps_consumer_input(self):
        cfg = ParticleConfig(
            fill_start=0.8, fill_end=0.2, spacing=0.0, particle_size=-1.0,
        ).sanitized()
        assert cfg.fill_start == 0.2
        assert cfg.fill_end == 0.2
        assert cfg.spacing == 0.001
        assert cfg.particle_size == 0.0

    def test_sanitized_keeps_valid_config(self):
        cfg = ParticleConfig(fill_start=0.1, fill_end=0.9)
        assert cfg.sanitized() == cfg


class TestRefresh:
    def test_count_from_spacing(self, particles):
        particles.refresh()
        assert particles.interval_length == pytest.approx(1.0)
        assert particles.count == 3

    def test_at_least_one_particle(self, rect_spline):
        p = SplineParticles(rect_spline, ParticleConfig(spacing=5.0))
        p.refresh()
        assert p.count == 1

    def test_empty_interval(self, rect_spline):
        p = SplineParticles(
            rect_spline, ParticleConfig(fill_start=0.5, fill_end=0.5)
        )
        assert p.late_update(0.1) == []
        assert p.count == 0

    def test_no_spline(self):
        p = SplineParticles(None, ParticleConfig())
        assert p.late_update(0.1) == []
        assert p.count == 0

    def test_degenerate_spline(self, wide_rect):
        rs = RectSpline(Spline([Knot(position=Vec2(0.5, 0.5))]), wide_rect)
        p = SplineParticles(rs, ParticleConfig())
        assert p.late_update(0.1) == []


class TestLateUpdate:
    def test_advances_offset(self, particles):
        placements = particles.late_update(1.0)

        assert particles.offset == pytest.approx(0.3)
        assert len(placements) == 3
        fractions = [p.fill_fraction for p in placements]
        assert fractions == pytest.approx([0.3, 0.3 + 1 / 3, 0.3 + 2 / 3])

    def test_offset_stays_wrapped(self, particles):
        """오프셋은 누적되지 않고 구간 길이 안에 머문다."""
        for _ in range(1000):
            particles.late_update(7.0)
        assert 0.0 <= particles.offset < particles.interval_length

    def test_positions_follow_arc_length(self, particles):
        placements = particles.late_update(1.0)
        for p in placements:
            # 직선이므로 거리 ≈ 정규화 x, rect 너비 100
            assert p.position.x == pytest.approx(
                100.0 * p.fill_fraction, abs=0.1
            )
            assert p.position.y == pytest.approx(0.0)

    def test_rotation_and_scale(self, particles):
        placements = particles.late_update(0.5)
        for p in placements:
            assert p.rotation == pytest.approx(0.0)
            # particle_size 0.05 × 짧은 변 50
            assert p.scale == pytest.approx(2.5)

    def test_fractions_stay_in_interval(self, particles):
        for _ in range(20):
            for p in particles.late_update(0.77):
                assert 0.0 <= p.fill_fraction < 1.0
                assert 0.0 <= p.t <= 1.0

    def test_fill_start_offsets_particles(self, rect_spline):
        p = SplineParticles(
            rect_spline,
            ParticleConfig(
                fill_start=0.5, fill_end=1.0, spacing=0.2, speed=0.0,
            ),
        )
        placements = p.late_update(0.0)
        assert len(placements) == 2
        assert placements[0].t == pytest.approx(0.5, abs=1e-6)
        assert placements[0].position.x == pytest.approx(50.0, abs=0.1)

    def test_gradient_color(self, rect_spline):
        gradient = ColorGradient((
            GradientKey(0.0, Color(0.0, 0.0, 0.0, 0.0)),
            GradientKey(1.0, Color(1.0, 1.0, 1.0, 1.0)),
        ))
        p = SplineParticles(
            rect_spline,
            ParticleConfig(spacing=0.3, speed=0.3, gradient=gradient),
        )
        for placement in p.late_update(1.0):
            assert placement.color.a == pytest.approx(placement.fill_fraction)

    def test_uses_container_transform(self, rect_spline):
        container = MagicMock(spec=ContainerTransform)
        container.transform_point.return_value = Vec2(1.0, 2.0)
        container.transform_direction.return_value = Vec2(0.0, 1.0)
        p = SplineParticles(
            rect_spline, ParticleConfig(spacing=0.3), container
        )

        placements = p.late_update(0.1)

        assert placements[0].position == Vec2(1.0, 2.0)
        assert placements[0].rotation == pytest.approx(90.0)
        assert container.transform_point.call_count == len(placements)


class TestChangeTracking:
    def test_spline_edit_triggers_recount(self, particles, rect_spline):
        particles.late_update(0.0)
        assert particles.count == 3

        rect_spline.set_knot(1, Knot(position=Vec2(2.0, 0.0)))
        assert particles.is_dirty

        particles.late_update(0.0)
        assert particles.count == 6

    def test_config_change_triggers_recount(self, particles):
        particles.late_update(0.0)
        particles.config = ParticleConfig(spacing=0.45)
        assert particles.is_dirty
        particles.late_update(0.0)
        assert particles.count == 2

    def test_spline_swap(self, particles):
        particles.late_update(0.0)
        particles.spline = None
        assert particles.late_update(0.1) == []
        assert particles.count == 0
