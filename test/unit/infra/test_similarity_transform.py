"""SimilarityContainerTransform 유닛 테스트."""

import math

import pytest

from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.infra.transform.similarity_transform import (
    SimilarityContainerTransform,
    estimate_transform,
)
from canvas_spline.usecase.ports.config_port import ContainerConfig


class TestTransform:
    def test_identity(self):
        tf = SimilarityContainerTransform()
        assert tf.transform_point(Vec2(3.0, 4.0)) == Vec2(3.0, 4.0)

    def test_rotation_scale_translation(self):
        tf = SimilarityContainerTransform(
            rotation=math.pi / 2, scale=2.0, translation=[10.0, 0.0]
        )
        p = tf.transform_point(Vec2(1.0, 0.0))
        assert p.x == pytest.approx(10.0)
        assert p.y == pytest.approx(2.0)

    def test_direction_ignores_translation(self):
        tf = SimilarityContainerTransform(translation=(100.0, 100.0))
        assert tf.transform_direction(Vec2(1.0, 0.0)) == Vec2(1.0, 0.0)

    def test_inverse_round_trip(self):
        tf = SimilarityContainerTransform(0.7, 3.0, (5.0, -2.0))
        p0 = Vec2(1.5, -4.0)
        p1 = tf.inverse_transform_point(tf.transform_point(p0))
        assert p1.x == pytest.approx(p0.x)
        assert p1.y == pytest.approx(p0.y)


class TestEstimate:
    def test_identity_estimate(self):
        """동일 좌표에 대해 항등 변환을 계산한다."""
        coords = [[0, 0], [1, 0], [0, 1], [1, 1]]
        tf = estimate_transform(coords, coords)

        assert abs(tf.get_rotation()) < 1e-10
        assert abs(tf.get_scale() - 1.0) < 1e-10

    def test_from_reference_scaled(self):
        tf = SimilarityContainerTransform.from_reference(
            [[0, 0], [1, 0], [0, 1], [1, 1]],
            [[0, 0], [10, 0], [0, 10], [10, 10]],
        )
        assert tf.scale == pytest.approx(10.0)
        assert tf.rotation == pytest.approx(0.0, abs=1e-9)
        p = tf.transform_point(Vec2(0.5, 0.5))
        assert p.x == pytest.approx(5.0)
        assert p.y == pytest.approx(5.0)


class TestFromConfig:
    def test_components(self):
        tf = SimilarityContainerTransform.from_config(
            ContainerConfig(scale=2.0, rotation=0.0, translation=(1.0, 1.0))
        )
        assert tf.transform_point(Vec2(1.0, 1.0)) == Vec2(3.0, 3.0)

    def test_reference_takes_precedence(self):
        tf = SimilarityContainerTransform.from_config(
            ContainerConfig(
                scale=99.0,
                reference_local=[[0, 0], [1, 0]],
                reference_world=[[0, 0], [2, 0]],
            )
        )
        assert tf.scale == pytest.approx(2.0)
