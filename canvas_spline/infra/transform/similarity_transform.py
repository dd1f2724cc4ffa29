"""rect-local ↔ world 상사 변환 (회전 + 균등 스케일 + 이동).

기준점 쌍에서 nudged로 변환을 추정하거나,
회전/스케일/이동 값을 직접 받아 사용한다.
"""

from __future__ import annotations

import logging
import math

import nudged

from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.usecase.ports.config_port import ContainerConfig
from canvas_spline.usecase.ports.container_transform import ContainerTransform

logger = logging.getLogger(__name__)


def estimate_transform(
    local_coords: list[list[float]],
    world_coords: list[list[float]],
) -> nudged.Transform:
    """rect-local → world 좌표 변환을 추정한다.

    Args:
        local_coords: rect-local 기준점 [[x,y], ...].
        world_coords: world 기준점 [[x,y], ...].

    Returns:
        nudged Transform 객체 (local → world).
    """
    tf = nudged.estimate(local_coords, world_coords)
    mse = nudged.estimate_error(tf, local_coords, world_coords)
    logger.info('Container transform MSE: %.6f', mse)
    return tf


class SimilarityContainerTransform(ContainerTransform):
    """ContainerTransform의 상사 변환 구현체.

    Args:
        rotation: 회전 각도 (rad).
        scale: 스케일 팩터.
        translation: [tx, ty] 이동 벡터.
    """

    def __init__(
        self,
        rotation: float = 0.0,
        scale: float = 1.0,
        translation: tuple[float, float] | list[float] = (0.0, 0.0),
    ) -> None:
        self._rotation = rotation
        self._scale = scale
        self._translation = (float(translation[0]), float(translation[1]))
        self._cos = math.cos(rotation)
        self._sin = math.sin(rotation)

    @classmethod
    def from_nudged(cls, tf: nudged.Transform) -> SimilarityContainerTransform:
        """nudged Transform에서 생성한다."""
        return cls(tf.get_rotation(), tf.get_scale(), tf.get_translation())

    @classmethod
    def from_reference(
        cls,
        local_coords: list[list[float]],
        world_coords: list[list[float]],
    ) -> SimilarityContainerTransform:
        """기준점 쌍에서 변환을 추정하여 생성한다."""
        return cls.from_nudged(estimate_transform(local_coords, world_coords))

    @classmethod
    def from_config(
        cls, config: ContainerConfig
    ) -> SimilarityContainerTransform:
        """ContainerConfig에서 생성한다. 기준점이 있으면 추정값을 쓴다."""
        if config.has_reference:
            return cls.from_reference(
                config.reference_local, config.reference_world
            )
        return cls(config.rotation, config.scale, config.translation)

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def translation(self) -> tuple[float, float]:
        return self._translation

    def transform_direction(self, local: Vec2) -> Vec2:
        """방향 벡터를 회전/스케일한다."""
        x_rot = local.x * self._cos - local.y * self._sin
        y_rot = local.x * self._sin + local.y * self._cos
        return Vec2(x_rot * self._scale, y_rot * self._scale)

    def transform_point(self, local: Vec2) -> Vec2:
        """위치를 회전/스케일 후 이동한다."""
        d = self.transform_direction(local)
        return Vec2(d.x + self._translation[0], d.y + self._translation[1])

    def inverse_transform_point(self, world: Vec2) -> Vec2:
        """world 위치를 rect-local 위치로 역변환한다."""
        x_t = world.x - self._translation[0]
        y_t = world.y - self._translation[1]
        x_s = x_t / self._scale if self._scale != 0 else x_t
        y_s = y_t / self._scale if self._scale != 0 else y_t
        return Vec2(
            x_s * self._cos + y_s * self._sin,
            -x_s * self._sin + y_s * self._cos,
        )
