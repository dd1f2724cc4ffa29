"""스플라인 파티클 애니메이션 유스케이스.

채움 구간을 따라 균등 간격의 장식 파티클을 배치하고
프레임마다 오프셋을 이동시킨다.
렌더링은 하지 않으며 배치 결과(ParticlePlacement)만 계산한다.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from canvas_spline.domain.value_objects.color import Color
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.usecase.ports.config_port import ParticleConfig
from canvas_spline.usecase.ports.container_transform import ContainerTransform
from canvas_spline.usecase.rect_spline import RectSpline

logger = logging.getLogger(__name__)

_MIN_TANGENT_SQR = 0.0001
_TANGENT_EPSILON = 0.001


@dataclass(frozen=True)
class ParticlePlacement:
    """한 프레임의 파티클 배치 결과.

    Args:
        index: 파티클 인덱스.
        position: world 위치.
        rotation: Z축 회전 (deg).
        scale: 균등 스케일 (rect-local 길이).
        color: 채움 진행도에 따른 색상.
        fill_fraction: 채움 구간 내 진행도 (0.0~1.0).
        t: 곡선 파라미터.
    """

    index: int
    position: Vec2
    rotation: float
    scale: float
    color: Color
    fill_fraction: float
    t: float


class SplineParticles:
    """RectSpline을 따라 움직이는 파티클 애니메이터.

    스플라인 generation을 기억해 두었다가 달라지면 다음 프레임에
    파티클 개수를 다시 계산한다.

    Args:
        rect_spline: 대상 스플라인. None이면 파티클이 없다.
        config: 파티클 설정. sanitized()로 보정되어 저장된다.
        container_transform: rect-local → world 변환. None이면 항등.
    """

    def __init__(
        self,
        rect_spline: RectSpline | None,
        config: ParticleConfig | None = None,
        container_transform: ContainerTransform | None = None,
    ) -> None:
        self._spline = rect_spline
        self._config = (config or ParticleConfig()).sanitized()
        self._container = container_transform
        self._offset = 0.0
        self._interval_length = 0.0
        self._count = 0
        self._rotations: list[float] = []
        self._seen_generation: int | None = None
        self._dirty = True

    # -- 설정 --

    @property
    def spline(self) -> RectSpline | None:
        return self._spline

    @spline.setter
    def spline(self, value: RectSpline | None) -> None:
        self._spline = value
        self._seen_generation = None
        self.set_dirty()

    @property
    def config(self) -> ParticleConfig:
        return self._config

    @config.setter
    def config(self, value: ParticleConfig) -> None:
        self._config = value.sanitized()
        self.set_dirty()

    @property
    def count(self) -> int:
        """현재 파티클 개수."""
        return self._count

    @property
    def interval_length(self) -> float:
        """채움 구간 길이 (정규화 좌표계)."""
        return self._interval_length

    @property
    def offset(self) -> float:
        return self._offset

    def set_dirty(self) -> None:
        self._dirty = True

    @property
    def is_dirty(self) -> bool:
        if self._dirty:
            return True
        if self._spline is None:
            return False
        return self._spline.generation != self._seen_generation

    # -- 갱신 --

    def refresh(self) -> None:
        """채움 구간 길이와 파티클 개수를 다시 계산한다."""
        self._dirty = False
        cfg = self._config
        spline = self._spline
        self._seen_generation = spline.generation if spline else None

        if (
            spline is None
            or cfg.fill_start >= cfg.fill_end
            or cfg.spacing <= 0.0
            or cfg.particle_size < 0.0
        ):
            self._interval_length = 0.0
            self._set_count(0)
            return

        self._interval_length = (
            (cfg.fill_end - cfg.fill_start) * spline.spline_length()
        )
        if self._interval_length <= 0.0:
            self._set_count(0)
            return

        count = max(1, math.floor(self._interval_length / cfg.spacing))
        self._set_count(count)

    def _set_count(self, count: int) -> None:
        if count != self._count:
            logger.debug('Particle count: %d -> %d', self._count, count)
        self._count = count
        del self._rotations[count:]
        self._rotations.extend([0.0] * (count - len(self._rotations)))

    def late_update(self, delta_time: float) -> list[ParticlePlacement]:
        """프레임을 진행하고 파티클 배치를 반환한다.

        Args:
            delta_time: 이전 프레임 이후 경과 시간 (초).

        Returns:
            파티클 배치 목록. 파티클이 없으면 빈 리스트.
        """
        if self.is_dirty:
            self.refresh()

        if (
            self._spline is None
            or self._count == 0
            or self._interval_length <= 0.0
        ):
            return []

        self._offset = (
            self._offset + self._config.speed * delta_time
        ) % self._interval_length
        return self.placements()

    def placements(self) -> list[ParticlePlacement]:
        """현재 오프셋 기준 파티클 배치를 계산한다 (시간 진행 없음)."""
        spline = self._spline
        interval = self._interval_length
        if spline is None or self._count == 0 or interval <= 0.0:
            return []

        cfg = self._config
        even_spacing = interval / self._count
        size = spline.normalized_scalar_to_local(cfg.particle_size)
        start_distance = cfg.fill_start * spline.spline_length()

        # 구간 길이가 바뀐 직후에도 [0, interval) 유지
        wrapped_offset = self._offset % interval

        result: list[ParticlePlacement] = []
        for i in range(self._count):
            dist = (i * even_spacing + wrapped_offset) % interval
            fill_frac = dist / interval

            t = spline.distance_to_t(start_distance + dist)
            local = spline.evaluate_position(t)
            tangent = self._evaluate_tangent_safe(t)

            if tangent.sqr_magnitude > _MIN_TANGENT_SQR:
                world_tangent = self._transform_direction(tangent)
                self._rotations[i] = math.degrees(
                    math.atan2(world_tangent.y, world_tangent.x)
                )

            result.append(
                ParticlePlacement(
                    index=i,
                    position=self._transform_point(local),
                    rotation=self._rotations[i],
                    scale=size,
                    color=cfg.gradient.evaluate(fill_frac),
                    fill_fraction=fill_frac,
                    t=t,
                )
            )
        return result

    def _evaluate_tangent_safe(self, t: float) -> Vec2:
        """접선이 0에 가까우면 주변 파라미터 또는 위치 차분으로 대체한다."""
        spline = self._spline
        tangent = spline.evaluate_tangent(t)
        if tangent.sqr_magnitude < _MIN_TANGENT_SQR:
            if t < 0.5:
                tangent = spline.evaluate_tangent(t + _TANGENT_EPSILON)
            else:
                tangent = spline.evaluate_tangent(t - _TANGENT_EPSILON)
        if tangent.sqr_magnitude < _MIN_TANGENT_SQR:
            t_a = max(0.0, t - _TANGENT_EPSILON)
            t_b = min(1.0, t + _TANGENT_EPSILON)
            tangent = spline.evaluate_position(t_b) - spline.evaluate_position(t_a)
        return tangent

    def _transform_point(self, local: Vec2) -> Vec2:
        if self._container is None:
            return local
        return self._container.transform_point(local)

    def _transform_direction(self, local: Vec2) -> Vec2:
        if self._container is None:
            return local
        return self._container.transform_direction(local)
