"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
import logging

from canvas_spline.domain.entities.arc_length_table import DEFAULT_LUT_SAMPLES
from canvas_spline.domain.value_objects.color import ColorGradient
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.rect import Rect

logger = logging.getLogger(__name__)

MIN_SPACING = 0.001


@dataclass(frozen=True)
class SplineConfig:
    """스플라인 및 호스트 사각형 설정.

    Args:
        spline_id: 이벤트에 실리는 스플라인 식별자.
        lut_samples: 호 길이 LUT 해상도.
        rect: 호스트 사각형 (rect-local 좌표).
        knots: 노트 목록 (정규화 좌표).
    """

    spline_id: str = 'spline'
    lut_samples: int = DEFAULT_LUT_SAMPLES
    rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 100.0, 100.0))
    knots: tuple[Knot, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ParticleConfig:
    """스플라인 파티클 애니메이터 설정.

    Args:
        fill_start: 채움 구간 시작 (길이 비율, 0.0~1.0).
        fill_end: 채움 구간 끝 (길이 비율, 0.0~1.0).
        spacing: 파티클 간격 (정규화 길이).
        particle_size: 파티클 크기 (정규화 길이, 짧은 변 기준).
        speed: 초당 이동 거리 (정규화 길이).
        gradient: 채움 진행도별 색상.
    """

    fill_start: float = 0.0
    fill_end: float = 1.0
    spacing: float = 0.1
    particle_size: float = 0.05
    speed: float = 0.25
    gradient: ColorGradient = field(default_factory=ColorGradient)

    def sanitized(self) -> ParticleConfig:
        """소비자 입력을 안전한 범위로 보정한 사본을 반환한다."""
        fill_start = max(0.0, min(1.0, self.fill_start))
        fill_end = max(0.0, min(1.0, self.fill_end))
        if fill_start > fill_end:
            fill_start = fill_end
        spacing = max(MIN_SPACING, self.spacing)
        particle_size = max(0.0, self.particle_size)

        fixed = replace(
            self,
            fill_start=fill_start,
            fill_end=fill_end,
            spacing=spacing,
            particle_size=particle_size,
        )
        if fixed != self:
            logger.warning('Particle config clamped: %s -> %s', self, fixed)
        return fixed


@dataclass(frozen=True)
class ContainerConfig:
    """rect-local → world 상사 변환 설정.

    reference_local/reference_world가 모두 주어지면 기준점 쌍에서
    변환을 추정하고, 아니면 scale/rotation/translation을 그대로 쓴다.

    Args:
        scale: 스케일 팩터.
        rotation: 회전 각도 (rad).
        translation: [tx, ty] 이동 벡터.
        reference_local: rect-local 기준점 리스트 [[x,y], ...].
        reference_world: world 기준점 리스트 [[x,y], ...].
    """

    scale: float = 1.0
    rotation: float = 0.0
    translation: tuple[float, float] = (0.0, 0.0)
    reference_local: list[list[float]] = field(default_factory=list)
    reference_world: list[list[float]] = field(default_factory=list)

    @property
    def has_reference(self) -> bool:
        return bool(self.reference_local) and bool(self.reference_world)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정.

    Args:
        spline: 스플라인 설정.
        particles: 파티클 설정.
        container: 컨테이너 변환 설정.
    """

    spline: SplineConfig = field(default_factory=SplineConfig)
    particles: ParticleConfig = field(default_factory=ParticleConfig)
    container: ContainerConfig = field(default_factory=ContainerConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            AppConfig.

        Raises:
            InvalidConfigurationError: 노트/사각형 데이터 형식 오류 시.
        """
