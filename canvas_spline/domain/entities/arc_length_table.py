"""호 길이 룩업 테이블 (LUT) 엔티티.

스플라인을 t 기준으로 균등 샘플링하고 누적 거리를 저장하여
곡선 파라미터 ↔ 호 길이 변환을 근사한다.

- table[0] = 0, table[S] = 전체 길이, 단조 비감소
- 스플라인 generation이 바뀌거나 mark_dirty() 호출 시 무효화
- 조회 시점에만 재계산 (lazy), 같은 크기의 버퍼는 재사용
"""

from __future__ import annotations

import bisect
from collections.abc import Sequence
import logging
import math

from canvas_spline.domain.entities.spline import Spline
from canvas_spline.domain.exceptions import InvalidConfigurationError
from canvas_spline.domain.value_objects.vector import Vec2

logger = logging.getLogger(__name__)

DEFAULT_LUT_SAMPLES = 128


class ArcLengthTable:
    """Spline 하나에 종속된 호 길이 캐시.

    Args:
        spline: 샘플링 대상 스플라인.
        samples: 세그먼트 해상도 S. 샘플은 S+1개 저장된다.

    Raises:
        InvalidConfigurationError: samples가 1 미만일 때.
    """

    def __init__(
        self, spline: Spline, samples: int = DEFAULT_LUT_SAMPLES
    ) -> None:
        if samples < 1:
            raise InvalidConfigurationError(
                f'LUT samples must be >= 1, got {samples}'
            )
        self._spline = spline
        self._samples = samples
        self._distances: list[float] | None = None
        self._positions: list[Vec2] | None = None
        self._has_samples = False
        self._total_length = 0.0
        self._dirty = True
        self._built_generation = -1

    @property
    def spline(self) -> Spline:
        return self._spline

    @property
    def samples(self) -> int:
        """해상도 S."""
        return self._samples

    @property
    def is_dirty(self) -> bool:
        """다음 조회 시 재계산이 필요한지 여부."""
        return self._dirty or self._built_generation != self._spline.generation

    @property
    def has_samples(self) -> bool:
        """베이크된 샘플 존재 여부. 노트가 2개 미만이면 False."""
        self.ensure()
        return self._has_samples

    @property
    def baked_positions(self) -> Sequence[Vec2]:
        """베이크된 정규화 위치 S+1개. 샘플이 없으면 빈 시퀀스.

        내부 버퍼를 그대로 노출하므로 수정하지 않는다.
        """
        self.ensure()
        if not self._has_samples or self._positions is None:
            return ()
        return self._positions

    @property
    def cumulative_distances(self) -> Sequence[float]:
        """누적 거리 S+1개. 샘플이 없으면 빈 시퀀스."""
        self.ensure()
        if not self._has_samples or self._distances is None:
            return ()
        return self._distances

    def sample_parameter(self, index: int) -> float:
        """LUT 인덱스에 해당하는 곡선 파라미터."""
        return index / self._samples

    def mark_dirty(self) -> None:
        """캐시를 무효화한다. 재계산은 다음 조회 때 수행된다."""
        self._dirty = True

    def ensure(self) -> None:
        """무효화 상태이면 재계산한다."""
        if self.is_dirty:
            self.rebuild()

    def rebuild(self) -> None:
        """스플라인을 S+1개 지점에서 샘플링하여 테이블을 재구성한다."""
        self._dirty = False
        self._built_generation = self._spline.generation

        if self._spline.is_degenerate:
            self._has_samples = False
            self._total_length = 0.0
            logger.debug(
                'LUT cleared: spline has %d knot(s)', len(self._spline)
            )
            return

        size = self._samples + 1
        if self._distances is None or len(self._distances) != size:
            self._distances = [0.0] * size
        if self._positions is None or len(self._positions) != size:
            self._positions = [Vec2()] * size

        distances = self._distances
        positions = self._positions

        prev = self._spline.evaluate_position(0.0)
        distances[0] = 0.0
        positions[0] = prev
        for i in range(1, size):
            curr = self._spline.evaluate_position(i / self._samples)
            positions[i] = curr
            distances[i] = distances[i - 1] + prev.distance_to(curr)
            prev = curr

        self._has_samples = True
        self._total_length = distances[self._samples]
        logger.debug(
            'LUT rebuilt: samples=%d, length=%.6f, generation=%d',
            self._samples, self._total_length, self._built_generation,
        )

    # -- 조회 --

    def total_length(self) -> float:
        """곡선 전체 길이 (정규화 좌표계)."""
        self.ensure()
        return self._total_length

    def distance_to_parameter(self, distance: float) -> float:
        """곡선 시작점으로부터의 거리를 곡선 파라미터 t로 변환한다.

        Args:
            distance: 호 길이. [0, 전체 길이]로 클램프된다.

        Returns:
            t ∈ [0, 1]. 길이가 0이면 0.
        """
        total = self.total_length()
        if total <= 0.0:
            return 0.0
        # 양 끝에 길이 0 구간이 있어도 끝점은 0, 1로 고정
        if distance <= 0.0:
            return 0.0
        if distance >= total:
            return 1.0

        lut = self._distances
        # lut[lo] <= distance 를 만족하는 마지막 구간
        lo = bisect.bisect_right(lut, distance) - 1
        lo = max(0, min(self._samples - 1, lo))
        hi = lo + 1

        seg_dist = lut[hi] - lut[lo]
        frac = (distance - lut[lo]) / seg_dist if seg_dist > 0.0 else 0.0
        return (lo + frac) / self._samples

    def distance_fraction_to_parameter(self, fraction: float) -> float:
        """전체 길이 대비 비율(0~1)을 곡선 파라미터 t로 변환한다."""
        return self.distance_to_parameter(fraction * self.total_length())

    def parameter_to_distance_fraction(self, t: float) -> float:
        """곡선 파라미터 t를 전체 길이 대비 비율(0~1)로 변환한다."""
        total = self.total_length()
        if total <= 0.0:
            return 0.0

        lo, hi, frac = self._bracket(t)
        lut = self._distances
        dist = lut[lo] + (lut[hi] - lut[lo]) * frac
        return dist / total

    def baked_position_at(self, t: float) -> Vec2:
        """인접 샘플 간 선형 보간으로 근사한 곡선 위치 (베지어 재평가 없음).

        샘플이 없으면 퇴화 곡선의 점(노트 위치 또는 원점)을 반환한다.
        """
        self.ensure()
        if not self._has_samples:
            return self._spline.evaluate_position(0.0)

        lo, hi, frac = self._bracket(t)
        return Vec2.lerp(self._positions[lo], self._positions[hi], frac)

    def _bracket(self, t: float) -> tuple[int, int, float]:
        """t를 클램프하여 (lo, hi, frac) 샘플 구간으로 변환한다."""
        t = max(0.0, min(1.0, t))
        fi = t * self._samples
        lo = min(math.floor(fi), self._samples - 1)
        return lo, lo + 1, fi - lo
