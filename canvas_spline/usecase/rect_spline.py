"""사각형 바인딩 스플라인 유스케이스.

정규화 좌표계의 스플라인과 호 길이 LUT를 소유하고,
호스트 사각형(rect-local) 좌표로 조회 결과를 제공한다.
노트 편집 시 LUT를 무효화하고 SplineChangedEvent를 발행한다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging

from canvas_spline.domain.entities.arc_length_table import (
    DEFAULT_LUT_SAMPLES,
    ArcLengthTable,
)
from canvas_spline.domain.entities.spline import Spline
from canvas_spline.domain.events.spline_events import SplineChangedEvent
from canvas_spline.domain.services import coordinate_mapper
from canvas_spline.domain.services.projection import project_point
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.projection import Projection
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.usecase.ports.config_port import SplineConfig
from canvas_spline.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)

DEBUG_SAMPLES = 64
DEBUG_TANGENT_LENGTH = 10.0


@dataclass(frozen=True)
class DebugLine:
    """디버그 시각화용 선분 (rect-local 좌표).

    Args:
        start: 시작점.
        end: 끝점.
        kind: 'bounds' | 'curve' | 'tangent'.
    """

    start: Vec2
    end: Vec2
    kind: str


class RectSpline:
    """호스트 사각형에 매핑되는 스플라인 소유자.

    LUT 거리는 정규화 좌표계 기준이며, 위치/접선/투영은
    rect-local 좌표로 주고받는다.

    Args:
        spline: 소유할 스플라인.
        rect: 호스트 사각형.
        event_publisher: 변경 이벤트 발행자. None이면 발행하지 않음.
        lut_samples: LUT 해상도.
        spline_id: 이벤트 식별자.
    """

    def __init__(
        self,
        spline: Spline,
        rect: Rect,
        event_publisher: EventPublisher | None = None,
        lut_samples: int = DEFAULT_LUT_SAMPLES,
        spline_id: str = 'spline',
    ) -> None:
        self._spline = spline
        self._rect = rect
        self._event_publisher = event_publisher
        self._table = ArcLengthTable(spline, lut_samples)
        self._spline_id = spline_id

    @classmethod
    def from_config(
        cls,
        config: SplineConfig,
        event_publisher: EventPublisher | None = None,
    ) -> RectSpline:
        """SplineConfig에서 RectSpline을 생성한다."""
        return cls(
            Spline(config.knots),
            config.rect,
            event_publisher=event_publisher,
            lut_samples=config.lut_samples,
            spline_id=config.spline_id,
        )

    @property
    def spline(self) -> Spline:
        return self._spline

    @property
    def table(self) -> ArcLengthTable:
        return self._table

    @property
    def spline_id(self) -> str:
        return self._spline_id

    @property
    def generation(self) -> int:
        """스플라인 generation. 소비자는 마지막 값과 비교한다."""
        return self._spline.generation

    @property
    def rect(self) -> Rect:
        return self._rect

    @rect.setter
    def rect(self, value: Rect) -> None:
        # LUT는 정규화 좌표계이므로 무효화하지 않는다
        self._rect = value

    # -- 노트 편집 --

    def set_knots(self, knots: Iterable[Knot]) -> None:
        """노트 시퀀스 전체를 교체한다."""
        self._spline.set_knots(knots)
        self._on_changed()

    def set_knot(self, index: int, knot: Knot) -> None:
        """index 위치의 노트를 교체한다."""
        self._spline.set_knot(index, knot)
        self._on_changed()

    def insert_knot(self, index: int, knot: Knot) -> None:
        """index 위치에 노트를 삽입한다."""
        self._spline.insert_knot(index, knot)
        self._on_changed()

    def remove_knot(self, index: int) -> Knot:
        """index 위치의 노트를 제거한다."""
        removed = self._spline.remove_knot(index)
        self._on_changed()
        return removed

    def _on_changed(self) -> None:
        self._table.mark_dirty()
        logger.debug(
            'Spline %s changed: generation=%d, knots=%d',
            self._spline_id, self._spline.generation, len(self._spline),
        )
        if self._event_publisher is None:
            return
        self._event_publisher.publish(
            SplineChangedEvent(
                spline_id=self._spline_id,
                generation=self._spline.generation,
                knot_count=len(self._spline),
            )
        )

    # -- 곡선 평가 (rect-local) --

    def evaluate_position(self, t: float) -> Vec2:
        """rect-local 곡선 위치."""
        normalized = self._spline.evaluate_position(t)
        return coordinate_mapper.to_local(normalized, self._rect)

    def evaluate_tangent(self, t: float) -> Vec2:
        """rect-local 곡선 접선 (성분별 비등방 스케일)."""
        tangent = self._spline.evaluate_tangent(t)
        return coordinate_mapper.to_local_tangent(tangent, self._rect)

    def normalized_scalar_to_local(self, value: float) -> float:
        """정규화 길이를 rect-local 길이로 변환한다 (짧은 변 기준)."""
        return coordinate_mapper.to_local_scalar(value, self._rect)

    # -- 호 길이 --

    def spline_length(self) -> float:
        """곡선 전체 길이 (정규화 좌표계)."""
        return self._table.total_length()

    def distance_to_t(self, distance: float) -> float:
        """곡선을 따라 잰 거리를 곡선 파라미터 t로 변환한다."""
        return self._table.distance_to_parameter(distance)

    def distance_fraction_to_t(self, fraction: float) -> float:
        """길이 비율(0~1)을 곡선 파라미터 t로 변환한다."""
        return self._table.distance_fraction_to_parameter(fraction)

    def t_to_distance_fraction(self, t: float) -> float:
        """곡선 파라미터 t를 길이 비율(0~1)로 변환한다."""
        return self._table.parameter_to_distance_fraction(t)

    def baked_position(self, t: float) -> Vec2:
        """LUT 보간 위치 (rect-local, 베지어 재평가 없음)."""
        normalized = self._table.baked_position_at(t)
        return coordinate_mapper.to_local(normalized, self._rect)

    # -- 공간 질의 --

    def position_to_t(
        self,
        local_position: Vec2,
        min_t: float = 0.0,
        max_t: float = 1.0,
    ) -> Projection:
        """rect-local 위치에 가장 가까운 곡선 파라미터를 찾는다.

        Args:
            local_position: rect-local 질의 점.
            min_t: 탐색 하한.
            max_t: 탐색 상한.

        Returns:
            Projection(t, rect-local 거리).
        """
        return project_point(
            self._table, local_position, min_t, max_t, rect=self._rect
        )

    # -- 디버그 시각화 --

    def debug_lines(
        self,
        samples: int = DEBUG_SAMPLES,
        tangent_length: float = DEBUG_TANGENT_LENGTH,
    ) -> list[DebugLine]:
        """사각형 경계, 곡선 폴리라인, 접선 눈금을 선분 목록으로 반환한다."""
        corners = self._rect.corners()
        lines = [
            DebugLine(corners[i], corners[(i + 1) % 4], 'bounds')
            for i in range(4)
        ]
        if samples < 1:
            return lines

        prev = self.evaluate_position(0.0)
        for i in range(1, samples + 1):
            t = i / samples
            curr = self.evaluate_position(t)
            lines.append(DebugLine(prev, curr, 'curve'))

            tangent = self.evaluate_tangent(t).normalized()
            lines.append(
                DebugLine(curr, curr + tangent * tangent_length, 'tangent')
            )
            prev = curr

        return lines
