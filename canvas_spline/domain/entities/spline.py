"""스플라인 엔티티."""

from __future__ import annotations

from collections.abc import Iterable

from canvas_spline.domain.services import curve_evaluator
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.vector import Vec2


class Spline:
    """순서가 있는 노트 시퀀스를 소유하는 구간별 3차 베지어 곡선.

    노트를 교체하거나 수정할 때마다 generation이 1 증가한다.
    파생 캐시(ArcLengthTable 등)는 마지막으로 본 generation과
    비교하여 무효화 여부를 판단한다.

    Args:
        knots: 초기 노트 목록.
    """

    def __init__(self, knots: Iterable[Knot] = ()) -> None:
        self._knots: tuple[Knot, ...] = tuple(knots)
        self._generation = 0

    @property
    def knots(self) -> tuple[Knot, ...]:
        return self._knots

    @property
    def generation(self) -> int:
        """노트 시퀀스 버전. 변경 시마다 증가한다."""
        return self._generation

    @property
    def segment_count(self) -> int:
        return max(0, len(self._knots) - 1)

    @property
    def is_degenerate(self) -> bool:
        """노트가 2개 미만이면 길이가 0인 점 곡선이다."""
        return len(self._knots) < 2

    def __len__(self) -> int:
        return len(self._knots)

    # -- 변경 --

    def set_knots(self, knots: Iterable[Knot]) -> None:
        """노트 시퀀스 전체를 교체한다."""
        self._knots = tuple(knots)
        self._touch()

    def set_knot(self, index: int, knot: Knot) -> None:
        """index 위치의 노트를 교체한다.

        Raises:
            IndexError: 범위 밖 인덱스.
        """
        knots = list(self._knots)
        knots[index] = knot
        self._knots = tuple(knots)
        self._touch()

    def insert_knot(self, index: int, knot: Knot) -> None:
        """index 위치에 노트를 삽입한다."""
        knots = list(self._knots)
        knots.insert(index, knot)
        self._knots = tuple(knots)
        self._touch()

    def remove_knot(self, index: int) -> Knot:
        """index 위치의 노트를 제거하고 반환한다.

        Raises:
            IndexError: 범위 밖 인덱스.
        """
        knots = list(self._knots)
        removed = knots.pop(index)
        self._knots = tuple(knots)
        self._touch()
        return removed

    def _touch(self) -> None:
        self._generation += 1

    # -- 평가 --

    def evaluate_position(self, t: float) -> Vec2:
        """정규화 좌표계의 곡선 위치."""
        return curve_evaluator.evaluate_position(self._knots, t)

    def evaluate_tangent(self, t: float) -> Vec2:
        """정규화 좌표계의 곡선 접선 (비정규화)."""
        return curve_evaluator.evaluate_tangent(self._knots, t)
