"""호스트 사각형 값 객체."""

from dataclasses import dataclass

from canvas_spline.domain.value_objects.vector import Vec2


@dataclass(frozen=True)
class Rect:
    """호스트 UI 컨테이너가 제공하는 축 정렬 사각형 (rect-local 좌표).

    Args:
        x: 원점 X 좌표.
        y: 원점 Y 좌표.
        width: 너비.
        height: 높이.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0

    @property
    def origin(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    @property
    def min_dimension(self) -> float:
        """너비/높이 중 작은 값."""
        return min(self.width, self.height)

    def corners(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """좌하단부터 반시계 방향의 네 꼭짓점."""
        x_max = self.x + self.width
        y_max = self.y + self.height
        return (
            Vec2(self.x, self.y),
            Vec2(self.x, y_max),
            Vec2(x_max, y_max),
            Vec2(x_max, self.y),
        )

