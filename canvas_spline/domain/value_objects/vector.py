"""2D 벡터 값 객체."""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vec2:
    """2D 위치 또는 방향 벡터.

    Args:
        x: X 성분.
        y: Y 성분.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        """내적."""
        return self.x * other.x + self.y * other.y

    @property
    def sqr_magnitude(self) -> float:
        """길이의 제곱."""
        return self.x * self.x + self.y * self.y

    @property
    def magnitude(self) -> float:
        """벡터 길이."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """단위 벡터. 길이가 0이면 영벡터를 반환한다."""
        length = self.magnitude
        if length == 0.0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def distance_to(self, other: Vec2) -> float:
        """두 점 사이의 유클리드 거리."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def scale(self, other: Vec2) -> Vec2:
        """성분별 곱."""
        return Vec2(self.x * other.x, self.y * other.y)

    @staticmethod
    def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
        """a → b 선형 보간 (t 클램프 없음)."""
        return Vec2(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


ZERO = Vec2(0.0, 0.0)
RIGHT = Vec2(1.0, 0.0)
