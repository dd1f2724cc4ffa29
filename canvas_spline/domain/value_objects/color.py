"""색상 및 그라디언트 값 객체."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Color:
    """RGBA 색상 (각 성분 0.0~1.0).

    Args:
        r: 빨강.
        g: 초록.
        b: 파랑.
        a: 알파.
    """

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @staticmethod
    def lerp(c0: Color, c1: Color, t: float) -> Color:
        return Color(
            c0.r + (c1.r - c0.r) * t,
            c0.g + (c1.g - c0.g) * t,
            c0.b + (c1.b - c0.b) * t,
            c0.a + (c1.a - c0.a) * t,
        )


@dataclass(frozen=True)
class GradientKey:
    """그라디언트 색상 키.

    Args:
        time: 키 위치 (0.0~1.0).
        color: 해당 위치의 색상.
    """

    time: float
    color: Color


@dataclass(frozen=True)
class ColorGradient:
    """채움 구간 진행도에 따른 색상 그라디언트.

    키가 없으면 흰색, 키가 하나면 단색이다.
    첫 키 이전/마지막 키 이후는 끝 키 색상으로 고정된다.

    Args:
        keys: 색상 키 목록. time 오름차순으로 정렬된다.
    """

    keys: tuple[GradientKey, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.keys, key=lambda k: k.time))
        object.__setattr__(self, 'keys', ordered)

    def evaluate(self, t: float) -> Color:
        """t 위치의 색상을 계산한다."""
        if not self.keys:
            return Color()

        t = max(0.0, min(1.0, t))
        first = self.keys[0]
        if t <= first.time:
            return first.color

        for prev, curr in zip(self.keys, self.keys[1:]):
            if t <= curr.time:
                span = curr.time - prev.time
                frac = (t - prev.time) / span if span > 0.0 else 1.0
                return Color.lerp(prev.color, curr.color, frac)

        return self.keys[-1].color
