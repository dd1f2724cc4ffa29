"""최근접점 투영 결과 값 객체."""

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Projection:
    """곡선 위 최근접점 탐색 결과.

    Args:
        t: 곡선 파라미터.
        distance: 질의 점과 투영점 사이 거리. 투영할 곡선이 없으면 inf.
    """

    t: float
    distance: float

    @property
    def found(self) -> bool:
        """투영 가능한 곡선이 있었는지 여부."""
        return not math.isinf(self.distance)


NO_PROJECTION = Projection(t=0.0, distance=math.inf)
