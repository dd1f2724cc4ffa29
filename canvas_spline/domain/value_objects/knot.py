"""베지어 노트(제어점) 값 객체."""

from dataclasses import dataclass, field

from canvas_spline.domain.value_objects.vector import Vec2


@dataclass(frozen=True)
class Knot:
    """스플라인 노트.

    tangent_in/tangent_out은 position 기준 상대 오프셋이며
    인접 세그먼트의 베지어 제어점을 정의한다.

    Args:
        position: 노트 위치 (정규화 좌표).
        tangent_in: 들어오는 핸들 오프셋.
        tangent_out: 나가는 핸들 오프셋.
    """

    position: Vec2 = field(default_factory=Vec2)
    tangent_in: Vec2 = field(default_factory=Vec2)
    tangent_out: Vec2 = field(default_factory=Vec2)

    @property
    def in_handle(self) -> Vec2:
        """들어오는 제어점의 절대 위치."""
        return self.position + self.tangent_in

    @property
    def out_handle(self) -> Vec2:
        """나가는 제어점의 절대 위치."""
        return self.position + self.tangent_out
