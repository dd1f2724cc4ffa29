"""호스트 컨테이너 좌표 변환 포트 인터페이스.

rect-local 좌표를 world 좌표로 옮기는 변환을 추상화한다.
"""

from abc import ABC, abstractmethod

from canvas_spline.domain.value_objects.vector import Vec2


class ContainerTransform(ABC):
    """rect-local → world 변환 인터페이스."""

    @abstractmethod
    def transform_point(self, local: Vec2) -> Vec2:
        """위치를 변환한다 (이동 포함)."""

    @abstractmethod
    def transform_direction(self, local: Vec2) -> Vec2:
        """방향 벡터를 변환한다 (이동 제외)."""
