"""정규화 단위 사각형 ↔ 호스트 rect-local 좌표 변환."""

from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2


def to_local(normalized: Vec2, rect: Rect) -> Vec2:
    """정규화 위치를 rect-local 위치로 변환한다 (성분별 스케일 후 이동)."""
    return rect.origin + normalized.scale(rect.size)


def to_local_scalar(value: float, rect: Rect) -> float:
    """정규화 길이를 rect-local 길이로 변환한다.

    사각형의 짧은 변을 기준으로 하여 종횡비와 무관하게 등방 변환한다.
    """
    return value * rect.min_dimension


def to_local_tangent(tangent: Vec2, rect: Rect) -> Vec2:
    """정규화 접선을 rect-local 접선으로 변환한다.

    x/y 성분을 너비/높이로 각각 스케일한다 (비등방).
    정사각형이 아닌 사각형에서는 각도가 보존되지 않는다.
    """
    return tangent.scale(rect.size)


def to_normalized(local: Vec2, rect: Rect) -> Vec2:
    """to_local()의 역변환. 크기가 0인 축은 0으로 매핑한다."""
    x = (local.x - rect.x) / rect.width if rect.width != 0 else 0.0
    y = (local.y - rect.y) / rect.height if rect.height != 0 else 0.0
    return Vec2(x, y)
