"""구간별 3차 베지어 곡선 평가.

노트 시퀀스와 전역 파라미터 t만으로 위치/접선을 계산하는 순수 함수 모음.

Mathematical Foundation:
- B(t)  = (1-t)³P₀ + 3(1-t)²t P₁ + 3(1-t)t² P₂ + t³ P₃
- B'(t) = 3(1-t)²(P₁-P₀) + 6(1-t)t(P₂-P₁) + 3t²(P₃-P₂)
- N개 노트 → N-1개 세그먼트, t는 세그먼트 수에 따라 균등 분할
"""

from __future__ import annotations

from collections.abc import Sequence
import math

from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.vector import RIGHT, ZERO, Vec2


def segment_at(knot_count: int, t: float) -> tuple[int, float]:
    """전역 파라미터 t를 (세그먼트 인덱스, 로컬 파라미터)로 변환한다.

    인덱스는 [0, N-2]로 고정되므로 범위 밖 t는 경계 세그먼트로 외삽된다.

    Args:
        knot_count: 노트 개수 (2 이상).
        t: 전역 파라미터.

    Returns:
        (segment_index, local_t) 튜플.
    """
    segment_count = knot_count - 1
    scaled = t * segment_count
    index = max(0, min(segment_count - 1, math.floor(scaled)))
    return index, scaled - index


def control_points(
    k0: Knot, k1: Knot
) -> tuple[Vec2, Vec2, Vec2, Vec2]:
    """두 노트 사이 세그먼트의 베지어 제어점 (P0, P1, P2, P3)."""
    return k0.position, k0.out_handle, k1.in_handle, k1.position


def cubic_bezier(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
    """3차 베지어 위치."""
    u = 1.0 - t
    uu = u * u
    tt = t * t
    b0 = uu * u
    b1 = 3.0 * uu * t
    b2 = 3.0 * u * tt
    b3 = tt * t
    return Vec2(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


def cubic_bezier_tangent(
    p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float
) -> Vec2:
    """3차 베지어 1차 도함수 (정규화하지 않음)."""
    u = 1.0 - t
    return (
        (p1 - p0) * (3.0 * u * u)
        + (p2 - p1) * (6.0 * u * t)
        + (p3 - p2) * (3.0 * t * t)
    )


def evaluate_position(knots: Sequence[Knot], t: float) -> Vec2:
    """전역 파라미터 t의 곡선 위치.

    t는 클램프하지 않는다. 노트가 하나면 그 위치, 없으면 원점을 반환한다.
    """
    if not knots:
        return ZERO
    if len(knots) == 1:
        return knots[0].position

    index, local_t = segment_at(len(knots), t)
    p0, p1, p2, p3 = control_points(knots[index], knots[index + 1])
    return cubic_bezier(p0, p1, p2, p3, local_t)


def evaluate_tangent(knots: Sequence[Knot], t: float) -> Vec2:
    """전역 파라미터 t의 곡선 접선 (로컬 파라미터에 대한 미분).

    노트가 2개 미만이면 오른쪽 방향 기본 벡터를 반환한다.
    """
    if len(knots) < 2:
        return RIGHT

    index, local_t = segment_at(len(knots), t)
    p0, p1, p2, p3 = control_points(knots[index], knots[index + 1])
    return cubic_bezier_tangent(p0, p1, p2, p3, local_t)
