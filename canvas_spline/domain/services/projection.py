"""베이크된 LUT 기반 최근접점 투영.

베지어를 재평가하지 않고 LUT 샘플만 사용한다.

1. Coarse: [min_t, max_t] 범위의 LUT 샘플을 선형 탐색하여
   제곱 거리가 최소인 인덱스를 찾는다.
2. Refine: 최적 샘플과 양옆 샘플을 잇는 두 선분에 점을 투영하고
   더 가까운 쪽을 택한다.
3. 선분이 모두 길이 0이면 coarse 결과를 그대로 사용한다.

오차는 인접 샘플 간 호 길이 이하로 제한된다.
"""

from __future__ import annotations

import math

from canvas_spline.domain.entities.arc_length_table import ArcLengthTable
from canvas_spline.domain.services.coordinate_mapper import to_local
from canvas_spline.domain.value_objects.projection import (
    NO_PROJECTION,
    Projection,
)
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2


def closest_on_segment(
    point: Vec2, p0: Vec2, p1: Vec2
) -> tuple[float, float] | None:
    """선분 p0→p1 위 최근접점의 (u, 거리). 길이 0 선분이면 None.

    u = clamp01(dot(point - p0, p1 - p0) / |p1 - p0|²)
    """
    direction = p1 - p0
    len_sqr = direction.sqr_magnitude
    if len_sqr <= 0.0:
        return None
    u = max(0.0, min(1.0, (point - p0).dot(direction) / len_sqr))
    return u, point.distance_to(Vec2.lerp(p0, p1, u))


def project_point(
    table: ArcLengthTable,
    point: Vec2,
    min_t: float = 0.0,
    max_t: float = 1.0,
    rect: Rect | None = None,
) -> Projection:
    """점을 곡선에 투영하여 가장 가까운 파라미터와 거리를 구한다.

    Args:
        table: 베이크된 호 길이 테이블.
        point: 질의 점. rect가 주어지면 rect-local, 아니면 정규화 좌표.
        min_t: 탐색 하한. [0, 1]로 클램프된다.
        max_t: 탐색 상한. [0, 1]로 클램프된다.
        rect: 샘플을 매핑할 호스트 사각형. None이면 매핑하지 않음.

    Returns:
        Projection(t, distance). t는 항상 [min_t, max_t] 범위이다.
        노트가 2개 미만이면 NO_PROJECTION (t=0, distance=inf).
    """
    positions = table.baked_positions
    if not positions:
        return NO_PROJECTION

    min_t = max(0.0, min(1.0, min_t))
    max_t = max(0.0, min(1.0, max_t))
    if min_t > max_t:
        min_t, max_t = max_t, min_t

    samples = table.samples

    def sample(index: int) -> Vec2:
        p = positions[index]
        return to_local(p, rect) if rect is not None else p

    i_min = max(0, min(samples, math.floor(min_t * samples)))
    i_max = max(0, min(samples, math.ceil(max_t * samples)))

    # --- Coarse LUT search ---
    best_index = i_min
    best_sqr_dist = math.inf
    for i in range(i_min, i_max + 1):
        sqr_dist = (sample(i) - point).sqr_magnitude
        if sqr_dist < best_sqr_dist:
            best_sqr_dist = sqr_dist
            best_index = i

    # --- Local refinement between neighboring LUT samples ---
    best = sample(best_index)
    result_t = table.sample_parameter(best_index)
    distance = math.sqrt(best_sqr_dist)

    for neighbor in (best_index - 1, best_index + 1):
        if neighbor < i_min or neighbor > i_max:
            continue
        hit = closest_on_segment(point, best, sample(neighbor))
        if hit is None:
            continue
        u, seg_distance = hit
        if seg_distance < distance:
            distance = seg_distance
            best_t = table.sample_parameter(best_index)
            neighbor_t = table.sample_parameter(neighbor)
            result_t = best_t + (neighbor_t - best_t) * u

    return Projection(
        t=max(min_t, min(max_t, result_t)), distance=distance
    )
