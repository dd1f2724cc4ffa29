"""Canvas Spline 유스케이스 레이어.

도메인 곡선 엔진을 호스트 사각형과 소비자(파티클 애니메이터)에
연결하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from canvas_spline.usecase.rect_spline import DebugLine, RectSpline
from canvas_spline.usecase.spline_particles import (
    ParticlePlacement,
    SplineParticles,
)

__all__ = [
    "DebugLine",
    "ParticlePlacement",
    "RectSpline",
    "SplineParticles",
]
