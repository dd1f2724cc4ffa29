"""Canvas Spline 도메인 이벤트 정의.

스플라인 소유자가 노트를 편집할 때 발행한다.
소비자는 이벤트를 받으면 파생 캐시(위치, 파라미터)를 무효화한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class SplineChangedEvent(DomainEvent):
    """스플라인 노트 변경 이벤트.

    Args:
        spline_id: 스플라인 식별자.
        generation: 변경 후 스플라인 generation.
        knot_count: 변경 후 노트 개수.
    """

    spline_id: str = ""
    generation: int = 0
    knot_count: int = 0
