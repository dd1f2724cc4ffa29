"""Canvas Spline 도메인 이벤트."""

from canvas_spline.domain.events.spline_events import (
    DomainEvent,
    SplineChangedEvent,
)

__all__ = [
    "DomainEvent",
    "SplineChangedEvent",
]
