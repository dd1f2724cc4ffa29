"""이벤트 발행 인프라 (EventPublisher 구현)."""

from canvas_spline.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)

__all__ = ["InMemoryEventPublisher"]
