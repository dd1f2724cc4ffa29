"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from canvas_spline.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    ContainerConfig,
    ParticleConfig,
    SplineConfig,
)
from canvas_spline.usecase.ports.container_transform import (
    ContainerTransform,
)
from canvas_spline.usecase.ports.event_publisher import EventPublisher

__all__ = [
    "AppConfig",
    "ConfigPort",
    "ContainerConfig",
    "ContainerTransform",
    "EventPublisher",
    "ParticleConfig",
    "SplineConfig",
]
