"""컨테이너 좌표 변환 인프라 (ContainerTransform 구현)."""

from canvas_spline.infra.transform.similarity_transform import (
    SimilarityContainerTransform,
    estimate_transform,
)

__all__ = [
    "SimilarityContainerTransform",
    "estimate_transform",
]
