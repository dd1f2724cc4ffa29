r"""Canvas Spline 진입점.

설정 파일의 스플라인을 로드하여 길이/투영/파티클 배치를 출력한다.

실행: canvas_spline -c config.yaml --frames 3 --dt 0.016 \\
        --project 200 100
"""

from __future__ import annotations

import argparse
import logging
import sys

from canvas_spline.domain.events.spline_events import (
    DomainEvent,
    SplineChangedEvent,
)
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.infra.config.yaml_config_loader import YamlConfigLoader
from canvas_spline.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from canvas_spline.infra.transform.similarity_transform import (
    SimilarityContainerTransform,
)
from canvas_spline.usecase.rect_spline import RectSpline
from canvas_spline.usecase.spline_particles import SplineParticles

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='canvas_spline',
        description='Bezier spline arc-length and projection tool',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the config YAML file (default: packaged defaults)',
    )
    parser.add_argument(
        '--frames', type=int, default=1,
        help='Number of particle frames to simulate, default: 1',
    )
    parser.add_argument(
        '--dt', type=float, default=1.0 / 60.0,
        help='Frame delta time in seconds, default: 1/60',
    )
    parser.add_argument(
        '--project', type=float, nargs=2, metavar=('X', 'Y'),
        help='Rect-local point to project onto the spline',
    )
    parser.add_argument(
        '--append-knot', type=float, nargs=2, metavar=('X', 'Y'),
        help='Append a knot (normalized coordinates) before querying',
    )
    parser.add_argument(
        '--min-t', type=float, default=0.0,
        help='Lower bound of the projection range, default: 0',
    )
    parser.add_argument(
        '--max-t', type=float, default=1.0,
        help='Upper bound of the projection range, default: 1',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """설정을 로드하고 스플라인 질의 결과를 출력한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        종료 코드.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    # 1. 설정 로드
    config = YamlConfigLoader(args.config_file).load()

    # 2. 이벤트 버스 + 스플라인 생성
    publisher = InMemoryEventPublisher()

    def _log_change(event: DomainEvent) -> None:
        if isinstance(event, SplineChangedEvent):
            logger.info(
                'Spline %s changed (generation=%d)',
                event.spline_id, event.generation,
            )

    publisher.subscribe(SplineChangedEvent, _log_change)
    rect_spline = RectSpline.from_config(config.spline, publisher)
    logger.info(
        'Spline %s: knots=%d, length=%.6f',
        rect_spline.spline_id, len(rect_spline.spline),
        rect_spline.spline_length(),
    )

    if args.append_knot is not None:
        x, y = args.append_knot
        rect_spline.insert_knot(
            len(rect_spline.spline), Knot(position=Vec2(x, y))
        )
        logger.info('Length after edit: %.6f', rect_spline.spline_length())

    # 3. 투영 질의
    if args.project is not None:
        point = Vec2(args.project[0], args.project[1])
        result = rect_spline.position_to_t(point, args.min_t, args.max_t)
        print(f'project {point.x:.3f},{point.y:.3f}: '
              f't={result.t:.6f} distance={result.distance:.6f}')

    # 4. 파티클 시뮬레이션
    container = SimilarityContainerTransform.from_config(config.container)
    particles = SplineParticles(rect_spline, config.particles, container)
    for frame in range(max(0, args.frames)):
        placements = particles.late_update(args.dt)
        print(f'frame {frame}: {len(placements)} particles')
        for p in placements:
            print(f'  #{p.index} t={p.t:.4f} '
                  f'pos=({p.position.x:.3f}, {p.position.y:.3f}) '
                  f'rot={p.rotation:.2f} scale={p.scale:.3f} '
                  f'alpha={p.color.a:.3f}')

    return 0


if __name__ == '__main__':
    sys.exit(main())
