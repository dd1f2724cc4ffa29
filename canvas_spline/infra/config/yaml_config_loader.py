"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from canvas_spline.domain.exceptions import InvalidConfigurationError
from canvas_spline.domain.value_objects.color import (
    Color,
    ColorGradient,
    GradientKey,
)
from canvas_spline.domain.value_objects.knot import Knot
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    ContainerConfig,
    ParticleConfig,
    SplineConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없거나 최상위가 mapping이 아니면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다.

        Raises:
            InvalidConfigurationError: 노트/사각형/그라디언트 형식 오류 시.
        """
        raw = self._read_yaml()
        params = self._extract_params(raw)

        spline_defaults = SplineConfig()
        particle_defaults = ParticleConfig()

        rect_data = params.get("rect")
        particles_data = parse_section(params.get("particles"), "particles")
        container_data = parse_section(params.get("container"), "container")

        config = AppConfig(
            spline=SplineConfig(
                spline_id=str(
                    params.get("spline_id", spline_defaults.spline_id)
                ),
                lut_samples=int(
                    params.get("lut_samples", spline_defaults.lut_samples)
                ),
                rect=(
                    parse_rect(rect_data)
                    if rect_data is not None
                    else spline_defaults.rect
                ),
                knots=parse_knots(params.get("knots") or []),
            ),
            particles=ParticleConfig(
                fill_start=float(particles_data.get(
                    "fill_start", particle_defaults.fill_start
                )),
                fill_end=float(particles_data.get(
                    "fill_end", particle_defaults.fill_end
                )),
                spacing=float(particles_data.get(
                    "spacing", particle_defaults.spacing
                )),
                particle_size=float(particles_data.get(
                    "particle_size", particle_defaults.particle_size
                )),
                speed=float(particles_data.get(
                    "speed", particle_defaults.speed
                )),
                gradient=parse_gradient(particles_data.get("gradient") or []),
            ),
            container=self._parse_container(container_data),
        )

        logger.info(
            "Config loaded from %s (knots=%d)",
            self._path, len(config.spline.knots),
        )
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 canvas_spline 섹션을 추출한다."""
        node_data = raw.get("canvas_spline", raw)
        if isinstance(node_data, dict):
            return node_data
        return {}

    def _parse_container(self, data: dict[str, Any]) -> ContainerConfig:
        reference = parse_section(
            data.get("reference"), "container.reference"
        )
        translation = parse_vec(
            data.get("translation", [0.0, 0.0]), "container.translation"
        )
        return ContainerConfig(
            scale=float(data.get("scale", 1.0)),
            rotation=float(data.get("rotation", 0.0)),
            translation=(translation.x, translation.y),
            reference_local=list(reference.get("local", [])),
            reference_world=list(reference.get("world", [])),
        )


def parse_section(data: Any, name: str) -> dict[str, Any]:
    """선택적 mapping 섹션을 검사한다. None이면 빈 dict.

    Raises:
        InvalidConfigurationError: mapping이 아닐 때.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"{name}: expected mapping, got {data!r}"
        )
    return data


def parse_vec(value: Any, name: str) -> Vec2:
    """[x, y] 리스트 또는 {x, y} dict를 Vec2로 변환한다.

    Raises:
        InvalidConfigurationError: 형식 오류 시.
    """
    try:
        if isinstance(value, dict):
            return Vec2(float(value["x"]), float(value["y"]))
        x, y = value
        return Vec2(float(x), float(y))
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidConfigurationError(
            f"{name}: expected [x, y], got {value!r}"
        ) from e


def parse_rect(data: Any) -> Rect:
    """{x, y, width, height} dict를 Rect로 변환한다."""
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"rect: expected mapping, got {data!r}"
        )
    try:
        return Rect(
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            width=float(data["width"]),
            height=float(data["height"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"rect: invalid {data!r}") from e


def parse_knots(data: Any) -> tuple[Knot, ...]:
    """노트 리스트를 파싱한다.

    각 항목은 {position, tangent_in, tangent_out} 형태이며
    탄젠트는 생략 시 영벡터이다.
    """
    if not isinstance(data, list):
        raise InvalidConfigurationError(
            f"knots: expected list, got {data!r}"
        )

    knots: list[Knot] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "position" not in item:
            raise InvalidConfigurationError(
                f"knots[{i}]: 'position' is required"
            )
        knots.append(
            Knot(
                position=parse_vec(item["position"], f"knots[{i}].position"),
                tangent_in=parse_vec(
                    item.get("tangent_in", [0.0, 0.0]),
                    f"knots[{i}].tangent_in",
                ),
                tangent_out=parse_vec(
                    item.get("tangent_out", [0.0, 0.0]),
                    f"knots[{i}].tangent_out",
                ),
            )
        )
    return tuple(knots)


def parse_gradient(data: Any) -> ColorGradient:
    """[{time, color: [r, g, b, a?]}, ...] 를 ColorGradient로 변환한다."""
    if not isinstance(data, list):
        raise InvalidConfigurationError(
            f"gradient: expected list, got {data!r}"
        )

    keys: list[GradientKey] = []
    for i, item in enumerate(data):
        try:
            rgba = [float(c) for c in item["color"]]
            if len(rgba) == 3:
                rgba.append(1.0)
            r, g, b, a = rgba
            keys.append(
                GradientKey(time=float(item["time"]), color=Color(r, g, b, a))
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidConfigurationError(
                f"gradient[{i}]: invalid {item!r}"
            ) from e
    return ColorGradient(tuple(keys))
