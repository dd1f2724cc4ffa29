"""설정 로딩 인프라 (ConfigPort 구현)."""

from canvas_spline.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = ["YamlConfigLoader"]
