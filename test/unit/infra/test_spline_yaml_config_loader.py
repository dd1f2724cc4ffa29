"""YamlConfigLoader 유닛 테스트."""

import pytest
import yaml

from canvas_spline.domain.exceptions import InvalidConfigurationError
from canvas_spline.domain.value_objects.rect import Rect
from canvas_spline.domain.value_objects.vector import Vec2
from canvas_spline.infra.config.yaml_config_loader import (
    YamlConfigLoader,
    parse_gradient,
    parse_vec,
)
from canvas_spline.usecase.ports.config_port import AppConfig


@pytest.fixture
def config_yaml(tmp_path):
    """임시 config.yaml 파일을 생성한다."""
    data = {
        'canvas_spline': {
            'spline_id': 'banner',
            'lut_samples': 64,
            'rect': {'x': 10, 'y': 20, 'width': 300, 'height': 150},
            'knots': [
                {'position': [0.0, 0.5], 'tangent_out': [0.2, 0.0]},
                {
                    'position': {'x': 1.0, 'y': 0.5},
                    'tangent_in': [-0.2, 0.0],
                },
            ],
            'particles': {
                'fill_start': 0.1,
                'fill_end': 0.9,
                'spacing': 0.05,
                'particle_size': 0.02,
                'speed': 0.5,
                'gradient': [
                    {'time': 0.0, 'color': [1, 0, 0]},
                    {'time': 1.0, 'color': [0, 0, 1, 0.5]},
                ],
            },
            'container': {
                'reference': {
                    'local': [[0, 0], [1, 0], [0, 1], [1, 1]],
                    'world': [[0, 0], [10, 0], [0, 10], [10, 10]],
                },
            },
        },
    }
    path = tmp_path / 'config.yaml'
    with open(path, 'w') as f:
        yaml.dump(data, f)
    return str(path)


class TestYamlConfigLoader:
    """YamlConfigLoader 테스트."""

    def test_load_spline_section(self, config_yaml):
        """스플라인 설정을 로드한다."""
        config = YamlConfigLoader(config_yaml).load()

        assert config.spline.spline_id == 'banner'
        assert config.spline.lut_samples == 64
        assert config.spline.rect == Rect(10.0, 20.0, 300.0, 150.0)

    def test_load_knots(self, config_yaml):
        """노트 목록을 순서대로 로드한다. 생략된 탄젠트는 0."""
        knots = YamlConfigLoader(config_yaml).load().spline.knots

        assert len(knots) == 2
        assert knots[0].position == Vec2(0.0, 0.5)
        assert knots[0].tangent_in == Vec2(0.0, 0.0)
        assert knots[0].tangent_out == Vec2(0.2, 0.0)
        assert knots[1].position == Vec2(1.0, 0.5)
        assert knots[1].tangent_in == Vec2(-0.2, 0.0)

    def test_load_particles(self, config_yaml):
        """파티클 설정과 그라디언트를 로드한다."""
        particles = YamlConfigLoader(config_yaml).load().particles

        assert particles.fill_start == 0.1
        assert particles.fill_end == 0.9
        assert particles.spacing == 0.05
        assert particles.speed == 0.5
        assert len(particles.gradient.keys) == 2
        assert particles.gradient.keys[0].color.a == 1.0
        assert particles.gradient.keys[1].color.a == 0.5

    def test_load_container_reference(self, config_yaml):
        """컨테이너 기준점을 로드한다."""
        container = YamlConfigLoader(config_yaml).load().container

        assert container.has_reference
        assert len(container.reference_local) == 4
        assert len(container.reference_world) == 4

    def test_load_nonexistent_file(self, tmp_path):
        """존재하지 않는 파일이면 기본값을 사용한다."""
        loader = YamlConfigLoader(tmp_path / 'nonexistent.yaml')
        assert loader.load() == AppConfig()

    def test_load_invalid_yaml(self, tmp_path):
        """최상위가 mapping이 아니면 기본값을 사용한다."""
        path = tmp_path / 'bad.yaml'
        with open(path, 'w') as f:
            f.write('just a string')
        assert YamlConfigLoader(path).load() == AppConfig()

    def test_section_is_optional(self, tmp_path):
        """canvas_spline 키 없이 최상위에 직접 써도 된다."""
        path = tmp_path / 'flat.yaml'
        with open(path, 'w') as f:
            yaml.dump({'lut_samples': 32}, f)
        assert YamlConfigLoader(path).load().spline.lut_samples == 32

    def test_knot_without_position(self, tmp_path):
        """position 없는 노트는 설정 오류."""
        path = tmp_path / 'knots.yaml'
        with open(path, 'w') as f:
            yaml.dump({'knots': [{'tangent_in': [0, 0]}]}, f)
        with pytest.raises(InvalidConfigurationError):
            YamlConfigLoader(path).load()

    def test_rect_without_size(self, tmp_path):
        """width/height 없는 사각형은 설정 오류."""
        path = tmp_path / 'rect.yaml'
        with open(path, 'w') as f:
            yaml.dump({'rect': {'x': 0}}, f)
        with pytest.raises(InvalidConfigurationError):
            YamlConfigLoader(path).load()

    @pytest.mark.parametrize('data', [
        {'particles': 5},
        {'container': ['a']},
        {'container': {'reference': 'abc'}},
    ])
    def test_section_not_mapping(self, tmp_path, data):
        """mapping이 아닌 하위 섹션은 설정 오류."""
        path = tmp_path / 'section.yaml'
        with open(path, 'w') as f:
            yaml.dump(data, f)
        with pytest.raises(InvalidConfigurationError):
            YamlConfigLoader(path).load()

    def test_packaged_defaults(self):
        """패키지 기본 설정 파일을 로드한다."""
        config = YamlConfigLoader().load()
        assert config.spline.spline_id == 'main'
        assert len(config.spline.knots) == 3
        assert config.spline.rect.width == 400.0


class TestParseHelpers:
    def test_parse_vec_invalid(self):
        with pytest.raises(InvalidConfigurationError):
            parse_vec([1.0, 2.0, 3.0], 'v')
        with pytest.raises(InvalidConfigurationError):
            parse_vec('abc', 'v')

    def test_parse_gradient_invalid(self):
        with pytest.raises(InvalidConfigurationError):
            parse_gradient([{'time': 0.0}])
