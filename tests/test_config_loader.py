# -*- coding: utf-8 -*-
"""YAML 설정 로더 테스트"""

import logging

import pytest

from orgcolor.color.classifiers import get_classifier, unregister_classifier
from orgcolor.config import get_log_level, setup_logging
from orgcolor.config_loader import (
    ColorConfig,
    ConfigLoader,
    load_config,
    register_config_classifiers,
)


SAMPLE_YAML = """\
min_row: 3
annotation_keyword: attr_color
default_classifier: pvalue
classifiers:
  pvalue:
    - {max: 0.01, background: green, foreground: black}
    - {min: 0.01, max: 0.05, background: light-green}
"""


class TestConfigLoader:

    def test_defaults(self):
        config = ConfigLoader().load_from_dict({})
        assert config.min_row is None
        assert config.min_col is None
        assert config.annotation_keyword == 'HEADER'
        assert config.default_classifier == 'correlation'
        assert config.classifiers == {}
        assert config.allow_import_references is False

    def test_load_from_string(self):
        config = ConfigLoader().load_from_string(SAMPLE_YAML)
        assert config.min_row == 3
        assert config.min_col is None
        assert config.annotation_keyword == 'ATTR_COLOR'
        assert config.default_classifier == 'pvalue'

        bands = config.classifiers['pvalue']
        assert len(bands) == 2
        assert bands[0].low is None
        assert bands[0].high == 0.01
        assert bands[0].face == {'foreground': 'black', 'background': 'green'}
        assert bands[1].face == {'background': 'light-green'}

    def test_empty_string(self):
        config = ConfigLoader().load_from_string('')
        assert isinstance(config, ColorConfig)

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigLoader().load(str(tmp_path / 'missing.yaml'))
        assert config == ColorConfig()

    def test_save_and_load(self, tmp_path):
        loader = ConfigLoader()
        config = loader.load_from_string(SAMPLE_YAML)

        path = loader.save(config, str(tmp_path / 'orgcolor.yaml'))
        reloaded = ConfigLoader(path).load()
        assert reloaded == config

    def test_to_yaml_string(self):
        loader = ConfigLoader()
        text = loader.to_yaml_string(loader.load_from_string(SAMPLE_YAML))
        assert 'pvalue:' in text
        assert 'min_row: 3' in text

    def test_allow_import_references(self):
        loader = ConfigLoader()
        config = loader.load_from_string('allow_import_references: true\n')
        assert config.allow_import_references is True
        assert 'allow_import_references: true' in loader.to_yaml_string(config)
        assert 'allow_import_references' not in loader.to_yaml_string(ColorConfig())

    def test_invalid_values_raise(self):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_string('min_row: abc\n')
        with pytest.raises(ValueError):
            ConfigLoader().load_from_string('- min_row\n')

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / 'custom.yaml'
        path.write_text('min_col: 4\n', encoding='utf-8')
        monkeypatch.setenv('ORGCOLOR_CONFIG', str(path))
        assert ConfigLoader().load().min_col == 4


class TestRegisterConfigClassifiers:

    def test_registers_threshold_classifier(self):
        config = ConfigLoader().load_from_string(SAMPLE_YAML)
        names = register_config_classifiers(config)
        try:
            assert names == ['pvalue']
            classify = get_classifier('pvalue')
            assert classify('0.001') == {'foreground': 'black', 'background': 'green'}
            assert classify('0.02') == {'background': 'light-green'}
            assert classify('0.5') is None
        finally:
            unregister_classifier('pvalue')

    def test_load_config_registers(self, tmp_path):
        path = tmp_path / 'orgcolor.yaml'
        path.write_text(SAMPLE_YAML, encoding='utf-8')
        try:
            config = load_config(str(path))
            assert config.min_row == 3
            assert get_classifier('pvalue')('0.001') is not None
        finally:
            unregister_classifier('pvalue')


class TestLogging:

    def test_setup_logging_single_handler(self):
        logger = setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert logger.name == 'orgcolor'
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv('ORGCOLOR_LOG_LEVEL', 'warning')
        assert get_log_level() == logging.WARNING
        monkeypatch.setenv('ORGCOLOR_LOG_LEVEL', 'nonsense')
        assert get_log_level() == logging.INFO
