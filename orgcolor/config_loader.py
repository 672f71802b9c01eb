# -*- coding: utf-8 -*-
"""
YAML 설정 로더 유틸리티

색상 적용 기본값과 임계값 분류 함수를 YAML 파일에서 로드합니다.

예시 (orgcolor.yaml):
    min_row: 3                  # 단위 행이 있는 테이블
    annotation_keyword: HEADER
    default_classifier: correlation
    allow_import_references: false  # 주석에서 module:function 허용
    classifiers:
      pvalue:
        - {max: 0.01, background: green, foreground: black}
        - {min: 0.01, max: 0.05, background: light-green}
"""

import yaml
import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List
from pathlib import Path

from . import config as settings
from .color.classifiers import ThresholdBand, ThresholdClassifier, register_classifier


logger = logging.getLogger(__name__)


@dataclass
class ColorConfig:
    """색상 적용 설정"""
    # 주석에 시작 행/열이 없을 때 값 (None 이면 2)
    min_row: Optional[int] = None
    min_col: Optional[int] = None

    # 테이블 위 주석 키워드
    annotation_keyword: str = settings.ANNOTATION_KEYWORD

    # color 키가 없을 때 분류 함수
    default_classifier: str = settings.DEFAULT_CLASSIFIER

    # 주석 color 값의 'module:function' import 허용 (기본은 등록된 이름만)
    allow_import_references: bool = False

    # 이름 -> 임계값 구간 목록
    classifiers: Dict[str, List[ThresholdBand]] = field(default_factory=dict)


class ConfigLoader:
    """YAML 설정 로더"""

    DEFAULT_CONFIG_NAME = settings.DEFAULT_CONFIG_NAME

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[ColorConfig] = None

    def load(self, config_path: Optional[str] = None) -> ColorConfig:
        """YAML 설정 파일 로드 (파일이 없으면 기본 설정)"""
        path = Path(config_path) if config_path else self.config_path
        if path is None:
            path = settings.get_config_path()

        if path and path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            logger.debug(f"설정 파일 로드: {path}")
            self._config = self._parse_config(data)
        else:
            if path:
                logger.warning(f"설정 파일이 없어 기본 설정을 사용합니다: {path}")
            self._config = ColorConfig()

        return self._config

    def load_from_string(self, yaml_string: str) -> ColorConfig:
        """YAML 문자열에서 설정 로드"""
        data = yaml.safe_load(yaml_string) or {}
        self._config = self._parse_config(data)
        return self._config

    def load_from_dict(self, data: Dict[str, Any]) -> ColorConfig:
        """딕셔너리에서 설정 로드"""
        self._config = self._parse_config(data)
        return self._config

    def _parse_config(self, data: Dict[str, Any]) -> ColorConfig:
        """설정 데이터 파싱"""
        if not isinstance(data, dict):
            raise ValueError(f"설정은 매핑이어야 합니다: {type(data).__name__}")

        config = ColorConfig()

        if data.get('min_row') is not None:
            config.min_row = int(data['min_row'])
        if data.get('min_col') is not None:
            config.min_col = int(data['min_col'])
        if 'annotation_keyword' in data:
            config.annotation_keyword = str(data['annotation_keyword']).upper()
        if 'default_classifier' in data:
            config.default_classifier = str(data['default_classifier'])
        if 'allow_import_references' in data:
            config.allow_import_references = bool(data['allow_import_references'])

        classifiers = data.get('classifiers', {})
        if isinstance(classifiers, dict):
            for name, bands in classifiers.items():
                if isinstance(bands, list):
                    config.classifiers[str(name)] = [
                        self._parse_band(band) for band in bands if isinstance(band, dict)
                    ]

        return config

    def _parse_band(self, data: Dict[str, Any]) -> ThresholdBand:
        """임계값 구간 파싱"""
        face = {}
        if data.get('foreground'):
            face['foreground'] = str(data['foreground'])
        if data.get('background'):
            face['background'] = str(data['background'])

        return ThresholdBand(
            face=face,
            low=float(data['min']) if data.get('min') is not None else None,
            high=float(data['max']) if data.get('max') is not None else None,
            low_inclusive=bool(data.get('min_inclusive', True)),
            high_inclusive=bool(data.get('max_inclusive', False)),
        )

    def save(self, config: ColorConfig, path: Optional[str] = None) -> str:
        """설정을 YAML 파일로 저장"""
        save_path = Path(path) if path else self.config_path
        if not save_path:
            save_path = Path(self.DEFAULT_CONFIG_NAME)

        data = self._config_to_dict(config)

        with open(save_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

        return str(save_path)

    def _config_to_dict(self, config: ColorConfig) -> Dict[str, Any]:
        """ColorConfig를 딕셔너리로 변환"""
        result: Dict[str, Any] = {}
        if config.min_row is not None:
            result['min_row'] = config.min_row
        if config.min_col is not None:
            result['min_col'] = config.min_col
        result['annotation_keyword'] = config.annotation_keyword
        result['default_classifier'] = config.default_classifier
        if config.allow_import_references:
            result['allow_import_references'] = True
        if config.classifiers:
            result['classifiers'] = {
                name: [self._band_to_dict(band) for band in bands]
                for name, bands in config.classifiers.items()
            }
        return result

    def _band_to_dict(self, band: ThresholdBand) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if band.low is not None:
            result['min'] = band.low
            result['min_inclusive'] = band.low_inclusive
        if band.high is not None:
            result['max'] = band.high
            result['max_inclusive'] = band.high_inclusive
        result.update(band.face)
        return result

    def to_yaml_string(self, config: ColorConfig) -> str:
        """설정을 YAML 문자열로 변환"""
        data = self._config_to_dict(config)
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    @property
    def config(self) -> ColorConfig:
        """현재 로드된 설정 반환"""
        if self._config is None:
            self._config = self.load()
        return self._config


def register_config_classifiers(config: ColorConfig) -> List[str]:
    """설정의 임계값 분류 함수를 이름으로 등록"""
    names = []
    for name, bands in config.classifiers.items():
        register_classifier(name, ThresholdClassifier(bands, name=name))
        names.append(name)
    return names


def load_config(config_path: Optional[str] = None) -> ColorConfig:
    """YAML 설정 파일 로드 + 분류 함수 등록 (편의 함수)"""
    loader = ConfigLoader()
    config = loader.load(config_path)
    register_config_classifiers(config)
    return config
