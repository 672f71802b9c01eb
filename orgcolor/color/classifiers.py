# -*- coding: utf-8 -*-
"""
셀 분류 함수 모듈

분류 함수는 셀 텍스트 하나를 받아 face 딕셔너리 또는 None 을 반환하는
호출 가능 객체입니다. None 은 "스타일 변경 없음" 을 의미합니다.

기본 분류 함수:
- classify_correlation: 상관계수 행렬 임계값 색상
    v >= 0.5         → 초록 배경
    0.3 <= v < 0.5   → 연한 초록 배경 (#90EE90)
    v <= -0.5        → 빨간 배경
    -0.5 < v <= -0.3 → 주황 배경
    그 외 / 숫자 아님 → None

이름으로 찾기:
- 'correlation' 등 등록된 이름
- 'package.module:function' 또는 'package.module.function' 경로
"""

import re
import logging
import importlib
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from ..table.models import Classifier, Face


logger = logging.getLogger(__name__)

# 선행 숫자 부분 (예: '0.42', '-1e-3', '.5abc' → .5)
NUMBER_PREFIX = re.compile(r'^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)')

# 상관계수 색상
FACE_STRONG_POSITIVE: Face = {'foreground': 'black', 'background': 'green'}
FACE_MODERATE_POSITIVE: Face = {'foreground': 'black', 'background': '#90EE90'}
FACE_STRONG_NEGATIVE: Face = {'foreground': 'black', 'background': 'red'}
FACE_MODERATE_NEGATIVE: Face = {'foreground': 'black', 'background': 'orange'}


class ClassifierLookupError(LookupError):
    """분류 함수를 찾을 수 없음"""


def parse_number(text: Optional[str]) -> Optional[float]:
    """텍스트 앞부분의 숫자를 float 로 변환 (숫자로 시작하지 않으면 None)"""
    if not text:
        return None
    match = NUMBER_PREFIX.match(text)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def classify_correlation(cell_text: str) -> Optional[Face]:
    """상관계수 행렬 셀 분류"""
    value = parse_number(cell_text)
    if value is None:
        return None

    if value >= 0.5:
        return dict(FACE_STRONG_POSITIVE)
    if 0.3 <= value < 0.5:
        return dict(FACE_MODERATE_POSITIVE)
    if value <= -0.5:
        return dict(FACE_STRONG_NEGATIVE)
    if -0.5 < value <= -0.3:
        return dict(FACE_MODERATE_NEGATIVE)
    return None


# ============================================================
# 임계값 분류 (YAML 설정용)
# ============================================================

@dataclass
class ThresholdBand:
    """
    임계값 구간

    low/high 가 None 이면 해당 방향으로 제한 없음
    """
    face: Face
    low: Optional[float] = None
    high: Optional[float] = None
    low_inclusive: bool = True
    high_inclusive: bool = False

    def matches(self, value: float) -> bool:
        if self.low is not None:
            if value < self.low or (value == self.low and not self.low_inclusive):
                return False
        if self.high is not None:
            if value > self.high or (value == self.high and not self.high_inclusive):
                return False
        return True


class ThresholdClassifier:
    """구간 목록으로 만든 분류 함수 (앞의 구간이 우선)"""

    def __init__(self, bands: List[ThresholdBand], name: str = ''):
        self.bands = list(bands)
        self.name = name

    def __call__(self, cell_text: str) -> Optional[Face]:
        value = parse_number(cell_text)
        if value is None:
            return None
        for band in self.bands:
            if band.matches(value):
                return dict(band.face)
        return None

    def __repr__(self) -> str:
        return f"ThresholdClassifier(name={self.name!r}, bands={len(self.bands)})"


# ============================================================
# 이름 → 분류 함수 등록
# ============================================================

_REGISTRY: Dict[str, Classifier] = {
    'correlation': classify_correlation,
    'classify-correlation': classify_correlation,
}


def register_classifier(name: str, func: Classifier) -> None:
    """분류 함수 등록"""
    if not callable(func):
        raise TypeError(f"분류 함수는 호출 가능해야 합니다: {name}")
    _REGISTRY[name] = func
    logger.debug(f"분류 함수 등록: {name}")


def unregister_classifier(name: str) -> None:
    _REGISTRY.pop(name, None)


def registered_names() -> List[str]:
    return sorted(_REGISTRY)


def _import_reference(reference: str) -> Classifier:
    """'module:attr' 또는 'module.attr' 경로에서 분류 함수 import"""
    if ':' in reference:
        module_name, _, attr = reference.partition(':')
    elif '.' in reference:
        module_name, _, attr = reference.rpartition('.')
    else:
        raise ClassifierLookupError(f"등록되지 않은 분류 함수: {reference}")

    if not module_name or not attr or module_name.startswith('.'):
        raise ClassifierLookupError(f"잘못된 분류 함수 경로: {reference}")

    try:
        module = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError) as e:
        raise ClassifierLookupError(f"모듈을 불러올 수 없습니다: {module_name} ({e})") from e

    func = getattr(module, attr, None)
    if func is None or not callable(func):
        raise ClassifierLookupError(f"호출 가능한 분류 함수가 아닙니다: {reference}")
    return func


def get_classifier(reference: Union[str, Callable], allow_import: bool = True) -> Classifier:
    """
    이름, import 경로 또는 함수 자체로 분류 함수 반환

    Args:
        reference: 등록된 이름, 'module:function' 경로 또는 함수
        allow_import: False 면 등록된 이름만 허용
    """
    if callable(reference):
        return reference

    name = str(reference).strip()
    if name in _REGISTRY:
        return _REGISTRY[name]
    if not allow_import:
        raise ClassifierLookupError(f"등록되지 않은 분류 함수: {name}")
    return _import_reference(name)
