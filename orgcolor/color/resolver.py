# -*- coding: utf-8 -*-
"""
테이블 주석 기반 색상 설정 모듈

테이블 바로 위 주석 줄에서 분류 함수와 시작 행/열을 읽습니다.

    #+HEADER: :color correlation :color-min 3
    | name | a    | b    |
    | a    | 1    | 0.42 |

키:
- color: 분류 함수 이름 (없으면 상관계수 분류)
  import 경로 (module:function) 는 allow_import 를 켠 경우에만 사용
- color-min: 행/열 공통 시작값
- color-min-row: 시작 행 (없으면 color-min)
- color-min-col: 시작 열 (없으면 color-min)

알 수 없는 키는 무시하고, 잘못된 값은 기본값을 사용합니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .. import config
from ..document import StyleLayer
from ..table.header_args import parse_header_args
from ..table.models import Classifier, OrgTable
from .classifiers import ClassifierLookupError, get_classifier
from .colorizer import color_table


logger = logging.getLogger(__name__)


@dataclass
class ColorSettings:
    """주석에서 결정된 색상 설정 (None 이면 색상 적용 기본값 사용)"""
    classifier: Classifier
    min_row: Optional[int] = None
    min_col: Optional[int] = None


def _to_int(key: str, value: Any) -> Optional[int]:
    """주석 값을 정수로 변환 (잘못된 값은 None)"""
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning(f"{key} 값이 올바르지 않아 무시합니다: {value!r}")
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        logger.warning(f"{key} 값이 올바르지 않아 무시합니다: {value!r}")
        return None


def _resolve_classifier(value: Any, default: Union[str, Classifier],
                        allow_import: bool = False) -> Classifier:
    """color 값으로 분류 함수 결정 (찾지 못하면 기본값, import 경로는 allow_import 일 때만)"""
    if value is None or value == '':
        return get_classifier(default)

    try:
        return get_classifier(str(value), allow_import=allow_import)
    except ClassifierLookupError as e:
        logger.warning(f"분류 함수를 찾을 수 없어 기본값을 사용합니다: {e}")
        return get_classifier(default)


def resolve_annotations(annotations: Dict[str, Any],
                        default_classifier: Union[str, Classifier] = config.DEFAULT_CLASSIFIER,
                        allow_import: bool = False) -> ColorSettings:
    """주석 딕셔너리에서 분류 함수와 시작 행/열 결정"""
    classifier = _resolve_classifier(annotations.get(config.KEY_COLOR), default_classifier,
                                     allow_import=allow_import)

    shared = _to_int(config.KEY_COLOR_MIN, annotations.get(config.KEY_COLOR_MIN))

    min_row = _to_int(config.KEY_COLOR_MIN_ROW, annotations.get(config.KEY_COLOR_MIN_ROW))
    if min_row is None:
        min_row = shared

    min_col = _to_int(config.KEY_COLOR_MIN_COL, annotations.get(config.KEY_COLOR_MIN_COL))
    if min_col is None:
        min_col = shared

    return ColorSettings(classifier=classifier, min_row=min_row, min_col=min_col)


def read_annotations(table: OrgTable, keyword: str = config.ANNOTATION_KEYWORD) -> Dict[str, Any]:
    """테이블 위 주석 줄을 파싱"""
    text = table.keywords.get(keyword.upper(), '')
    return parse_header_args(text)


def color_table_from_annotations(table: OrgTable,
                                 layer: Optional[StyleLayer] = None,
                                 keyword: str = config.ANNOTATION_KEYWORD,
                                 default_classifier: Union[str, Classifier] = config.DEFAULT_CLASSIFIER,
                                 default_min_row: Optional[int] = None,
                                 default_min_col: Optional[int] = None,
                                 allow_import: bool = False) -> StyleLayer:
    """
    주석 설정으로 테이블 색상 적용

    Args:
        table: 대상 테이블
        layer: 스타일 레이어 (없으면 새로 생성)
        keyword: 주석 키워드 (기본 HEADER)
        default_classifier: color 키가 없을 때 분류 함수
        default_min_row: 주석에 시작 행이 없을 때 값 (None 이면 2)
        default_min_col: 주석에 시작 열이 없을 때 값 (None 이면 2)
        allow_import: color 값의 'module:function' import 허용 여부 (기본은 등록된 이름만)

    Returns:
        스타일 레이어
    """
    annotations = read_annotations(table, keyword)
    settings = resolve_annotations(annotations, default_classifier, allow_import=allow_import)

    min_row = settings.min_row if settings.min_row is not None else default_min_row
    min_col = settings.min_col if settings.min_col is not None else default_min_col

    logger.debug(f"테이블 {table.index} 주석: {annotations}")
    return color_table(table, settings.classifier, min_row=min_row, min_col=min_col, layer=layer)
