# -*- coding: utf-8 -*-
"""
테이블 셀 조건부 색상 모듈

사용 예:
    # 상관계수 기본값
    from orgcolor.color import color_table, classify_correlation
    layer = color_table(table, classify_correlation)

    # 사용자 분류 함수 + 시작 행/열 지정
    color_table(table, lambda text: {'background': 'yellow'} if text == 'x' else None,
                min_row=3, min_col=2, layer=doc.layer)

    # 테이블 위 주석(#+HEADER: :color-min 3) 사용
    from orgcolor.color import color_table_from_annotations
    color_table_from_annotations(table, layer=doc.layer)
"""

from .classifiers import (
    ClassifierLookupError,
    ThresholdBand,
    ThresholdClassifier,
    classify_correlation,
    get_classifier,
    parse_number,
    register_classifier,
    registered_names,
    unregister_classifier,
)

from .colorizer import (
    TableColorizer,
    color_table,
    color_correlation_table,
)

from .resolver import (
    ColorSettings,
    resolve_annotations,
    read_annotations,
    color_table_from_annotations,
)

__all__ = [
    # 분류 함수
    'ClassifierLookupError',
    'ThresholdBand',
    'ThresholdClassifier',
    'classify_correlation',
    'get_classifier',
    'parse_number',
    'register_classifier',
    'registered_names',
    'unregister_classifier',

    # 색상 적용
    'TableColorizer',
    'color_table',
    'color_correlation_table',

    # 주석 설정
    'ColorSettings',
    'resolve_annotations',
    'read_annotations',
    'color_table_from_annotations',
]
