# -*- coding: utf-8 -*-
"""
orgcolor 패키지

org 형식 텍스트 테이블 셀 조건부 색상 도구

모듈:
- table: org 테이블 파싱 (셀 위치, 주석 키워드, 헤더 인자)
- color: 분류 함수, 색상 적용, 주석 설정 해석
- excel: 색상 적용 결과 → Excel 변환
- core: 공통 유틸리티 (색상 이름 변환 등)
"""

from .config import (
    PROJECT_ROOT,
    DEFAULT_MIN_ROW,
    DEFAULT_MIN_COL,
    ANNOTATION_KEYWORD,
    setup_logging,
)
from .document import OrgDocument, StyleLayer, Overlay
from .color import (
    classify_correlation,
    color_table,
    color_correlation_table,
    color_table_from_annotations,
    resolve_annotations,
    register_classifier,
    get_classifier,
)

__version__ = '0.1.0'

__all__ = [
    'PROJECT_ROOT',
    'DEFAULT_MIN_ROW',
    'DEFAULT_MIN_COL',
    'ANNOTATION_KEYWORD',
    'setup_logging',
    'OrgDocument',
    'StyleLayer',
    'Overlay',
    'classify_correlation',
    'color_table',
    'color_correlation_table',
    'color_table_from_annotations',
    'resolve_annotations',
    'register_classifier',
    'get_classifier',
]
