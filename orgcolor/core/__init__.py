# -*- coding: utf-8 -*-
"""
core 모듈 - 공통 유틸리티

색상 이름 변환 등 프로젝트 전체에서 사용되는 공통 코드
"""

from .color import (
    NAMED_COLORS,
    to_rgb,
    to_css,
    to_rgb_tuple,
    ansi_face,
)

__all__ = [
    'NAMED_COLORS',
    'to_rgb',
    'to_css',
    'to_rgb_tuple',
    'ansi_face',
]
