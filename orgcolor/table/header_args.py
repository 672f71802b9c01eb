# -*- coding: utf-8 -*-
"""
헤더 인자 파싱 모듈

':key value :key2 value2' 형식의 주석 텍스트를 딕셔너리로 변환합니다.

예시:
    parse_header_args(':color my_classifier :color-min 3')
    # {'color': 'my_classifier', 'color-min': 3}
"""

import re
from typing import Any, Dict, Union


# 공백 또는 줄 시작 뒤의 :key 토큰
KEY_PATTERN = re.compile(r'(?:^|(?<=\s)):([^\s:][^\s]*)')

INT_PATTERN = re.compile(r'^[-+]?\d+$')
FLOAT_PATTERN = re.compile(r'^[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?$')


def convert_value(raw: str) -> Union[str, int, float, None]:
    """값 문자열을 int / float / str 로 변환 (빈 값은 None)"""
    value = raw.strip()
    if not value:
        return None

    # 따옴표 제거
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]

    if INT_PATTERN.match(value):
        return int(value)
    if FLOAT_PATTERN.match(value):
        return float(value)
    return value


def parse_header_args(text: str) -> Dict[str, Any]:
    """헤더 인자 텍스트 파싱 (같은 키는 뒤의 값이 우선)"""
    result: Dict[str, Any] = {}
    if not text:
        return result

    matches = list(KEY_PATTERN.finditer(text))
    for i, match in enumerate(matches):
        value_end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        raw_value = text[match.end():value_end]
        result[match.group(1)] = convert_value(raw_value)

    return result
