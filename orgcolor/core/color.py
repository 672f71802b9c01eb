# -*- coding: utf-8 -*-
"""
색상 이름 변환 유틸리티

face의 foreground/background 값은 색상 이름(X11) 또는 #RRGGBB 형식입니다.
- to_rgb: 'RRGGBB' (대문자, # 없음) 로 변환 - openpyxl 용
- to_css: '#RRGGBB' 로 변환 - HTML 용
- ansi_face: 터미널 출력용 24bit ANSI 색상 적용
"""

import re
from typing import Dict, Optional, Tuple


# 자주 쓰는 X11 색상 이름
NAMED_COLORS = {
    'black': '000000',
    'white': 'FFFFFF',
    'red': 'FF0000',
    'green': '00FF00',
    'blue': '0000FF',
    'yellow': 'FFFF00',
    'orange': 'FFA500',
    'cyan': '00FFFF',
    'magenta': 'FF00FF',
    'gray': 'BEBEBE',
    'grey': 'BEBEBE',
    'purple': 'A020F0',
    'pink': 'FFC0CB',
    'brown': 'A52A2A',
    'gold': 'FFD700',
    'light-green': '90EE90',
    'lightgreen': '90EE90',
    'dark-green': '006400',
    'darkgreen': '006400',
    'light-blue': 'ADD8E6',
    'lightblue': 'ADD8E6',
    'light-gray': 'D3D3D3',
    'lightgray': 'D3D3D3',
    'light-yellow': 'FFFFE0',
    'lightyellow': 'FFFFE0',
    'dark-orange': 'FF8C00',
    'darkorange': 'FF8C00',
    'dark-red': '8B0000',
    'darkred': '8B0000',
    'salmon': 'FA8072',
    'tomato': 'FF6347',
    'navy': '000080',
    'lavender': 'E6E6FA',
}

_HEX_PATTERN = re.compile(r'^#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$')

ANSI_RESET = '\033[0m'


def to_rgb(color: Optional[str]) -> Optional[str]:
    """색상 문자열을 RGB hex로 변환 (알 수 없으면 None)"""
    if not color:
        return None

    value = color.strip()
    named = NAMED_COLORS.get(value.lower().replace(' ', '-'))
    if named:
        return named

    # #RRGGBB 또는 #RGB 형식
    match = _HEX_PATTERN.match(value)
    if match:
        digits = match.group(1).upper()
        if len(digits) == 3:
            digits = ''.join(ch * 2 for ch in digits)
        return digits

    return None


def to_css(color: Optional[str]) -> Optional[str]:
    """색상 문자열을 CSS 색상(#RRGGBB)으로 변환"""
    rgb = to_rgb(color)
    return f"#{rgb}" if rgb else None


def to_rgb_tuple(color: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """색상 문자열을 (r, g, b) 튜플로 변환"""
    rgb = to_rgb(color)
    if not rgb:
        return None
    return int(rgb[0:2], 16), int(rgb[2:4], 16), int(rgb[4:6], 16)


def ansi_face(text: str, face: Optional[Dict[str, str]]) -> str:
    """face를 24bit ANSI 이스케이프 코드로 적용"""
    if not face:
        return text

    codes = []
    fg = to_rgb_tuple(face.get('foreground'))
    if fg:
        codes.append(f"38;2;{fg[0]};{fg[1]};{fg[2]}")
    bg = to_rgb_tuple(face.get('background'))
    if bg:
        codes.append(f"48;2;{bg[0]};{bg[1]};{bg[2]}")

    if not codes:
        return text
    return f"\033[{';'.join(codes)}m{text}{ANSI_RESET}"
