# -*- coding: utf-8 -*-
"""
색상 적용 결과 출력 모듈

- render_ansi: 테이블 원문에 ANSI 색상 적용 (터미널 미리보기)
- render_html: <table> 로 변환, 스타일이 있는 셀은 inline style
"""

import html
from typing import List

from .core.color import ansi_face, to_css
from .document import OrgDocument
from .table.models import OrgTable


def render_ansi(document: OrgDocument, table: OrgTable) -> str:
    """테이블 원문 텍스트에 셀 스타일을 ANSI 코드로 적용"""
    text = document.text
    styled = document.layer.styled_cells(table)

    pieces: List[str] = []
    pos = table.begin
    for cells in table.rows:
        for cell in cells:
            face = styled.get((cell.row, cell.col))
            if not face or cell.start == cell.end:
                continue
            pieces.append(text[pos:cell.start])
            pieces.append(ansi_face(text[cell.start:cell.end], face))
            pos = cell.end
    pieces.append(text[pos:table.end])
    return ''.join(pieces)


def _face_style(face) -> str:
    styles = []
    fg = to_css(face.get('foreground'))
    if fg:
        styles.append(f"color: {fg}")
    bg = to_css(face.get('background'))
    if bg:
        styles.append(f"background-color: {bg}")
    return '; '.join(styles)


def render_html(document: OrgDocument, table: OrgTable) -> str:
    """테이블을 HTML로 변환 (1행은 th)"""
    styled = document.layer.styled_cells(table)

    lines = ['<table>']
    for cells in table.rows:
        lines.append('  <tr>')
        for cell in cells:
            tag = 'th' if cell.row == 1 else 'td'
            face = styled.get((cell.row, cell.col))
            style = _face_style(face) if face else ''
            attr = f' style="{html.escape(style)}"' if style else ''
            lines.append(f"    <{tag}{attr}>{html.escape(cell.text)}</{tag}>")
        lines.append('  </tr>')
    lines.append('</table>')
    return '\n'.join(lines)
