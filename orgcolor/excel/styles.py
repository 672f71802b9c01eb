# -*- coding: utf-8 -*-
"""Excel 셀 스타일 적용 모듈"""

from typing import Optional

from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from ..core.color import to_rgb
from ..table.models import Face


class ExcelStyler:
    """Excel 셀 스타일 적용 클래스"""

    THIN_SIDE = Side(style='thin', color='000000')

    def face_to_fill(self, face: Optional[Face]) -> Optional[PatternFill]:
        """face background -> PatternFill"""
        if not face:
            return None
        bg_color = to_rgb(face.get('background'))
        if not bg_color:
            return None
        return PatternFill(start_color=bg_color, end_color=bg_color, fill_type='solid')

    def face_to_font(self, face: Optional[Face], bold: bool = False) -> Font:
        """face foreground -> Font"""
        font_color = to_rgb(face.get('foreground')) if face else None
        return Font(bold=bold, color=font_color if font_color else None)

    def apply_border(self, excel_cell: Cell):
        """얇은 테두리 적용"""
        excel_cell.border = Border(
            left=self.THIN_SIDE,
            right=self.THIN_SIDE,
            top=self.THIN_SIDE,
            bottom=self.THIN_SIDE,
        )

    def apply_face(self, excel_cell: Cell, face: Optional[Face], bold: bool = False):
        """셀에 face 적용 (배경, 글자색)"""
        fill = self.face_to_fill(face)
        if fill is not None:
            excel_cell.fill = fill
        excel_cell.font = self.face_to_font(face, bold=bold)

    def apply_alignment(self, excel_cell: Cell, numeric: bool):
        """숫자는 오른쪽, 텍스트는 왼쪽 정렬"""
        excel_cell.alignment = Alignment(
            horizontal='right' if numeric else 'left',
            vertical='center',
        )
