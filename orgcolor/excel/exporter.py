# -*- coding: utf-8 -*-
"""org 테이블 → Excel 변환 모듈"""

import re
import logging
from pathlib import Path
from typing import List, Optional, Union

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ..document import OrgDocument, StyleLayer
from ..table.models import OrgTable
from .styles import ExcelStyler


logger = logging.getLogger(__name__)

# 셀 전체가 숫자인 경우만 숫자로 기록
FULL_NUMBER = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$')
INT_TEXT = re.compile(r'^[-+]?\d+$')


class TableExcelExporter:
    """
    색상이 적용된 org 테이블을 Excel로 변환

    사용 예:
        exporter = TableExcelExporter()
        exporter.export(doc, "output.xlsx")            # 모든 테이블 (테이블별 시트)
        exporter.export(doc, "output.xlsx", [table])   # 지정한 테이블만
    """

    # 열 너비 (문자 수 기준)
    MIN_COL_WIDTH = 6
    MAX_COL_WIDTH = 50

    def __init__(self, bold_header: bool = True):
        self.bold_header = bold_header
        self.styler = ExcelStyler()

    def export(self, document: OrgDocument, output_path: Union[str, Path],
               tables: Optional[List[OrgTable]] = None) -> Path:
        """
        문서의 테이블을 Excel 파일로 저장

        Args:
            document: org 문서 (스타일 레이어 포함)
            output_path: 출력 Excel 경로
            tables: 변환할 테이블 (없으면 전체)

        Returns:
            생성된 Excel 파일 경로
        """
        output_path = Path(output_path)
        tables = document.tables if tables is None else tables

        wb = Workbook()
        wb.remove(wb.active)

        for table in tables:
            ws = wb.create_sheet(title=self._sheet_title(table))
            self.write_table(ws, table, document.layer)

        # 시트가 하나도 없으면 빈 시트 추가
        if not wb.worksheets:
            wb.create_sheet(title='Sheet')

        wb.save(output_path)
        logger.info(f"Excel 저장: {output_path} (테이블 {len(tables)}개)")
        return output_path

    def write_table(self, ws: Worksheet, table: OrgTable, layer: StyleLayer):
        """워크시트에 테이블 기록 + 스타일 적용"""
        styled = layer.styled_cells(table)
        widths = {}

        for cells in table.rows:
            for cell in cells:
                excel_cell = ws.cell(row=cell.row, column=cell.col)
                numeric = bool(FULL_NUMBER.match(cell.text))
                excel_cell.value = self._cell_value(cell.text, numeric)
                if not numeric:
                    # '=' 로 시작하는 텍스트도 수식이 아닌 문자열로 기록
                    excel_cell.data_type = 's'

                face = styled.get((cell.row, cell.col))
                bold = self.bold_header and cell.row == 1
                self.styler.apply_face(excel_cell, face, bold=bold)
                self.styler.apply_border(excel_cell)
                self.styler.apply_alignment(excel_cell, numeric)

                widths[cell.col] = max(widths.get(cell.col, 0), len(cell.text))

        for col, width in widths.items():
            width = min(max(width + 2, self.MIN_COL_WIDTH), self.MAX_COL_WIDTH)
            ws.column_dimensions[get_column_letter(col)].width = width

    @staticmethod
    def _cell_value(text: str, numeric: bool):
        """숫자 텍스트는 int / float, 그 외는 문자열"""
        if not numeric:
            return text
        if INT_TEXT.match(text):
            return int(text)
        return float(text)

    @staticmethod
    def _sheet_title(table: OrgTable) -> str:
        """시트 이름 (#+NAME: 이 있으면 사용, Excel 시트 이름 제한 31자)"""
        name = table.keywords.get('NAME', '').strip()
        if name:
            name = re.sub(r'[\\/*?:\[\]]', '_', name)[:31]
        return name or f"Table{table.index + 1}"


def export_to_excel(document: OrgDocument, output_path: Union[str, Path],
                    tables: Optional[List[OrgTable]] = None) -> Path:
    """org 테이블을 Excel로 변환 (편의 함수)"""
    exporter = TableExcelExporter()
    return exporter.export(document, output_path, tables)
