# -*- coding: utf-8 -*-
"""
Excel 변환 모듈

사용 예:
    from orgcolor.excel import export_to_excel
    export_to_excel(doc, "output.xlsx")
"""

from .styles import ExcelStyler
from .exporter import TableExcelExporter, export_to_excel

__all__ = [
    'ExcelStyler',
    'TableExcelExporter',
    'export_to_excel',
]
