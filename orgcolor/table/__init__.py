# -*- coding: utf-8 -*-
"""
org 테이블 모듈

사용 예:
    from orgcolor.table import OrgTableParser, table_at

    tables = OrgTableParser().parse_tables(text)
    table = table_at(tables, line=12)
    table.get_text(2, 3)
"""

from .models import CellInfo, OrgTable, Face, Classifier
from .parser import OrgTableParser, TableNotFoundError, parse_tables, table_at
from .header_args import parse_header_args, convert_value

__all__ = [
    # 모델
    'CellInfo',
    'OrgTable',
    'Face',
    'Classifier',

    # 파싱
    'OrgTableParser',
    'TableNotFoundError',
    'parse_tables',
    'table_at',

    # 헤더 인자
    'parse_header_args',
    'convert_value',
]
