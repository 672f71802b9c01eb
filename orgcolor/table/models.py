# -*- coding: utf-8 -*-
"""
org 테이블 관련 데이터 모델

개요:
- CellInfo: 테이블 셀 정보 (1-based 좌표 + 문서 내 문자 위치)
- OrgTable: 테이블 정보 (데이터 행, 구분선, 주석 키워드)
- Face: 셀 스타일 (foreground / background)
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


# 셀 스타일: {'foreground': 'black', 'background': 'green'}
Face = Dict[str, str]

# 분류 함수: 셀 텍스트 -> Face 또는 None
Classifier = Callable[[str], Optional[Face]]


@dataclass
class CellInfo:
    """테이블 셀 정보"""
    row: int = 1
    col: int = 1

    # 내용 (앞뒤 공백 제거)
    text: str = ""

    # 문서 내 텍스트 위치 [start, end)
    start: int = 0
    end: int = 0

    # 셀이 속한 줄 번호 (1-based)
    line: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass
class OrgTable:
    """테이블 정보"""
    index: int = 0

    # 테이블 줄 범위 (1-based, 포함)
    begin_line: int = 0
    end_line: int = 0

    # 문서 내 문자 범위 [begin, end)
    begin: int = 0
    end: int = 0

    # 데이터 행 (구분선 제외)
    rows: List[List[CellInfo]] = field(default_factory=list)

    # 구분선 줄 번호
    rule_lines: List[int] = field(default_factory=list)

    # 테이블 바로 위 #+KEY: value 줄 (KEY는 대문자)
    keywords: Dict[str, str] = field(default_factory=dict)

    @property
    def row_count(self) -> int:
        """데이터 행 수"""
        return len(self.rows)

    @property
    def col_count(self) -> int:
        """첫 번째 행의 열 수"""
        if not self.rows:
            return 0
        return len(self.rows[0])

    def get_cell(self, row: int, col: int) -> Optional[CellInfo]:
        """1-based (row, col) 셀 반환 (없으면 None)"""
        if row < 1 or col < 1 or row > len(self.rows):
            return None
        cells = self.rows[row - 1]
        if col > len(cells):
            return None
        return cells[col - 1]

    def get_text(self, row: int, col: int) -> Optional[str]:
        """1-based (row, col) 셀 텍스트 반환"""
        cell = self.get_cell(row, col)
        return cell.text if cell is not None else None

    def contains_line(self, line: int) -> bool:
        """줄 번호가 테이블 범위 안에 있는지 확인"""
        return self.begin_line <= line <= self.end_line

    def to_lists(self) -> List[List[str]]:
        """셀 텍스트를 2차원 리스트로 반환"""
        return [[cell.text for cell in cells] for cells in self.rows]
