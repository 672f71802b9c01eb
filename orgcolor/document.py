# -*- coding: utf-8 -*-
"""
org 문서 및 스타일 레이어 모듈

개요:
- Overlay: 셀 텍스트 범위에 붙는 스타일
- StyleLayer: 셀별 스타일 보관 (같은 셀은 덮어쓰기)
- OrgDocument: 문서 텍스트 + 파싱된 테이블 + 스타일 레이어

문서 텍스트는 변경하지 않고, 스타일은 레이어에만 기록합니다.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .table.models import CellInfo, Face, OrgTable
from .table.parser import OrgTableParser, table_at


logger = logging.getLogger(__name__)

# (테이블 인덱스, 행, 열)
CellKey = Tuple[int, int, int]


@dataclass
class Overlay:
    """셀 텍스트 범위 [start, end) 에 적용된 스타일"""
    start: int
    end: int
    face: Face
    row: int = 0
    col: int = 0


class StyleLayer:
    """셀별 스타일 보관"""

    def __init__(self):
        self._overlays: Dict[CellKey, Overlay] = {}

    def __len__(self) -> int:
        return len(self._overlays)

    def apply(self, table: OrgTable, cell: CellInfo, face: Face) -> Overlay:
        """셀에 스타일 적용 (기존 스타일은 교체)"""
        overlay = Overlay(
            start=cell.start,
            end=cell.end,
            face=dict(face),
            row=cell.row,
            col=cell.col,
        )
        self._overlays[(table.index, cell.row, cell.col)] = overlay
        return overlay

    def get(self, table: OrgTable, row: int, col: int) -> Optional[Overlay]:
        return self._overlays.get((table.index, row, col))

    def clear(self, table: Optional[OrgTable] = None) -> int:
        """스타일 제거 (table 지정 시 해당 테이블만). 제거된 개수 반환"""
        if table is None:
            count = len(self._overlays)
            self._overlays.clear()
            return count

        keys = [key for key in self._overlays if key[0] == table.index]
        for key in keys:
            del self._overlays[key]
        return len(keys)

    def styled_cells(self, table: OrgTable) -> Dict[Tuple[int, int], Face]:
        """테이블의 {(row, col): face} 반환"""
        return {
            (row, col): overlay.face
            for (index, row, col), overlay in self._overlays.items()
            if index == table.index
        }

    def overlays(self) -> List[Overlay]:
        """문서 위치 순으로 정렬된 스타일 목록"""
        return sorted(self._overlays.values(), key=lambda o: (o.start, o.end))


class OrgDocument:
    """
    org 문서

    사용 예:
        doc = OrgDocument.from_file("report.org")
        table = doc.table_at(12)
        color_table(table, classify_correlation, layer=doc.layer)
    """

    def __init__(self, text: str, path: Optional[Path] = None):
        self._text = text
        self.path = path
        self.tables: List[OrgTable] = OrgTableParser().parse_tables(text)
        self.layer = StyleLayer()

    @classmethod
    def from_text(cls, text: str) -> 'OrgDocument':
        return cls(text)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'OrgDocument':
        """파일에서 문서 로드"""
        path = Path(path)
        text = path.read_text(encoding='utf-8')
        logger.debug(f"문서 로드: {path}")
        return cls(text, path=path)

    @property
    def text(self) -> str:
        return self._text

    def table_at(self, line: int) -> OrgTable:
        """줄 번호(1-based)의 테이블 반환"""
        return table_at(self.tables, line)

    def cell_text(self, cell: CellInfo) -> str:
        """셀 범위의 문서 텍스트"""
        return self._text[cell.start:cell.end]
