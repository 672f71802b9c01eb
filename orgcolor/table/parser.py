# -*- coding: utf-8 -*-
"""
org 테이블 파싱 모듈

개요:
- OrgTableParser: 텍스트에서 '|' 로 시작하는 테이블 블록 파싱
- table_at: 줄 번호로 테이블 찾기
"""

import re
import logging
from typing import List, Optional, Tuple

from .models import CellInfo, OrgTable


logger = logging.getLogger(__name__)

# #+KEY: value 형식의 주석 줄
KEYWORD_PATTERN = re.compile(r'^\s*#\+([A-Za-z][\w-]*):\s?(.*)$')


class TableNotFoundError(LookupError):
    """요청한 위치에 테이블이 없음"""


class OrgTableParser:
    """org 테이블 파싱"""

    def parse_tables(self, text: str) -> List[OrgTable]:
        """텍스트에서 모든 테이블 파싱"""
        tables = []
        lines = self._split_lines(text)

        i = 0
        while i < len(lines):
            if not self._is_table_line(lines[i][1]):
                i += 1
                continue

            # 연속된 테이블 줄 수집
            start = i
            while i < len(lines) and self._is_table_line(lines[i][1]):
                i += 1

            table = self._parse_table(lines, start, i, len(tables))
            tables.append(table)

        logger.debug(f"테이블 {len(tables)}개 파싱")
        return tables

    def _split_lines(self, text: str) -> List[Tuple[int, str]]:
        """(줄 시작 위치, 줄 내용) 목록 반환 (개행 제외)"""
        result = []
        offset = 0
        for raw in text.splitlines(keepends=True):
            content = raw.rstrip('\r\n')
            result.append((offset, content))
            offset += len(raw)
        return result

    @staticmethod
    def _is_table_line(line: str) -> bool:
        return line.lstrip().startswith('|')

    @staticmethod
    def _is_rule_line(line: str) -> bool:
        return line.lstrip().startswith('|-')

    def _parse_table(self, lines: List[Tuple[int, str]], start: int, stop: int,
                     index: int) -> OrgTable:
        """테이블 블록 파싱 (start 이상 stop 미만 줄)"""
        last_offset, last_line = lines[stop - 1]
        table = OrgTable(
            index=index,
            begin_line=start + 1,
            end_line=stop,
            begin=lines[start][0],
            end=last_offset + len(last_line),
        )

        for line_idx in range(start, stop):
            offset, content = lines[line_idx]
            if self._is_rule_line(content):
                table.rule_lines.append(line_idx + 1)
                continue
            row = len(table.rows) + 1
            table.rows.append(self._parse_row(content, offset, row, line_idx + 1))

        table.keywords = self._collect_keywords(lines, start)
        return table

    def _parse_row(self, content: str, offset: int, row: int, line_no: int) -> List[CellInfo]:
        """데이터 줄을 셀 목록으로 파싱"""
        cells = []
        pipe = content.index('|')
        body = content[pipe + 1:]
        segments = body.split('|')

        # '| a | b |' 형식이면 마지막 빈 조각 제거
        if content.rstrip().endswith('|'):
            segments = segments[:-1]

        pos = offset + pipe + 1
        for col, segment in enumerate(segments, start=1):
            stripped = segment.strip()
            if stripped:
                lead = len(segment) - len(segment.lstrip())
                cell_start = pos + lead
                cell_end = cell_start + len(stripped)
            else:
                cell_start = cell_end = pos + min(1, len(segment))
            cells.append(CellInfo(
                row=row, col=col, text=stripped,
                start=cell_start, end=cell_end, line=line_no,
            ))
            pos += len(segment) + 1

        return cells

    def _collect_keywords(self, lines: List[Tuple[int, str]], start: int) -> dict:
        """테이블 바로 위 #+KEY: value 줄 수집 (같은 키는 공백으로 이어붙임)"""
        found = []
        i = start - 1
        while i >= 0:
            match = KEYWORD_PATTERN.match(lines[i][1])
            if not match:
                break
            found.append((match.group(1).upper(), match.group(2).strip()))
            i -= 1

        keywords = {}
        for key, value in reversed(found):
            if key not in keywords:
                keywords[key] = value
            elif value:
                keywords[key] = f"{keywords[key]} {value}".strip()
        return keywords


def parse_tables(text: str) -> List[OrgTable]:
    """텍스트에서 테이블 파싱 (편의 함수)"""
    return OrgTableParser().parse_tables(text)


def table_at(tables: List[OrgTable], line: int) -> OrgTable:
    """줄 번호(1-based)를 포함하는 테이블 반환"""
    found: Optional[OrgTable] = None
    for table in tables:
        if table.contains_line(line):
            found = table
            break

    if found is None:
        raise TableNotFoundError(f"{line}번째 줄에 테이블이 없습니다")
    return found
