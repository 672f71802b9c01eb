# -*- coding: utf-8 -*-
"""
테이블 셀 색상 적용 모듈

분류 함수 결과(face)를 셀 텍스트 범위에 스타일로 붙입니다.

범위:
- 열: min_col ~ 첫 행의 열 수
- 행: min_row ~ 데이터 행 수
- min_row / min_col 기본값 2 (1행/1열은 헤더)

분류 함수에서 발생한 예외는 그대로 전달되며, 이미 적용된 스타일은 유지됩니다.
"""

import logging
from typing import Optional

from ..config import DEFAULT_MIN_COL, DEFAULT_MIN_ROW
from ..document import StyleLayer
from ..table.models import Classifier, OrgTable
from .classifiers import classify_correlation


logger = logging.getLogger(__name__)


class TableColorizer:
    """분류 함수 기반 셀 색상 적용"""

    def __init__(self, classify: Classifier,
                 min_row: Optional[int] = None, min_col: Optional[int] = None):
        """
        Args:
            classify: 셀 텍스트 -> face 또는 None
            min_row: 색상을 적용할 첫 행 (1-based, 기본 2)
            min_col: 색상을 적용할 첫 열 (1-based, 기본 2)
        """
        self.classify = classify
        self.min_row = DEFAULT_MIN_ROW if min_row is None else min_row
        self.min_col = DEFAULT_MIN_COL if min_col is None else min_col

    def colorize(self, table: OrgTable, layer: Optional[StyleLayer] = None) -> StyleLayer:
        """테이블에 색상 적용 후 스타일 레이어 반환"""
        if layer is None:
            layer = StyleLayer()

        rows = table.row_count
        cols = table.col_count

        styled = 0
        for x in range(self.min_col, cols + 1):
            for y in range(self.min_row, rows + 1):
                cell = table.get_cell(y, x)
                if cell is None:
                    continue

                face = self.classify(cell.text)
                if not face:
                    continue

                layer.apply(table, cell, face)
                styled += 1

        logger.debug(
            f"테이블 {table.index}: {rows}행 x {cols}열, "
            f"시작 ({self.min_row}, {self.min_col}), {styled}개 셀 색상 적용"
        )
        return layer


def color_table(table: OrgTable, classify: Classifier,
                min_row: Optional[int] = None, min_col: Optional[int] = None,
                layer: Optional[StyleLayer] = None) -> StyleLayer:
    """테이블 셀 색상 적용 (편의 함수)"""
    colorizer = TableColorizer(classify, min_row=min_row, min_col=min_col)
    return colorizer.colorize(table, layer)


def color_correlation_table(table: OrgTable,
                            layer: Optional[StyleLayer] = None) -> StyleLayer:
    """상관계수 행렬 기본값으로 색상 적용"""
    return color_table(table, classify_correlation, layer=layer)
