# -*- coding: utf-8 -*-
"""
명령줄 인터페이스

명령:
- color: 분류 함수와 시작 행/열을 직접 지정
- correlation: 상관계수 행렬 기본값
- auto: 테이블 위 주석(#+HEADER: :color ... :color-min ...) 사용

사용 예:
    python -m orgcolor correlation report.org
    python -m orgcolor color report.org --classifier mypkg.rules:classify --min-row 3
    python -m orgcolor auto report.org --line 12 --format xlsx -o report.xlsx
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

import yaml

from .config import setup_logging
from .config_loader import ColorConfig, load_config
from .document import OrgDocument
from .table.models import OrgTable
from .table.parser import TableNotFoundError
from .color.classifiers import ClassifierLookupError, classify_correlation, get_classifier
from .color.colorizer import color_table
from .color.resolver import color_table_from_annotations
from .excel.exporter import export_to_excel
from .render import render_ansi, render_html


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='orgcolor', description='org 테이블 셀 조건부 색상')
    subparsers = parser.add_subparsers(dest='command', required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('file', help='org 파일 경로')
    common.add_argument('--line', type=int, default=None,
                        help='대상 테이블이 있는 줄 번호 (없으면 모든 테이블)')
    common.add_argument('--format', choices=['ansi', 'html', 'xlsx'], default='ansi',
                        help='출력 형식 (기본 ansi)')
    common.add_argument('-o', '--output', default=None, help='출력 파일 경로')
    common.add_argument('--config', default=None, help='YAML 설정 파일 경로')
    common.add_argument('-v', '--verbose', action='store_true', help='디버그 로그 출력')

    color = subparsers.add_parser('color', parents=[common],
                                  help='분류 함수와 시작 행/열을 지정하여 색상 적용')
    color.add_argument('--classifier', required=True,
                       help='분류 함수 이름 또는 경로 (module:function)')
    color.add_argument('--min-row', type=int, default=None, help='시작 행 (기본 2)')
    color.add_argument('--min-col', type=int, default=None, help='시작 열 (기본 2)')

    subparsers.add_parser('correlation', parents=[common],
                          help='상관계수 행렬 기본값으로 색상 적용')
    subparsers.add_parser('auto', parents=[common],
                          help='테이블 위 주석 설정으로 색상 적용')

    return parser


def _select_tables(doc: OrgDocument, line: Optional[int]) -> List[OrgTable]:
    if line is None:
        return list(doc.tables)
    return [doc.table_at(line)]


def _apply(args: argparse.Namespace, doc: OrgDocument, tables: List[OrgTable],
           config: ColorConfig):
    """명령별 색상 적용"""
    if args.command == 'color':
        classifier = get_classifier(args.classifier)
        min_row = args.min_row if args.min_row is not None else config.min_row
        min_col = args.min_col if args.min_col is not None else config.min_col
        for table in tables:
            color_table(table, classifier, min_row=min_row, min_col=min_col, layer=doc.layer)

    elif args.command == 'correlation':
        for table in tables:
            color_table(table, classify_correlation, layer=doc.layer)

    elif args.command == 'auto':
        for table in tables:
            color_table_from_annotations(
                table,
                layer=doc.layer,
                keyword=config.annotation_keyword,
                default_classifier=config.default_classifier,
                default_min_row=config.min_row,
                default_min_col=config.min_col,
                allow_import=config.allow_import_references,
            )


def _write_output(args: argparse.Namespace, doc: OrgDocument, tables: List[OrgTable]):
    """결과 출력 (ansi/html 은 표준출력 또는 파일, xlsx 는 파일)"""
    if args.format == 'xlsx':
        output_path = Path(args.output) if args.output else Path(args.file).with_suffix('.xlsx')
        export_to_excel(doc, output_path, tables)
        print(f"저장 완료: {output_path}")
        return

    render = render_html if args.format == 'html' else render_ansi
    content = '\n\n'.join(render(doc, table) for table in tables)

    if args.output:
        Path(args.output).write_text(content + '\n', encoding='utf-8')
        print(f"저장 완료: {args.output}")
    else:
        print(content)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else None)

    try:
        config = load_config(args.config)
    except (yaml.YAMLError, ValueError, TypeError, OSError) as e:
        logger.error(f"설정 파일 오류: {e}")
        return 1

    try:
        doc = OrgDocument.from_file(args.file)
        tables = _select_tables(doc, args.line)
        if not tables:
            logger.warning(f"테이블이 없습니다: {args.file}")
            return 0

        _apply(args, doc, tables, config)
        logger.info(f"{len(doc.layer)}개 셀 색상 적용")
        _write_output(args, doc, tables)

    except (TableNotFoundError, ClassifierLookupError, OSError) as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        # 분류 함수 오류: 나머지 색상 적용 중단
        logger.error(f"색상 적용 중단: {type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
