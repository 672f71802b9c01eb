# -*- coding: utf-8 -*-
"""헤더 인자 파싱 테스트"""

from orgcolor.table.header_args import convert_value, parse_header_args


class TestParseHeaderArgs:

    def test_single_key(self):
        assert parse_header_args(':color-min 3') == {'color-min': 3}

    def test_multiple_keys(self):
        result = parse_header_args(':color correlation :color-min-row 2 :color-min-col 4')
        assert result == {'color': 'correlation', 'color-min-row': 2, 'color-min-col': 4}

    def test_reference_with_colon_is_one_value(self):
        result = parse_header_args(':color mypkg.rules:classify :color-min 2')
        assert result['color'] == 'mypkg.rules:classify'
        assert result['color-min'] == 2

    def test_key_without_value(self):
        assert parse_header_args(':flag :color-min 3') == {'flag': None, 'color-min': 3}

    def test_later_key_wins(self):
        assert parse_header_args(':color-min 3 :color-min 4') == {'color-min': 4}

    def test_empty_text(self):
        assert parse_header_args('') == {}
        assert parse_header_args('no keys here') == {}

    def test_quoted_value(self):
        assert parse_header_args(':title "a b"') == {'title': 'a b'}


class TestConvertValue:

    def test_numbers(self):
        assert convert_value('3') == 3
        assert convert_value('-2') == -2
        assert convert_value('0.5') == 0.5

    def test_text(self):
        assert convert_value(' abc ') == 'abc'

    def test_blank(self):
        assert convert_value('  ') is None
