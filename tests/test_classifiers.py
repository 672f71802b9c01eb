# -*- coding: utf-8 -*-
"""분류 함수 테스트"""

import pytest

from orgcolor.color.classifiers import (
    ClassifierLookupError,
    ThresholdBand,
    ThresholdClassifier,
    classify_correlation,
    get_classifier,
    parse_number,
    register_classifier,
    registered_names,
    unregister_classifier,
)


STRONG_POSITIVE = {'foreground': 'black', 'background': 'green'}
MODERATE_POSITIVE = {'foreground': 'black', 'background': '#90EE90'}
STRONG_NEGATIVE = {'foreground': 'black', 'background': 'red'}
MODERATE_NEGATIVE = {'foreground': 'black', 'background': 'orange'}


class TestParseNumber:

    def test_plain_numbers(self):
        assert parse_number('0.42') == 0.42
        assert parse_number('-1') == -1.0
        assert parse_number('.5') == 0.5
        assert parse_number('1e-3') == 0.001

    def test_numeric_prefix(self):
        assert parse_number('0.7*') == 0.7
        assert parse_number('  -0.3 (p<0.01)') == -0.3

    def test_not_a_number(self):
        assert parse_number('abc') is None
        assert parse_number('') is None
        assert parse_number(None) is None
        assert parse_number('-') is None


class TestClassifyCorrelation:

    @pytest.mark.parametrize('text', ['0.5', '10', '0.9'])
    def test_strong_positive(self, text):
        assert classify_correlation(text) == STRONG_POSITIVE

    @pytest.mark.parametrize('text', ['0.3', '0.49'])
    def test_moderate_positive(self, text):
        assert classify_correlation(text) == MODERATE_POSITIVE

    @pytest.mark.parametrize('text', ['-0.5', '-10'])
    def test_strong_negative(self, text):
        assert classify_correlation(text) == STRONG_NEGATIVE

    @pytest.mark.parametrize('text', ['-0.3', '-0.49'])
    def test_moderate_negative(self, text):
        assert classify_correlation(text) == MODERATE_NEGATIVE

    @pytest.mark.parametrize('text', ['0', '0.29', '-0.29'])
    def test_weak_is_unstyled(self, text):
        assert classify_correlation(text) is None

    @pytest.mark.parametrize('text', ['', 'abc', 'name', 'n/a', '-'])
    def test_unparsable_is_unstyled(self, text):
        assert classify_correlation(text) is None

    def test_returns_fresh_face(self):
        face = classify_correlation('0.9')
        face['background'] = 'blue'
        assert classify_correlation('0.9') == STRONG_POSITIVE


class TestThresholdClassifier:

    def test_first_band_wins(self):
        classify = ThresholdClassifier([
            ThresholdBand(face={'background': 'green'}, high=0.01),
            ThresholdBand(face={'background': 'yellow'}, high=0.05),
        ])
        assert classify('0.001') == {'background': 'green'}
        assert classify('0.03') == {'background': 'yellow'}
        assert classify('0.05') is None
        assert classify('text') is None

    def test_inclusive_flags(self):
        band = ThresholdBand(face={}, low=1.0, high=2.0, low_inclusive=False, high_inclusive=True)
        assert not band.matches(1.0)
        assert band.matches(1.5)
        assert band.matches(2.0)
        assert not band.matches(2.1)


class TestRegistry:

    def test_builtin_name(self):
        assert get_classifier('correlation') is classify_correlation
        assert 'correlation' in registered_names()

    def test_callable_passes_through(self):
        func = lambda text: None  # noqa: E731
        assert get_classifier(func) is func

    def test_register_and_lookup(self):
        def classify_x(text):
            return {'background': 'yellow'} if text == 'x' else None

        register_classifier('mark-x', classify_x)
        try:
            assert get_classifier('mark-x') is classify_x
        finally:
            unregister_classifier('mark-x')
        with pytest.raises(ClassifierLookupError):
            get_classifier('mark-x')

    def test_register_rejects_non_callable(self):
        with pytest.raises(TypeError):
            register_classifier('bad', 'not callable')

    def test_import_reference(self):
        assert get_classifier('orgcolor.color.classifiers:classify_correlation') is classify_correlation
        assert get_classifier('orgcolor.color.classifiers.classify_correlation') is classify_correlation

    def test_unknown_reference(self):
        with pytest.raises(ClassifierLookupError):
            get_classifier('no_such_module_xyz:classify')
        with pytest.raises(ClassifierLookupError):
            get_classifier('orgcolor.color.classifiers:no_such_function')
        with pytest.raises(ClassifierLookupError):
            get_classifier('unknown')

    @pytest.mark.parametrize('reference', ['.foo', '..x', ':classify', 'orgcolor:', '.orgcolor:classify_correlation'])
    def test_malformed_reference(self, reference):
        with pytest.raises(ClassifierLookupError):
            get_classifier(reference)

    def test_registered_names_only(self):
        assert get_classifier('correlation', allow_import=False) is classify_correlation
        with pytest.raises(ClassifierLookupError):
            get_classifier('orgcolor.color.classifiers:classify_correlation', allow_import=False)
        with pytest.raises(ClassifierLookupError):
            get_classifier('os:system', allow_import=False)
