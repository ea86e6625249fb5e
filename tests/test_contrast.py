"""Tests for contrast_checker.core.contrast — ratios, compliance tiers, evaluate()."""

import itertools

import numpy as np
import pytest
from contrast_checker.core.contrast import (
    compliance,
    compliance_large,
    compliance_normal,
    contrast_matrix,
    contrast_ratio,
    evaluate,
)
from contrast_checker.core.palette import NAMED_COLORS
from contrast_checker.core.types import ComplianceLevel, Err, InvalidColor, Ok, TextSize

SAMPLE = list(NAMED_COLORS.values()) + ['#777777', '#767676', '#7b9e8b', '#fafaf5', '#1a1714']


class TestContrastRatio:
    def test_white_on_black(self):
        assert contrast_ratio('#ffffff', '#000000') == pytest.approx(21.0, abs=1e-9)

    def test_same_colour(self):
        assert contrast_ratio('#ffffff', '#ffffff') == pytest.approx(1.0, abs=1e-9)
        assert contrast_ratio('#808080', '#808080') == pytest.approx(1.0, abs=1e-9)

    def test_red_on_white(self):
        assert contrast_ratio('#ff0000', '#ffffff') == pytest.approx(3.998, abs=1e-3)

    def test_grey_boundary_pair(self):
        # #767676 is the lightest grey passing AA on white
        assert contrast_ratio('#767676', '#ffffff') >= 4.5
        assert contrast_ratio('#777777', '#ffffff') < 4.5

    def test_symmetric(self):
        for a, b in itertools.combinations(SAMPLE, 2):
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_range(self):
        for a, b in itertools.product(SAMPLE, repeat=2):
            ratio = contrast_ratio(a, b)
            assert 1.0 - 1e-9 <= ratio <= 21.0 + 1e-9


class TestComplianceNormal:
    def test_aaa_tie(self):
        assert compliance_normal(7.0) is ComplianceLevel.AAA

    def test_aa_tie(self):
        assert compliance_normal(4.5) is ComplianceLevel.AA

    def test_just_below_aa(self):
        assert compliance_normal(4.49) is ComplianceLevel.FAIL

    def test_just_below_aaa(self):
        assert compliance_normal(6.99) is ComplianceLevel.AA

    def test_extremes(self):
        assert compliance_normal(21.0) is ComplianceLevel.AAA
        assert compliance_normal(1.0) is ComplianceLevel.FAIL


class TestComplianceLarge:
    def test_aaa_tie(self):
        assert compliance_large(4.5) is ComplianceLevel.AAA

    def test_aa_tie(self):
        assert compliance_large(3.0) is ComplianceLevel.AA

    def test_just_below_aa(self):
        assert compliance_large(2.99) is ComplianceLevel.FAIL

    def test_dispatch(self):
        assert compliance(4.5, TextSize.NORMAL) is ComplianceLevel.AA
        assert compliance(4.5, TextSize.LARGE) is ComplianceLevel.AAA


class TestComplianceLevel:
    def test_meets(self):
        assert ComplianceLevel.AAA.meets(ComplianceLevel.AA)
        assert ComplianceLevel.AA.meets(ComplianceLevel.AA)
        assert not ComplianceLevel.FAIL.meets(ComplianceLevel.AA)
        assert not ComplianceLevel.AA.meets(ComplianceLevel.AAA)

    def test_values(self):
        assert [level.value for level in ComplianceLevel] == ['AAA', 'AA', 'Fail']


class TestEvaluate:
    def test_red_on_white(self):
        result = evaluate('red', 'white')
        assert isinstance(result, Ok)
        ev = result.value
        assert ev.fg_normalized == '#ff0000'
        assert ev.bg_normalized == '#ffffff'
        assert ev.ratio == pytest.approx(3.998, abs=1e-3)
        assert ev.level_normal is ComplianceLevel.FAIL
        assert ev.level_large is ComplianceLevel.AA

    def test_raw_tokens_normalised(self):
        ev = evaluate('  #FFFFFF ', '000000').unwrap()
        assert ev.fg_normalized == '#ffffff'
        assert ev.bg_normalized == '#000000'
        assert ev.ratio == pytest.approx(21.0, abs=1e-9)
        assert ev.level_normal is ComplianceLevel.AAA
        assert ev.level_large is ComplianceLevel.AAA

    def test_invalid_foreground(self):
        result = evaluate('notacolor', '#000000')
        assert isinstance(result, Err)
        assert result.error.token == 'notacolor'

    def test_invalid_background(self):
        result = evaluate('#000000', '#ggg123')
        assert isinstance(result, Err)
        assert result.error.token == '#ggg123'

    def test_both_invalid_reports_foreground(self):
        result = evaluate('bad1', 'bad2')
        assert isinstance(result, Err)
        assert result.error.token == 'bad1'

    def test_unwrap_raises(self):
        with pytest.raises(InvalidColor):
            evaluate('notacolor', '#000000').unwrap()

    def test_swap_keeps_ratio(self):
        a = evaluate('navy', 'yellow').unwrap()
        b = evaluate('yellow', 'navy').unwrap()
        assert a.ratio == b.ratio
        assert a.level_normal is b.level_normal

    def test_level_by_size(self):
        ev = evaluate('red', 'white').unwrap()
        assert ev.level(TextSize.NORMAL) is ComplianceLevel.FAIL
        assert ev.level(TextSize.LARGE) is ComplianceLevel.AA

    def test_to_dict(self):
        assert evaluate('red', 'white').unwrap().to_dict() == {
            'fg': '#ff0000',
            'bg': '#ffffff',
            'ratio': 4.0,
            'level_normal': 'Fail',
            'level_large': 'AA',
        }


class TestContrastMatrix:
    def test_matches_scalar(self):
        matrix = contrast_matrix(SAMPLE)
        for (i, a), (j, b) in itertools.product(enumerate(SAMPLE), repeat=2):
            assert matrix[i, j] == pytest.approx(contrast_ratio(a, b), abs=1e-9)

    def test_symmetric_unit_diagonal(self):
        matrix = contrast_matrix(SAMPLE)
        assert np.allclose(matrix, matrix.T)
        assert np.allclose(np.diag(matrix), 1.0)

    def test_empty(self):
        assert contrast_matrix([]).shape == (0, 0)
