"""Tests for contrast_checker.core.palette — named colours and token normalisation."""

import pytest
from contrast_checker.core.palette import NAMED_COLORS, hex_to_rgb, is_valid_color, normalize, rgb_to_hex
from contrast_checker.core.types import Err, InvalidColor, Ok


class TestNormalizeNamed:
    @pytest.mark.parametrize('name', sorted(NAMED_COLORS))
    def test_every_named_colour(self, name):
        assert normalize(name) == Ok(NAMED_COLORS[name])

    def test_case_and_whitespace_ignored(self):
        assert normalize('  ReD ') == Ok('#ff0000')
        assert normalize('WHITE') == Ok('#ffffff')
        assert normalize('\tNavy\n') == Ok('#000080')

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            NAMED_COLORS['red'] = '#000000'  # type: ignore[index]


class TestNormalizeHex:
    def test_with_hash(self):
        assert normalize('#abc123') == Ok('#abc123')

    def test_without_hash(self):
        assert normalize('abc123') == Ok('#abc123')

    def test_mixed_case_folds(self):
        assert normalize('#FFAA00') == Ok('#ffaa00')
        assert normalize('FfAa00') == Ok('#ffaa00')

    def test_surrounding_whitespace(self):
        assert normalize('  #00FF00  ') == Ok('#00ff00')

    def test_repeated_hash_collapses(self):
        assert normalize('##abc123') == Ok('#abc123')


class TestNormalizeInvalid:
    @pytest.mark.parametrize(
        'token',
        ['', '#', 'red1', '#ggg123', 'notacolor', '#fff', 'fff', '#ff', '#ffffffff', 'fff fff', '#12345g', '   '],
    )
    def test_rejected(self, token):
        result = normalize(token)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidColor)
        assert result.error.token == token

    def test_unwrap_raises_invalid_color(self):
        with pytest.raises(InvalidColor):
            normalize('#ggg123').unwrap()

    def test_trailing_newline_inside_token_rejected(self):
        # embedded newline
        assert isinstance(normalize('#abc123\nx'), Err)


class TestIsValidColor:
    def test_valid(self):
        assert is_valid_color('teal')
        assert is_valid_color('#C0FFEE')

    def test_invalid(self):
        assert not is_valid_color('teal2')
        assert not is_valid_color('')


class TestHexRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_orange(self):
        assert hex_to_rgb('#ffa500') == (255, 165, 0)

    def test_rgb_to_hex(self):
        assert rgb_to_hex((37, 99, 235)) == '#2563eb'

    def test_values_are_canonical_hex(self):
        for name, hex_val in NAMED_COLORS.items():
            assert normalize(hex_val) == Ok(hex_val), f'{name} value {hex_val} is not canonical'
