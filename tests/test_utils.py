import pytest

from amtwsman.utils import coerce_text, format_scalar


class TestCoerceText(object):

    @pytest.mark.parametrize('text, expected', [
        ('42', 42),
        ('-7', -7),
        ('+3', 3),
        ('0', 0),
        ('9223372036854775807', 9223372036854775807),
        ('-9223372036854775808', -9223372036854775808),
    ])
    def test_integers(self, text, expected):
        value = coerce_text(text)
        assert type(value) is int
        assert value == expected

    @pytest.mark.parametrize('text, expected', [
        ('true', True), ('True', True), ('TRUE', True), ('t', True), ('T', True),
        ('false', False), ('False', False), ('FALSE', False), ('f', False), ('F', False),
    ])
    def test_booleans(self, text, expected):
        assert coerce_text(text) is expected

    @pytest.mark.parametrize('text', [
        '42a', '4 2', ' 42', '42\n', '1_000', '3.14', 'yes', 'tRUE', '',
        '9223372036854775808', '١٢',
    ])
    def test_strings(self, text):
        assert coerce_text(text) == text
        assert type(coerce_text(text)) is str

    def test_missing_text(self):
        assert coerce_text(None) == ''


class TestFormatScalar(object):

    def test_values(self):
        assert format_scalar(True) == 'true'
        assert format_scalar(False) == 'false'
        assert format_scalar(1440) == '1440'
        assert format_scalar('nuc') == 'nuc'
