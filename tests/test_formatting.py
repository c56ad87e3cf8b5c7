"""Formatação pt-BR — moeda, WhatsApp e iniciais."""

import pytest

from repcrm.utils.formatting import (
    format_brl,
    format_currency_display,
    initials,
    parse_currency_value,
    whatsapp_url,
)


class TestParseCurrency:

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("R$ 160.000,00", 160000.0),
            ("1.850,5", 1850.5),
            ("250000", 250000.0),
            ("12,34,56", 12.34),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_currency_value(text) == expected

    @pytest.mark.parametrize("text", ["", "R$ ", "abc"])
    def test_no_digits(self, text):
        assert parse_currency_value(text) is None

    def test_display_is_parseable(self):
        assert parse_currency_value(format_currency_display(1234567.8)) == 1234567.8


class TestFormatCurrency:

    def test_display(self):
        assert format_currency_display(160000) == "160.000,00"
        assert format_currency_display("950.5") == "950,50"

    def test_display_invalid(self):
        assert format_currency_display(None) == ""
        assert format_currency_display("abc") == ""

    def test_brl(self):
        assert format_brl(1234567.891) == "R$ 1.234.567,89"
        assert format_brl(160000, decimals=0) == "R$ 160.000"

    def test_brl_placeholder(self):
        assert format_brl(None) == "-"
        assert format_brl(0) == "-"
        assert format_brl(None, placeholder="") == ""


class TestContactHelpers:

    def test_whatsapp_adds_country_code(self):
        assert whatsapp_url("(41) 99999-0000") == "https://wa.me/5541999990000"

    def test_whatsapp_keeps_country_code(self):
        assert whatsapp_url("+55 41 99999-0000") == "https://wa.me/5541999990000"

    def test_whatsapp_empty(self):
        assert whatsapp_url("") is None
        assert whatsapp_url(None) is None

    def test_initials(self):
        assert initials("maria de lourdes") == "MD"
        assert initials("Pedro") == "P"
        assert initials("  ") == ""
