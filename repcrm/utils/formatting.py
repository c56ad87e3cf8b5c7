"""Formatação pt-BR — moeda (BRL), WhatsApp e iniciais.

pt-BR formatting helpers shared by schemas and services.

Currency format:
    160000      -> "160.000,00"        (format_currency_display)
    160000      -> "R$ 160.000,00"     (format_brl)
    "160.000,00" -> 160000.0            (parse_currency_value)
"""

import re

_NON_CURRENCY_CHARS = re.compile(r"[^\d,]")
_NON_DIGITS = re.compile(r"\D")

BRAZIL_COUNTRY_CODE: str = "55"


def parse_currency_value(formatted_value: str) -> float | None:
    """Converte texto em formato pt-BR para número.

    Keeps only digits and commas, then treats the first comma as the
    decimal separator. Dots are thousands separators and are dropped.

    Args:
        formatted_value: texto digitado, ex. "R$ 160.000,00"

    Returns:
        float | None: valor numérico, ou None se não houver dígitos
    """
    clean_value: str = _NON_CURRENCY_CHARS.sub("", formatted_value)
    if not clean_value:
        return None
    # Só a primeira vírgula vira ponto; o que vier após uma segunda vírgula é ignorado
    numeric_string: str = clean_value.replace(",", ".", 1).split(",")[0]
    try:
        return float(numeric_string)
    except ValueError:
        return None


def format_currency_display(value: float | int | str | None) -> str:
    """Formata com separadores pt-BR e duas casas decimais (160000 -> "160.000,00")."""
    if value is None:
        return ""
    try:
        num_value = float(value)
    except (TypeError, ValueError):
        return ""
    return _swap_separators(f"{num_value:,.2f}")


def format_brl(value: float | int | None, decimals: int = 2, placeholder: str = "-") -> str:
    """Formata como moeda BRL ("R$ 160.000,00").

    Zero and missing values render as ``placeholder``, matching how the
    listing cards show an absent monthly payment.
    """
    if not value:
        return placeholder
    return "R$ " + _swap_separators(f"{float(value):,.{decimals}f}")


def _swap_separators(en_formatted: str) -> str:
    # 1,234.56 -> 1.234,56
    return en_formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def whatsapp_url(phone: str | None) -> str | None:
    """Monta o link wa.me, prefixando o DDI 55 quando ausente."""
    if not phone:
        return None
    digits: str = _NON_DIGITS.sub("", phone)
    if not digits:
        return None
    if not digits.startswith(BRAZIL_COUNTRY_CODE):
        digits = BRAZIL_COUNTRY_CODE + digits
    return f"https://wa.me/{digits}"


def initials(name: str) -> str:
    """Iniciais das duas primeiras palavras do nome, em maiúsculas."""
    return "".join(part[0] for part in name.split()[:2]).upper()
