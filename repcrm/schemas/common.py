"""Tipos Pydantic reutilizáveis entre os schemas.

Reusable annotated field types shared across request schemas.
Currency fields accept either numbers or pt-BR formatted strings
("R$ 160.000,00"); optional free-text fields treat blank input as null,
the same way the forms send empty inputs.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, StringConstraints

from repcrm.utils.formatting import parse_currency_value


def _coerce_currency(value: Any) -> Any:
    """Converte texto pt-BR em número; demais tipos seguem para a validação padrão."""
    if isinstance(value, str):
        return parse_currency_value(value)
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _dedupe(values: Any) -> Any:
    """Remove repetições mantendo a ordem (seleção tipo toggle)."""
    if isinstance(values, list):
        return list(dict.fromkeys(values))
    return values


# Limite das colunas Numeric(14, 2)
MAX_CURRENCY: int = 10**12

# Texto obrigatório; vazio ou só espaços bloqueia a requisição
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Texto opcional: "" vira None
OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]

# Valor em R$ obrigatório e positivo (ex.: valor do repasse)
PositiveCurrency = Annotated[float, BeforeValidator(_coerce_currency), Field(gt=0, lt=MAX_CURRENCY)]

# Valor em R$ opcional; "" ou None viram None
OptionalCurrency = Annotated[
    Annotated[float, Field(ge=0, lt=MAX_CURRENCY)] | None,
    BeforeValidator(_coerce_currency),
    BeforeValidator(_blank_to_none),
]

# Lista sem repetições
UniqueList = BeforeValidator(_dedupe)


class MessageResponse(BaseModel):
    """Resposta genérica de confirmação.

    Generic message response schema for simple confirmations.

    Attributes:
        message: mensagem (Human-readable confirmation message)
    """

    message: str


class CountResponse(BaseModel):
    """Resposta com contagem — Count response (e.g. unviewed matches)."""

    count: int
