"""Conjuntos fechados do domínio e seus rótulos pt-BR.

Closed value sets of the domain (used by table CHECK constraints and
request schemas) plus the display catalog served to the forms.
"""

from typing import Literal

# Tipos de imóvel — Property types
PropertyType = Literal["apartamento", "casa", "garden", "sobrado", "sitio"]
PROPERTY_TYPES: tuple[str, ...] = ("apartamento", "casa", "garden", "sobrado", "sitio")

# Situação do imóvel — Property status
PropertyStatus = Literal["disponivel", "negociacao", "vendido"]
PROPERTY_STATUSES: tuple[str, ...] = ("disponivel", "negociacao", "vendido")

# Tipo de cliente — Client type
ClientType = Literal["comprador", "vendedor", "comprador_vendedor"]
CLIENT_TYPES: tuple[str, ...] = ("comprador", "vendedor", "comprador_vendedor")

# Situação do cliente — Client status
ClientStatus = Literal["ativo", "negociacao", "fechado"]
CLIENT_STATUSES: tuple[str, ...] = ("ativo", "negociacao", "fechado")

# Situação do match — Match status
MatchStatus = Literal["pending", "negotiating"]
MATCH_STATUSES: tuple[str, ...] = ("pending", "negotiating")

PROPERTY_TYPE_LABELS: dict[str, str] = {
    "apartamento": "Apartamento",
    "casa": "Casa",
    "garden": "Garden",
    "sobrado": "Sobrado",
    "sitio": "Sítio",
}

PROPERTY_STATUS_LABELS: dict[str, str] = {
    "disponivel": "Disponível",
    "negociacao": "Em Negociação",
    "vendido": "Vendido",
}

CLIENT_TYPE_LABELS: dict[str, str] = {
    "comprador": "Comprador",
    "vendedor": "Vendedor",
    "comprador_vendedor": "Comprador + Vendedor",
}

CLIENT_STATUS_LABELS: dict[str, str] = {
    "ativo": "Ativo",
    "negociacao": "Em Negociação",
    "fechado": "Fechado",
}

MATCH_STATUS_LABELS: dict[str, str] = {
    "pending": "Pendente",
    "negotiating": "Em Negociação",
}

# Regiões atendidas (Curitiba e região metropolitana)
REGIONS: list[str] = [
    "CIC",
    "Tatuquara",
    "Sítio Cercado",
    "Colombo",
    "Campo Largo",
    "Pinhais",
    "São José dos Pinhais",
    "Araucária",
    "Almirante Tamandaré",
    "Fazenda Rio Grande",
    "Bairro Alto",
    "Boqueirão",
    "Cajuru",
    "Cidade Industrial",
    "Xaxim",
    "Portão",
    "Santa Felicidade",
    "Boa Vista",
    "Outro",
]

BANKS_CONSTRUCTORS: list[str] = [
    "Caixa",
    "Banco do Brasil",
    "Bradesco",
    "Itaú",
    "Santander",
    "MRV",
    "Tenda",
    "Direcional",
    "Plano & Plano",
    "Cyrela",
    "Outro",
]


def check_in(column: str, values: tuple[str, ...]) -> str:
    """Expressão SQL de CHECK para um conjunto fechado — "status IN ('a', 'b')"."""
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"
