"""Schemas do painel e do catálogo.

Dashboard and catalog response schema definitions.
"""

from pydantic import BaseModel


class DashboardStatsResponse(BaseModel):
    """Contadores do painel.

    Dashboard counters response schema.

    Attributes:
        total_properties: imóveis não vendidos (status != vendido)
        total_clients: clientes não fechados (status != fechado)
        properties_in_negotiation: imóveis em negociação
        active_matches: matches pendentes
        new_matches_today: matches criados desde a meia-noite local
    """

    total_properties: int
    total_clients: int
    properties_in_negotiation: int
    active_matches: int
    new_matches_today: int


class CatalogResponse(BaseModel):
    """Catálogo de valores fechados e rótulos pt-BR para os formulários."""

    property_types: dict[str, str]
    property_statuses: dict[str, str]
    client_types: dict[str, str]
    client_statuses: dict[str, str]
    match_statuses: dict[str, str]
    regions: list[str]
    banks_constructors: list[str]
