"""Router do catálogo — valores fechados e rótulos dos formulários.

Catalog Router — enum values, pt-BR labels, regions and banks.
Público: os formulários carregam antes do login.
"""

from fastapi import APIRouter

from repcrm.models.enums import (
    BANKS_CONSTRUCTORS,
    CLIENT_STATUS_LABELS,
    CLIENT_TYPE_LABELS,
    MATCH_STATUS_LABELS,
    PROPERTY_STATUS_LABELS,
    PROPERTY_TYPE_LABELS,
    REGIONS,
)
from repcrm.schemas.dashboard import CatalogResponse

router: APIRouter = APIRouter()


@router.get("", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    return CatalogResponse(
        property_types=PROPERTY_TYPE_LABELS,
        property_statuses=PROPERTY_STATUS_LABELS,
        client_types=CLIENT_TYPE_LABELS,
        client_statuses=CLIENT_STATUS_LABELS,
        match_statuses=MATCH_STATUS_LABELS,
        regions=REGIONS,
        banks_constructors=BANKS_CONSTRUCTORS,
    )
