"""Pacote de routers da API — agrega todos os endpoints.

API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application under /api/v1.

Included routers:
    - properties: imóveis (Property listings, cover photo, media removal)
    - clients: clientes (Buyers/sellers and their matches)
    - matches: matches (Listing, ingestion and triage)
    - dashboard: painel (Counters and recent matches)
    - storage: uploads (Presigned URLs and local uploads)
    - catalog: catálogo (Enum labels, regions, banks)
"""

from fastapi import APIRouter

from repcrm.api.catalog import router as catalog_router
from repcrm.api.clients import router as clients_router
from repcrm.api.dashboard import router as dashboard_router
from repcrm.api.matches import router as matches_router
from repcrm.api.properties import router as properties_router
from repcrm.api.storage import router as storage_router

api_router: APIRouter = APIRouter()

api_router.include_router(properties_router, prefix="/properties", tags=["Properties"])
api_router.include_router(clients_router, prefix="/clients", tags=["Clients"])
api_router.include_router(matches_router, prefix="/matches", tags=["Matches"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(storage_router, prefix="/storage", tags=["Storage"])
api_router.include_router(catalog_router, prefix="/catalog", tags=["Catalog"])
