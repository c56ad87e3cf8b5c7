"""Ponto de entrada FastAPI — middlewares e routers.

FastAPI application entry point — Middleware and router registration.
Configures CORS, health check, local upload serving and the /api/v1 routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from repcrm.api import api_router
from repcrm.config import settings
from repcrm.middleware.axiom_logging import AxiomLoggingMiddleware
from repcrm.services.storage_service import storage_service

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Log no Axiom, registrado antes do CORS para capturar todas as requisições
app.add_middleware(AxiomLoggingMiddleware)

# CORS — origens do front-end (Frontend origins from settings)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Verificação de saúde — Health check endpoint for load balancers."""
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")

# Modo local: as URLs públicas das fotos apontam para este servidor
if storage_service.is_local:
    app.mount(
        f"/uploads/{storage_service.bucket}",
        StaticFiles(directory=storage_service.uploads_dir, check_dir=False),
        name="uploads",
    )
