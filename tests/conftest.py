"""Infra de testes — SQLite em memória, sessão, cliente httpx e tokens.

Test infrastructure — in-memory SQLite (aiosqlite) DB, session, httpx client
and JWT fixtures. Each test gets a fresh schema on its own engine.
"""

import os

# Antes de importar o app: storage em modo local e Axiom desligado
os.environ["AWS_ACCESS_KEY_ID"] = ""
os.environ["AWS_SECRET_ACCESS_KEY"] = ""
os.environ["AXIOM_API_TOKEN"] = ""
os.environ["AXIOM_DATASET"] = ""
os.environ["DEBUG"] = "false"

import uuid
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from repcrm.config import settings
from repcrm.database import Base, get_db
from repcrm.main import app
from repcrm.models import Client, Match, Property
from repcrm.services.storage_service import storage_service

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Engine, sessão, cliente
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Engine em memória com o schema criado."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Cliente de teste FastAPI — sobrescreve a sessão do banco."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def local_uploads(tmp_path, monkeypatch):
    """Uploads locais num diretório temporário."""
    monkeypatch.setattr(storage_service, "uploads_dir", tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Usuários e tokens
# ---------------------------------------------------------------------------
def make_token(user_id: uuid.UUID, expires_in: timedelta = timedelta(hours=1), **claims) -> str:
    """Token no formato do provedor de auth (aud=authenticated, sub=UUID)."""
    payload = {
        "sub": str(user_id),
        "aud": settings.JWT_AUDIENCE,
        "exp": datetime.now(timezone.utc) + expires_in,
        "email": "corretor@example.com",
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def other_user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def token(user_id) -> str:
    return make_token(user_id)


@pytest.fixture
def other_token(other_user_id) -> str:
    return make_token(other_user_id)


# ---------------------------------------------------------------------------
# Dados de exemplo
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def prop(db: AsyncSession, user_id):
    """Apartamento disponível no Água Verde."""
    p = Property(
        user_id=user_id,
        type="apartamento",
        street="Rua Brasílio Itiberê, 1200",
        neighborhood="Água Verde",
        region="Água Verde",
        transfer_value=160000,
        monthly_payment=1200,
        bank_constructor="Caixa",
        owner_name="Marcos Pereira",
        owner_phone="(41) 99999-0000",
        photos=["http://localhost:8000/uploads/property-photos/a.jpg",
                "http://localhost:8000/uploads/property-photos/b.jpg"],
    )
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


@pytest_asyncio.fixture
async def buyer(db: AsyncSession, user_id):
    """Cliente comprador ativo."""
    c = Client(
        user_id=user_id,
        name="Ana Souza",
        phone="(41) 98888-7777",
        type="comprador",
        max_purchase_value=200000,
        desired_property_types=["apartamento"],
        regions_of_interest=["Água Verde"],
    )
    db.add(c)
    await db.flush()
    await db.refresh(c)
    return c


@pytest_asyncio.fixture
async def match(db: AsyncSession, buyer, prop):
    m = Match(client_id=buyer.id, property_id=prop.id, match_score=87)
    db.add(m)
    await db.flush()
    await db.refresh(m)
    return m
