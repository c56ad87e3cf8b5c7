"""Engine e sessões do banco de dados.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class
for the PostgreSQL database connection via asyncpg.
"""

from collections.abc import AsyncGenerator

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from repcrm.config import settings

# Colunas de lista (fotos, regiões, tipos desejados): JSONB no PostgreSQL, JSON nos demais
# List columns use JSONB on PostgreSQL and plain JSON elsewhere
JSONList = JSON().with_variant(JSONB(), "postgresql")

# Engine assíncrona — Async database engine (asyncpg driver)
# pool_pre_ping=True: valida a conexão antes de usar (Validates connections before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
    # Pooler em modo transação não suporta prepared statements
    # Disable prepared statement caches for transaction-mode pooling
    connect_args={"statement_cache_size": 0},
)

# Fábrica de sessões — Async session factory
# expire_on_commit=False: atributos continuam acessíveis após o commit
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Classe base declarativa — Declarative base class for all ORM models."""

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Cria uma sessão assíncrona e a fecha ao fim da requisição.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: instância de sessão assíncrona (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
