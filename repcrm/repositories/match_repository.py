"""Repositório de matches.

Match Repository — queries for the matches table.
Matches have no owner column of their own; ownership comes from the
client they point to, so every query here joins clients.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from repcrm.models.client import Client
from repcrm.models.match import Match
from repcrm.repositories.base import BaseRepository


class MatchRepository(BaseRepository[Match]):
    """Consultas da tabela matches.

    Repository handling database queries for the matches table, with
    client and property eagerly loaded for display.
    """

    def __init__(self) -> None:
        super().__init__(Match)

    def _owned(self, user_id: UUID | None) -> Select:
        """SELECT de matches do usuário com cliente e imóvel carregados."""
        query: Select = (
            select(Match)
            .options(selectinload(Match.client), selectinload(Match.property))
            .execution_options(populate_existing=True)
        )
        if user_id is not None:
            query = query.join(Client, Match.client_id == Client.id).where(Client.user_id == user_id)
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
        user_id: UUID | None = None,
    ) -> Match | None:
        """Busca um match do usuário com cliente e imóvel.

        Retrieve a single match, scoped through its client's owner.
        """
        result = await db.execute(self._owned(user_id).where(Match.id == record_id))
        return result.scalar_one_or_none()

    async def list_with_details(
        self,
        db: AsyncSession,
        user_id: UUID,
        status: str | None = None,
        client_id: UUID | None = None,
        limit: int | None = None,
    ) -> list[Match]:
        """Lista matches com cliente e imóvel, mais recentes primeiro.

        Args:
            db: sessão assíncrona (Async database session)
            user_id: dono (Owner UUID)
            status: situação ou "all" (Status filter)
            client_id: restringe a um cliente (Only this client's matches)
            limit: máximo de linhas (Row limit, optional)

        Returns:
            list[Match]: matches encontrados (Matches with relations loaded)
        """
        query: Select = self._apply_equals(self._owned(user_id), Match.status, status)
        if client_id is not None:
            query = query.where(Match.client_id == client_id)
        query = query.order_by(Match.created_at.desc())
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def count_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        status: str | None = None,
        is_viewed: bool | None = None,
        created_since: datetime | None = None,
    ) -> int:
        """Conta matches do usuário com filtros opcionais.

        Count the user's matches by status, viewed flag and/or creation
        lower bound (inclusive).
        """
        query: Select = (
            select(func.count(Match.id))
            .join(Client, Match.client_id == Client.id)
            .where(Client.user_id == user_id)
        )
        if status is not None:
            query = query.where(Match.status == status)
        if is_viewed is not None:
            query = query.where(Match.is_viewed == is_viewed)
        if created_since is not None:
            query = query.where(Match.created_at >= created_since)

        return (await db.execute(query)).scalar() or 0


# Instância singleton — Singleton instance
match_repository: MatchRepository = MatchRepository()
