"""Serviço de matches — leitura, ingestão e triagem pelo corretor.

Match Service — Business logic for matches.
Scores are computed by the external matcher; this service only stores
them and handles the broker's triage (view, negotiate, discard).
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.models.match import Match
from repcrm.repositories.match_repository import match_repository
from repcrm.repositories.property_repository import property_repository
from repcrm.schemas.match import MatchCreate, MatchResponse
from repcrm.services.client_service import client_service
from repcrm.services.property_service import property_service
from repcrm.utils.exceptions import DuplicateError, NotFoundError

NOT_FOUND: str = "Match não encontrado"


class MatchService:
    """Regras de negócio de matches.

    Service handling match business logic, scoped through the client owner.
    """

    def to_response(self, match: Match) -> MatchResponse:
        """Converte o match e suas relações no schema de resposta."""
        return MatchResponse(
            id=str(match.id),
            client_id=str(match.client_id),
            property_id=str(match.property_id),
            match_score=match.match_score,
            is_viewed=match.is_viewed,
            status=match.status,
            created_at=match.created_at,
            client=client_service.to_response(match.client) if match.client else None,
            property=property_service.to_response(match.property) if match.property else None,
        )

    async def list_matches(
        self,
        db: AsyncSession,
        user_id: UUID,
        status: str | None = None,
        limit: int | None = None,
    ) -> list[MatchResponse]:
        """Lista matches com cliente e imóvel, mais recentes primeiro."""
        matches: list[Match] = await match_repository.list_with_details(
            db, user_id, status=status, limit=limit
        )
        return [self.to_response(m) for m in matches]

    async def list_client_matches(
        self,
        db: AsyncSession,
        client_id: UUID,
        user_id: UUID,
    ) -> list[MatchResponse]:
        """Matches de um cliente.

        Raises:
            NotFoundError: cliente inexistente ou de outro usuário
        """
        await client_service.get_owned(db, client_id, user_id)
        matches: list[Match] = await match_repository.list_with_details(db, user_id, client_id=client_id)
        return [self.to_response(m) for m in matches]

    async def count_unviewed(self, db: AsyncSession, user_id: UUID) -> int:
        """Quantidade de matches ainda não visualizados."""
        return await match_repository.count_for_user(db, user_id, is_viewed=False)

    async def create_match(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: MatchCreate,
    ) -> MatchResponse:
        """Grava um match calculado externamente.

        Store a match produced by the external matcher. Both sides must
        belong to the caller and the pair must be new.

        Raises:
            NotFoundError: cliente ou imóvel inexistente
            DuplicateError: par cliente/imóvel já registrado
        """
        await client_service.get_owned(db, data.client_id, user_id)
        if await property_repository.get_by_id(db, data.property_id, user_id) is None:
            raise NotFoundError("Imóvel não encontrado")

        exists: bool = await match_repository.exists(
            db, {"client_id": data.client_id, "property_id": data.property_id}
        )
        if exists:
            raise DuplicateError("Este match já existe")

        match: Match = await match_repository.create(db, data.model_dump())
        return await self._get_response(db, match.id, user_id)

    async def mark_viewed(
        self,
        db: AsyncSession,
        match_id: UUID,
        user_id: UUID,
    ) -> MatchResponse:
        """Marca o match como visualizado."""
        return await self._update(db, match_id, user_id, {"is_viewed": True})

    async def update_status(
        self,
        db: AsyncSession,
        match_id: UUID,
        user_id: UUID,
        status: str,
    ) -> MatchResponse:
        """Muda a situação do match; sempre o marca como visualizado."""
        return await self._update(db, match_id, user_id, {"status": status, "is_viewed": True})

    async def delete_match(
        self,
        db: AsyncSession,
        match_id: UUID,
        user_id: UUID,
    ) -> None:
        """Descarta o match.

        Raises:
            NotFoundError: match inexistente ou de outro usuário
        """
        deleted: bool = await match_repository.delete(db, match_id, user_id)
        if not deleted:
            raise NotFoundError(NOT_FOUND)

    async def _update(
        self,
        db: AsyncSession,
        match_id: UUID,
        user_id: UUID,
        update_data: dict,
    ) -> MatchResponse:
        match: Match | None = await match_repository.update(db, match_id, update_data, user_id)
        if match is None:
            raise NotFoundError(NOT_FOUND)
        return await self._get_response(db, match.id, user_id)

    async def _get_response(self, db: AsyncSession, match_id: UUID, user_id: UUID) -> MatchResponse:
        # Recarrega com cliente e imóvel (selectinload)
        match: Match | None = await match_repository.get_by_id(db, match_id, user_id)
        if match is None:
            raise NotFoundError(NOT_FOUND)
        return self.to_response(match)


# Instância singleton — Singleton instance
match_service: MatchService = MatchService()
