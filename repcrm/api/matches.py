"""Router de matches — listagem, ingestão e triagem.

Match Router — list, ingest and triage client/property matches.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.api.deps import CurrentUser, get_current_user
from repcrm.database import get_db
from repcrm.schemas.common import CountResponse
from repcrm.schemas.match import MatchCreate, MatchResponse, MatchStatusUpdate
from repcrm.services.match_service import match_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[MatchResponse])
async def list_matches(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    status: Annotated[str | None, Query()] = None,
) -> list[MatchResponse]:
    """Lista matches com cliente e imóvel — newest first."""
    return await match_service.list_matches(db, current_user.id, status=status)


@router.get("/unviewed-count", response_model=CountResponse)
async def unviewed_count(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CountResponse:
    """Quantidade para o badge de novos matches — Unviewed match count."""
    count: int = await match_service.count_unviewed(db, current_user.id)
    return CountResponse(count=count)


@router.post("", response_model=MatchResponse, status_code=201)
async def create_match(
    data: MatchCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MatchResponse:
    """Registra um match calculado externamente.

    Store a scored client/property pair produced by the matcher.
    """
    result: MatchResponse = await match_service.create_match(db, current_user.id, data)
    await db.commit()
    return result


@router.patch("/{match_id}/viewed", response_model=MatchResponse)
async def mark_viewed(
    match_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MatchResponse:
    result: MatchResponse = await match_service.mark_viewed(db, match_id, current_user.id)
    await db.commit()
    return result


@router.patch("/{match_id}/status", response_model=MatchResponse)
async def update_match_status(
    match_id: UUID,
    data: MatchStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> MatchResponse:
    """Muda a situação (pending/negotiating) e marca como visto."""
    result: MatchResponse = await match_service.update_status(db, match_id, current_user.id, data.status)
    await db.commit()
    return result


@router.delete("/{match_id}", status_code=204)
async def delete_match(
    match_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> None:
    """Descarta o match — Discard a match."""
    await match_service.delete_match(db, match_id, current_user.id)
    await db.commit()
