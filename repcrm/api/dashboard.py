"""Router do painel — contadores e matches recentes.

Dashboard Router — home screen counters and the recent matches strip.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.api.deps import CurrentUser, get_current_user
from repcrm.database import get_db
from repcrm.schemas.dashboard import DashboardStatsResponse
from repcrm.schemas.match import MatchResponse
from repcrm.services.dashboard_service import dashboard_service
from repcrm.services.match_service import match_service

router: APIRouter = APIRouter()


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DashboardStatsResponse:
    """Contadores do painel — Dashboard counters."""
    return await dashboard_service.get_stats(db, current_user.id)


@router.get("/recent-matches", response_model=list[MatchResponse])
async def get_recent_matches(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    limit: Annotated[int, Query(ge=1, le=50)] = 5,
) -> list[MatchResponse]:
    """Matches mais recentes, de qualquer situação."""
    return await match_service.list_matches(db, current_user.id, limit=limit)
