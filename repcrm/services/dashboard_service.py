"""Serviço do painel — contadores da tela inicial.

Dashboard Service — Aggregation logic for the home screen counters.
"""

from datetime import datetime, time, timezone
from uuid import UUID
from zoneinfo import ZoneInfo

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.config import settings
from repcrm.models.client import Client
from repcrm.models.property import Property
from repcrm.repositories.match_repository import match_repository
from repcrm.schemas.dashboard import DashboardStatsResponse


def start_of_today(tz_name: str | None = None, now: datetime | None = None) -> datetime:
    """Meia-noite local de hoje, em UTC.

    Local midnight in the configured timezone, converted to UTC so it
    compares against UTC-stored timestamps.
    """
    tz = ZoneInfo(tz_name or settings.TIMEZONE)
    local_now = (now or datetime.now(timezone.utc)).astimezone(tz)
    midnight = datetime.combine(local_now.date(), time.min, tzinfo=tz)
    return midnight.astimezone(timezone.utc)


class DashboardService:
    """Serviço do painel — Dashboard aggregation service."""

    async def get_stats(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> DashboardStatsResponse:
        """Contadores do painel.

        Counts, for the caller's data:
            - imóveis não vendidos (status != vendido)
            - imóveis em negociação (status == negociacao)
            - clientes não fechados (status != fechado)
            - matches pendentes (status == pending)
            - matches criados desde a meia-noite local
        """
        property_row = (
            await db.execute(
                select(
                    func.sum(case((Property.status != "vendido", 1), else_=0)).label("active"),
                    func.sum(case((Property.status == "negociacao", 1), else_=0)).label("negotiating"),
                ).where(Property.user_id == user_id)
            )
        ).one()

        total_clients: int = (
            await db.execute(
                select(func.count(Client.id)).where(
                    Client.user_id == user_id,
                    Client.status != "fechado",
                )
            )
        ).scalar() or 0

        active_matches: int = await match_repository.count_for_user(db, user_id, status="pending")
        new_matches_today: int = await match_repository.count_for_user(
            db, user_id, created_since=start_of_today()
        )

        return DashboardStatsResponse(
            total_properties=property_row.active or 0,
            total_clients=total_clients,
            properties_in_negotiation=property_row.negotiating or 0,
            active_matches=active_matches,
            new_matches_today=new_matches_today,
        )


# Instância singleton — Singleton instance
dashboard_service: DashboardService = DashboardService()
