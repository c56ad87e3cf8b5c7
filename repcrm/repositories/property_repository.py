"""Repositório de imóveis.

Property Repository — CRUD and listing queries for properties.
"""

from uuid import UUID

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.models.property import Property
from repcrm.repositories.base import BaseRepository


class PropertyRepository(BaseRepository[Property]):
    """Consultas da tabela properties.

    Repository handling database queries for the properties table.
    """

    def __init__(self) -> None:
        super().__init__(Property)

    async def list_filtered(
        self,
        db: AsyncSession,
        user_id: UUID,
        search: str | None = None,
        status: str | None = None,
        region: str | None = None,
        property_type: str | None = None,
    ) -> list[Property]:
        """Lista imóveis do usuário com busca e filtros, mais recentes primeiro.

        Retrieve the user's properties, newest first.

        Args:
            db: sessão assíncrona (Async database session)
            user_id: dono (Owner UUID)
            search: trecho buscado em endereço, bairro ou proprietário, sem
                    diferenciar maiúsculas (Case-insensitive substring)
            status: situação ou "all" (Status filter)
            region: região ou "all" (Region filter)
            property_type: tipo ou "all" (Type filter)

        Returns:
            list[Property]: imóveis encontrados (Matching properties)
        """
        query: Select = select(Property).where(Property.user_id == user_id)

        if search:
            query = query.where(
                or_(
                    Property.street.icontains(search, autoescape=True),
                    Property.neighborhood.icontains(search, autoescape=True),
                    Property.owner_name.icontains(search, autoescape=True),
                )
            )
        query = self._apply_equals(query, Property.status, status)
        query = self._apply_equals(query, Property.region, region)
        query = self._apply_equals(query, Property.type, property_type)

        result = await db.execute(query.order_by(Property.created_at.desc()))
        return list(result.scalars().all())


# Instância singleton — Singleton instance
property_repository: PropertyRepository = PropertyRepository()
