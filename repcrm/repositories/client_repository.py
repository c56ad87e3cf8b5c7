"""Repositório de clientes.

Client Repository — CRUD and listing queries for clients.
"""

from uuid import UUID

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.models.client import Client
from repcrm.repositories.base import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """Consultas da tabela clients.

    Repository handling database queries for the clients table.
    """

    def __init__(self) -> None:
        super().__init__(Client)

    async def list_filtered(
        self,
        db: AsyncSession,
        user_id: UUID,
        search: str | None = None,
        status: str | None = None,
        client_type: str | None = None,
    ) -> list[Client]:
        """Lista clientes do usuário, mais recentes primeiro.

        The search term matches the name case-insensitively or any part
        of the phone number as typed.

        Args:
            db: sessão assíncrona (Async database session)
            user_id: dono (Owner UUID)
            search: trecho do nome ou do telefone (Name/phone substring)
            status: situação ou "all" (Status filter)
            client_type: tipo ou "all" (Type filter)

        Returns:
            list[Client]: clientes encontrados (Matching clients)
        """
        query: Select = select(Client).where(Client.user_id == user_id)

        if search:
            query = query.where(
                or_(
                    Client.name.icontains(search, autoescape=True),
                    Client.phone.contains(search, autoescape=True),
                )
            )
        query = self._apply_equals(query, Client.status, status)
        query = self._apply_equals(query, Client.type, client_type)

        result = await db.execute(query.order_by(Client.created_at.desc()))
        return list(result.scalars().all())


# Instância singleton — Singleton instance
client_repository: ClientRepository = ClientRepository()
