"""Serviço de clientes — regras de negócio do CRUD.

Client Service — Business logic for client CRUD operations.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.models.client import Client
from repcrm.repositories.client_repository import client_repository
from repcrm.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from repcrm.utils.exceptions import NotFoundError
from repcrm.utils.formatting import format_brl, initials, whatsapp_url

NOT_FOUND: str = "Cliente não encontrado"


class ClientService:
    """Regras de negócio de clientes.

    Service handling client business logic, scoped to the owning user.
    """

    def to_response(self, client: Client) -> ClientResponse:
        """Converte o modelo no schema de resposta — Client model to ClientResponse."""
        return ClientResponse(
            id=str(client.id),
            user_id=str(client.user_id),
            name=client.name,
            phone=client.phone,
            type=client.type,
            max_purchase_value=client.max_purchase_value,
            max_purchase_value_formatted=format_brl(client.max_purchase_value),
            desired_property_types=list(client.desired_property_types or []),
            regions_of_interest=list(client.regions_of_interest or []),
            has_property_for_transfer=client.has_property_for_transfer,
            status=client.status,
            notes=client.notes,
            initials=initials(client.name),
            whatsapp_url=whatsapp_url(client.phone),
            created_at=client.created_at,
            updated_at=client.updated_at,
        )

    async def list_clients(
        self,
        db: AsyncSession,
        user_id: UUID,
        search: str | None = None,
        status: str | None = None,
        client_type: str | None = None,
    ) -> list[ClientResponse]:
        """Lista clientes com busca por nome/telefone e filtros.

        List the user's clients, newest first. "all" or None disables a filter.
        """
        search = search.strip() if search else None
        clients: list[Client] = await client_repository.list_filtered(
            db, user_id, search=search, status=status, client_type=client_type
        )
        return [self.to_response(c) for c in clients]

    async def get_owned(self, db: AsyncSession, client_id: UUID, user_id: UUID) -> Client:
        """Busca o cliente do usuário ou levanta 404."""
        client: Client | None = await client_repository.get_by_id(db, client_id, user_id)
        if client is None:
            raise NotFoundError(NOT_FOUND)
        return client

    async def get_client(
        self,
        db: AsyncSession,
        client_id: UUID,
        user_id: UUID,
    ) -> ClientResponse:
        return self.to_response(await self.get_owned(db, client_id, user_id))

    async def create_client(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: ClientCreate,
    ) -> ClientResponse:
        """Cadastra um cliente.

        Create a new client owned by the caller.

        Args:
            db: sessão assíncrona (Async database session)
            user_id: dono (Owner UUID)
            data: dados validados (Validated creation data)

        Returns:
            ClientResponse: cliente criado (Created client)
        """
        client: Client = await client_repository.create(
            db, {**data.model_dump(), "user_id": user_id}
        )
        return self.to_response(client)

    async def update_client(
        self,
        db: AsyncSession,
        client_id: UUID,
        user_id: UUID,
        data: ClientUpdate,
    ) -> ClientResponse:
        """Atualização parcial de cliente.

        Raises:
            NotFoundError: cliente inexistente ou de outro usuário
        """
        update_data: dict = data.model_dump(exclude_unset=True)
        client: Client | None = await client_repository.update(db, client_id, update_data, user_id)
        if client is None:
            raise NotFoundError(NOT_FOUND)
        return self.to_response(client)

    async def delete_client(
        self,
        db: AsyncSession,
        client_id: UUID,
        user_id: UUID,
    ) -> None:
        """Exclui o cliente e seus matches.

        Raises:
            NotFoundError: cliente inexistente ou de outro usuário
        """
        deleted: bool = await client_repository.delete(db, client_id, user_id)
        if not deleted:
            raise NotFoundError(NOT_FOUND)


# Instância singleton — Singleton instance
client_service: ClientService = ClientService()
