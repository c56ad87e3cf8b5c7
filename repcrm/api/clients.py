"""Router de clientes — CRUD e matches do cliente.

Client Router — CRUD endpoints for buyer/seller clients.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.api.deps import CurrentUser, get_current_user
from repcrm.database import get_db
from repcrm.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from repcrm.schemas.match import MatchResponse
from repcrm.services.client_service import client_service
from repcrm.services.match_service import match_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    search: Annotated[str | None, Query()] = None,
    status: Annotated[str | None, Query()] = None,
    client_type: Annotated[str | None, Query(alias="type")] = None,
) -> list[ClientResponse]:
    """Lista clientes; busca por nome ou telefone.

    List clients, newest first. "all" disables the status/type filters.
    """
    return await client_service.list_clients(
        db, current_user.id, search=search, status=status, client_type=client_type
    )


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ClientResponse:
    return await client_service.get_client(db, client_id, current_user.id)


@router.get("/{client_id}/matches", response_model=list[MatchResponse])
async def list_client_matches(
    client_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[MatchResponse]:
    """Imóveis compatíveis com o cliente — Matches for one client."""
    return await match_service.list_client_matches(db, client_id, current_user.id)


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    data: ClientCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ClientResponse:
    """Cadastra um cliente — Create a client owned by the caller."""
    result: ClientResponse = await client_service.create_client(db, current_user.id, data)
    await db.commit()
    return result


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: UUID,
    data: ClientUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ClientResponse:
    """Atualiza o cliente (parcial) — Partial update of a client."""
    result: ClientResponse = await client_service.update_client(db, client_id, current_user.id, data)
    await db.commit()
    return result


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> None:
    """Exclui o cliente e seus matches — Delete a client."""
    await client_service.delete_client(db, client_id, current_user.id)
    await db.commit()
