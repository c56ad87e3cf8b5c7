"""Router de imóveis — CRUD, capa e remoção de fotos.

Property Router — CRUD endpoints for property listings plus photo handling.
All endpoints are scoped to the caller from the JWT.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.api.deps import CurrentUser, get_current_user
from repcrm.database import get_db
from repcrm.schemas.property import PhotoRequest, PropertyCreate, PropertyResponse, PropertyUpdate
from repcrm.services.property_service import property_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[PropertyResponse])
async def list_properties(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    search: Annotated[str | None, Query()] = None,
    status: Annotated[str | None, Query()] = None,
    region: Annotated[str | None, Query()] = None,
    property_type: Annotated[str | None, Query(alias="type")] = None,
) -> list[PropertyResponse]:
    """Lista imóveis; busca por endereço, bairro ou proprietário.

    List properties, newest first. Use "all" (or omit) to disable a filter.
    """
    return await property_service.list_properties(
        db,
        current_user.id,
        search=search,
        status=status,
        region=region,
        property_type=property_type,
    )


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PropertyResponse:
    """Detalhe do imóvel — Retrieve a single property."""
    return await property_service.get_property(db, property_id, current_user.id)


@router.post("", response_model=PropertyResponse, status_code=201)
async def create_property(
    data: PropertyCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PropertyResponse:
    """Cadastra um imóvel — Create a property owned by the caller."""
    result: PropertyResponse = await property_service.create_property(db, current_user.id, data)
    await db.commit()
    return result


@router.put("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: UUID,
    data: PropertyUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PropertyResponse:
    """Atualiza o imóvel (parcial) — Partial update of a property."""
    result: PropertyResponse = await property_service.update_property(db, property_id, current_user.id, data)
    await db.commit()
    return result


@router.delete("/{property_id}", status_code=204)
async def delete_property(
    property_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> None:
    """Exclui o imóvel e seus matches — Delete a property."""
    await property_service.delete_property(db, property_id, current_user.id)
    await db.commit()


@router.put("/{property_id}/cover", response_model=PropertyResponse)
async def set_cover_photo(
    property_id: UUID,
    data: PhotoRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PropertyResponse:
    """Define a foto de capa — Move the given photo to the first position."""
    result: PropertyResponse = await property_service.set_cover_photo(
        db, property_id, current_user.id, data.photo_url
    )
    await db.commit()
    return result


@router.delete("/{property_id}/photos", response_model=PropertyResponse)
async def remove_photo(
    property_id: UUID,
    data: PhotoRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> PropertyResponse:
    """Remove foto ou vídeo e apaga o arquivo do storage.

    Detach a photo/video URL from the property and delete the stored object.
    """
    result: PropertyResponse = await property_service.remove_media(
        db, property_id, current_user.id, data.photo_url
    )
    await db.commit()
    # Arquivo só é apagado depois que a remoção foi gravada
    property_service.delete_media_object(data.photo_url, current_user.id)
    return result
