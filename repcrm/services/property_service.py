"""Serviço de imóveis — regras de negócio do CRUD e das fotos.

Property Service — Business logic for property CRUD and photo handling.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from repcrm.models.property import Property
from repcrm.repositories.property_repository import property_repository
from repcrm.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from repcrm.services.storage_service import storage_service
from repcrm.utils.exceptions import BadRequestError, NotFoundError
from repcrm.utils.formatting import format_brl

NOT_FOUND: str = "Imóvel não encontrado"


class PropertyService:
    """Regras de negócio de imóveis.

    Service handling property business logic, scoped to the owning user.
    """

    def to_response(self, prop: Property) -> PropertyResponse:
        """Converte o modelo no schema de resposta.

        Convert a Property model instance to a PropertyResponse schema.
        The cover is the first photo, falling back to the first video.
        """
        photos: list[str] = list(prop.photos or [])
        videos: list[str] = list(prop.videos or [])
        return PropertyResponse(
            id=str(prop.id),
            user_id=str(prop.user_id),
            type=prop.type,
            street=prop.street,
            neighborhood=prop.neighborhood,
            city=prop.city,
            state=prop.state,
            region=prop.region,
            transfer_value=prop.transfer_value,
            monthly_payment=prop.monthly_payment,
            outstanding_balance=prop.outstanding_balance,
            bank_constructor=prop.bank_constructor,
            owner_name=prop.owner_name,
            owner_phone=prop.owner_phone,
            status=prop.status,
            notes=prop.notes,
            photos=photos,
            videos=videos,
            cover_photo=photos[0] if photos else (videos[0] if videos else None),
            transfer_value_formatted=format_brl(prop.transfer_value),
            monthly_payment_formatted=format_brl(prop.monthly_payment),
            created_at=prop.created_at,
            updated_at=prop.updated_at,
        )

    async def list_properties(
        self,
        db: AsyncSession,
        user_id: UUID,
        search: str | None = None,
        status: str | None = None,
        region: str | None = None,
        property_type: str | None = None,
    ) -> list[PropertyResponse]:
        """Lista imóveis com busca e filtros.

        List the user's properties, newest first, with search and filters.
        "all" or None disables a filter.
        """
        search = search.strip() if search else None
        properties: list[Property] = await property_repository.list_filtered(
            db, user_id, search=search, status=status, region=region, property_type=property_type
        )
        return [self.to_response(p) for p in properties]

    async def _get_owned(self, db: AsyncSession, property_id: UUID, user_id: UUID) -> Property:
        prop: Property | None = await property_repository.get_by_id(db, property_id, user_id)
        if prop is None:
            raise NotFoundError(NOT_FOUND)
        return prop

    async def get_property(
        self,
        db: AsyncSession,
        property_id: UUID,
        user_id: UUID,
    ) -> PropertyResponse:
        """Detalhe de um imóvel.

        Raises:
            NotFoundError: imóvel inexistente ou de outro usuário
        """
        return self.to_response(await self._get_owned(db, property_id, user_id))

    async def create_property(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: PropertyCreate,
    ) -> PropertyResponse:
        """Cadastra um imóvel para o usuário.

        Create a new property owned by the caller.

        Args:
            db: sessão assíncrona (Async database session)
            user_id: dono (Owner UUID)
            data: dados validados (Validated creation data)

        Returns:
            PropertyResponse: imóvel criado (Created property)
        """
        prop: Property = await property_repository.create(
            db, {**data.model_dump(), "user_id": user_id}
        )
        return self.to_response(prop)

    async def update_property(
        self,
        db: AsyncSession,
        property_id: UUID,
        user_id: UUID,
        data: PropertyUpdate,
    ) -> PropertyResponse:
        """Atualização parcial — só os campos enviados mudam.

        Raises:
            NotFoundError: imóvel inexistente ou de outro usuário
        """
        update_data: dict = data.model_dump(exclude_unset=True)
        prop: Property | None = await property_repository.update(db, property_id, update_data, user_id)
        if prop is None:
            raise NotFoundError(NOT_FOUND)
        return self.to_response(prop)

    async def delete_property(
        self,
        db: AsyncSession,
        property_id: UUID,
        user_id: UUID,
    ) -> None:
        """Exclui o imóvel e seus matches.

        Raises:
            NotFoundError: imóvel inexistente ou de outro usuário
        """
        deleted: bool = await property_repository.delete(db, property_id, user_id)
        if not deleted:
            raise NotFoundError(NOT_FOUND)

    async def set_cover_photo(
        self,
        db: AsyncSession,
        property_id: UUID,
        user_id: UUID,
        photo_url: str,
    ) -> PropertyResponse:
        """Define a capa movendo a foto para a primeira posição.

        Move the chosen photo to index 0; the other photos keep their
        relative order.

        Raises:
            NotFoundError: imóvel inexistente
            BadRequestError: a foto não pertence ao imóvel
        """
        prop: Property = await self._get_owned(db, property_id, user_id)
        photos: list[str] = list(prop.photos or [])
        if photo_url not in photos:
            raise BadRequestError("A foto não pertence a este imóvel")

        photos.remove(photo_url)
        # Lista nova: mutação in-place em coluna JSON não é detectada
        prop.photos = [photo_url, *photos]
        await db.flush()
        await db.refresh(prop)
        return self.to_response(prop)

    async def remove_media(
        self,
        db: AsyncSession,
        property_id: UUID,
        user_id: UUID,
        media_url: str,
    ) -> PropertyResponse:
        """Desvincula uma foto ou vídeo do imóvel.

        The stored object is deleted separately by ``delete_media_object``
        once the change is committed.

        Raises:
            NotFoundError: imóvel inexistente
            BadRequestError: a URL não pertence ao imóvel
        """
        prop: Property = await self._get_owned(db, property_id, user_id)
        photos: list[str] = list(prop.photos or [])
        videos: list[str] = list(prop.videos or [])

        if media_url in photos:
            prop.photos = [p for p in photos if p != media_url]
        elif media_url in videos:
            prop.videos = [v for v in videos if v != media_url]
        else:
            raise BadRequestError("O arquivo não pertence a este imóvel")

        await db.flush()
        await db.refresh(prop)
        return self.to_response(prop)

    def delete_media_object(self, media_url: str, user_id: UUID) -> bool:
        """Apaga o arquivo de uma mídia já desvinculada (após o commit).

        Only objects under the caller's folder are deleted; foreign or
        malformed URLs were merely detached from the property.
        """
        return storage_service.delete_object(media_url, user_id)


# Instância singleton — Singleton instance
property_service: PropertyService = PropertyService()
