"""Schemas Pydantic de imóveis.

Property Pydantic request/response schema definitions.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from repcrm.models.enums import PropertyStatus, PropertyType
from repcrm.schemas.common import (
    OptionalCurrency,
    OptionalText,
    PositiveCurrency,
    RequiredText,
)

# Campos que não podem ser apagados (null) numa atualização parcial
_REQUIRED_ON_UPDATE: tuple[str, ...] = ("type", "street", "city", "state", "region", "transfer_value", "status")

StateCode = Annotated[str, Field(min_length=2, max_length=2)]


class PropertyCreate(BaseModel):
    """Cadastro de imóvel.

    Property creation request schema. type, street, region and
    transfer_value are required; missing or blank values block the request.

    Attributes:
        type: tipo do imóvel (Property type)
        street: endereço (Street address)
        region: região (Region)
        transfer_value: valor do repasse, > 0 (Transfer value)
        photos: URLs já enviadas ao storage, a primeira é a capa
    """

    type: PropertyType
    street: RequiredText
    neighborhood: OptionalText = None
    city: RequiredText = "Curitiba"
    state: StateCode = "PR"
    region: RequiredText
    transfer_value: PositiveCurrency
    monthly_payment: OptionalCurrency = None
    outstanding_balance: OptionalCurrency = None
    bank_constructor: OptionalText = None
    owner_name: OptionalText = None
    owner_phone: OptionalText = None
    status: PropertyStatus = "disponivel"
    notes: OptionalText = None
    photos: list[str] = []
    videos: list[str] = []


class PropertyUpdate(BaseModel):
    """Atualização parcial de imóvel.

    Property update request schema (partial update). Only sent fields
    change; optional fields may be cleared with null, required ones may not.
    """

    type: PropertyType | None = None
    street: RequiredText | None = None
    neighborhood: OptionalText = None
    city: RequiredText | None = None
    state: StateCode | None = None
    region: RequiredText | None = None
    transfer_value: PositiveCurrency | None = None
    monthly_payment: OptionalCurrency = None
    outstanding_balance: OptionalCurrency = None
    bank_constructor: OptionalText = None
    owner_name: OptionalText = None
    owner_phone: OptionalText = None
    status: PropertyStatus | None = None
    notes: OptionalText = None
    photos: list[str] | None = None
    videos: list[str] | None = None

    @model_validator(mode="after")
    def _required_fields_not_cleared(self) -> "PropertyUpdate":
        cleared = [f for f in _REQUIRED_ON_UPDATE if f in self.model_fields_set and getattr(self, f) is None]
        if cleared:
            raise ValueError(f"Campos obrigatórios não podem ficar vazios: {', '.join(cleared)}")
        for field in ("photos", "videos"):
            if field in self.model_fields_set and getattr(self, field) is None:
                setattr(self, field, [])
        return self


class PhotoRequest(BaseModel):
    """Referência a uma foto/vídeo do imóvel — Photo or video URL of a property."""

    photo_url: RequiredText


class PropertyResponse(BaseModel):
    """Resposta de imóvel.

    Property response schema. Besides the stored fields it carries the
    cover image and the BRL-formatted values shown on listing cards.

    Attributes:
        cover_photo: primeira foto, senão primeiro vídeo (Cover media URL)
        transfer_value_formatted: "R$ 160.000,00"
        monthly_payment_formatted: "R$ 1.200,00" ou "-"
    """

    id: str  # UUID do imóvel (Property UUID as string)
    user_id: str  # UUID do dono (Owner UUID as string)
    type: str
    street: str
    neighborhood: str | None
    city: str
    state: str
    region: str
    transfer_value: float
    monthly_payment: float | None
    outstanding_balance: float | None
    bank_constructor: str | None
    owner_name: str | None
    owner_phone: str | None
    status: str
    notes: str | None
    photos: list[str]
    videos: list[str]
    cover_photo: str | None
    transfer_value_formatted: str
    monthly_payment_formatted: str
    created_at: datetime
    updated_at: datetime
