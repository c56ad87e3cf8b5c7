"""Schemas Pydantic de clientes.

Client Pydantic request/response schema definitions.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, model_validator

from repcrm.models.enums import ClientStatus, ClientType, PropertyType
from repcrm.schemas.common import OptionalCurrency, OptionalText, RequiredText, UniqueList

_REQUIRED_ON_UPDATE: tuple[str, ...] = ("name", "phone", "type", "status", "has_property_for_transfer")


class ClientCreate(BaseModel):
    """Cadastro de cliente.

    Client creation request schema. name, phone and type are required.

    Attributes:
        name: nome (Full name)
        phone: telefone (Phone)
        type: comprador|vendedor|comprador_vendedor
        max_purchase_value: valor máximo de compra (optional, pt-BR string or number)
        desired_property_types: tipos desejados, sem repetição
        regions_of_interest: regiões de interesse, sem repetição
    """

    name: RequiredText
    phone: RequiredText
    type: ClientType
    max_purchase_value: OptionalCurrency = None
    desired_property_types: Annotated[list[PropertyType], UniqueList] = []
    regions_of_interest: Annotated[list[str], UniqueList] = []
    has_property_for_transfer: bool = False
    status: ClientStatus = "ativo"
    notes: OptionalText = None


class ClientUpdate(BaseModel):
    """Atualização parcial de cliente — Client update request schema (partial)."""

    name: RequiredText | None = None
    phone: RequiredText | None = None
    type: ClientType | None = None
    max_purchase_value: OptionalCurrency = None
    desired_property_types: Annotated[list[PropertyType], UniqueList] | None = None
    regions_of_interest: Annotated[list[str], UniqueList] | None = None
    has_property_for_transfer: bool | None = None
    status: ClientStatus | None = None
    notes: OptionalText = None

    @model_validator(mode="after")
    def _required_fields_not_cleared(self) -> "ClientUpdate":
        cleared = [f for f in _REQUIRED_ON_UPDATE if f in self.model_fields_set and getattr(self, f) is None]
        if cleared:
            raise ValueError(f"Campos obrigatórios não podem ficar vazios: {', '.join(cleared)}")
        for field in ("desired_property_types", "regions_of_interest"):
            if field in self.model_fields_set and getattr(self, field) is None:
                setattr(self, field, [])
        return self


class ClientResponse(BaseModel):
    """Resposta de cliente.

    Client response schema, with the avatar initials and the WhatsApp
    deep link the client cards use.
    """

    id: str  # UUID do cliente (Client UUID as string)
    user_id: str  # UUID do dono (Owner UUID as string)
    name: str
    phone: str
    type: str
    max_purchase_value: float | None
    max_purchase_value_formatted: str  # "R$ 300.000,00" ou "-"
    desired_property_types: list[str]
    regions_of_interest: list[str]
    has_property_for_transfer: bool
    status: str
    notes: str | None
    initials: str  # "Maria da Silva" -> "MD"
    whatsapp_url: str | None  # https://wa.me/55...
    created_at: datetime
    updated_at: datetime
