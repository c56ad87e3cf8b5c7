"""Modelo ORM de clientes.

Client SQLAlchemy ORM model definition.

Tables:
    - clients: compradores e vendedores (Buyers and sellers)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, DateTime, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repcrm.database import Base, JSONList
from repcrm.models.enums import CLIENT_STATUSES, CLIENT_TYPES, check_in


class Client(Base):
    """Cliente — Buyer and/or seller tracked by the broker.

    The buyer preferences (max value, desired types, regions) are what the
    external matcher reads to produce ``Match`` rows.

    Attributes:
        id: identificador UUID (Unique identifier)
        user_id: dono do cadastro (Owning user)
        name: nome completo (Full name)
        phone: telefone / WhatsApp (Phone number)
        type: comprador|vendedor|comprador_vendedor
        max_purchase_value: valor máximo de compra (Max purchase value, optional)
        desired_property_types: tipos de imóvel desejados (Desired property types)
        regions_of_interest: regiões de interesse (Regions of interest)
        has_property_for_transfer: possui imóvel para repassar (Has a property to transfer)
        status: ativo|negociacao|fechado
        notes: observações (Free-form notes)

    Relationships:
        matches: matches com imóveis (cascade delete)
    """

    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    max_purchase_value: Mapped[float | None] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=True)
    desired_property_types: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    regions_of_interest: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    has_property_for_transfer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ativo")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint(check_in("type", CLIENT_TYPES), name="ck_clients_type"),
        CheckConstraint(check_in("status", CLIENT_STATUSES), name="ck_clients_status"),
    )

    matches = relationship("Match", back_populates="client", cascade="all, delete-orphan")
