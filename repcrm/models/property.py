"""Modelo ORM de imóveis.

Property SQLAlchemy ORM model definition.

Tables:
    - properties: imóveis de repasse (Loan-transfer property listings)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repcrm.database import Base, JSONList
from repcrm.models.enums import PROPERTY_STATUSES, PROPERTY_TYPES, check_in


class Property(Base):
    """Imóvel de repasse — Loan-transfer property listing.

    A property belongs to the broker (user_id) who registered it. ``photos``
    is ordered: the first URL is the cover shown on listing cards.

    Attributes:
        id: identificador UUID (Unique identifier)
        user_id: dono do cadastro, "sub" do token (Owning user)
        type: tipo do imóvel (apartamento|casa|garden|sobrado|sitio)
        street / neighborhood / city / state / region: endereço (Address fields)
        transfer_value: valor do repasse (Amount paid to take over the contract)
        monthly_payment: parcela mensal (Monthly installment, optional)
        outstanding_balance: saldo devedor (Remaining loan balance, optional)
        bank_constructor: banco ou construtora (Financing bank/constructor)
        owner_name / owner_phone: proprietário (Current owner contact)
        status: disponivel|negociacao|vendido
        notes: observações (Free-form notes)
        photos: URLs das fotos, a primeira é a capa (Photo URLs, first = cover)
        videos: URLs dos vídeos (Video URLs)

    Relationships:
        matches: matches com clientes (cascade delete)
    """

    __tablename__ = "properties"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # Dono do cadastro: id do usuário no provedor de auth (sem FK local)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    neighborhood: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="Curitiba")
    state: Mapped[str] = mapped_column(String(2), nullable=False, default="PR")
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    # Valores em R$: asdecimal=False devolve float (Currency columns returned as float)
    transfer_value: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    monthly_payment: Mapped[float | None] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=True)
    outstanding_balance: Mapped[float | None] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=True)
    bank_constructor: Mapped[str | None] = mapped_column(String(100), nullable=True)
    owner_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="disponivel")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    photos: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    videos: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint(check_in("type", PROPERTY_TYPES), name="ck_properties_type"),
        CheckConstraint(check_in("status", PROPERTY_STATUSES), name="ck_properties_status"),
        Index("ix_properties_user_created", "user_id", "created_at"),
    )

    matches = relationship("Match", back_populates="property", cascade="all, delete-orphan")
