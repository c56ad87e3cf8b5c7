"""Modelo ORM de matches cliente × imóvel.

Match SQLAlchemy ORM model definition.
Rows are produced by the external matching service; this API stores them,
lets the broker mark them viewed / move them to negotiation, or discard them.

Tables:
    - matches: sugestões de pareamento (Suggested client-property pairings)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repcrm.database import Base
from repcrm.models.enums import MATCH_STATUSES, check_in


class Match(Base):
    """Match — Suggested pairing between a client and a property.

    Attributes:
        id: identificador UUID (Unique identifier)
        client_id: cliente FK (CASCADE)
        property_id: imóvel FK (CASCADE)
        match_score: compatibilidade 0–100, calculada externamente (External score)
        is_viewed: já visualizado pelo corretor (Seen by the broker)
        status: pending|negotiating
        created_at: data de criação UTC (Creation timestamp)

    Constraints:
        uq_matches_client_property: um match por par (One match per pair)
    """

    __tablename__ = "matches"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    property_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    # Score pré-calculado, nunca recalculado aqui (Stored as received)
    match_score: Mapped[int] = mapped_column(Integer, nullable=False)
    is_viewed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("client_id", "property_id", name="uq_matches_client_property"),
        CheckConstraint("match_score BETWEEN 0 AND 100", name="ck_matches_score"),
        CheckConstraint(check_in("status", MATCH_STATUSES), name="ck_matches_status"),
    )

    client = relationship("Client", back_populates="matches")
    property = relationship("Property", back_populates="matches")
