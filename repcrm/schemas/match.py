"""Schemas Pydantic de matches.

Match Pydantic request/response schema definitions.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from repcrm.models.enums import MatchStatus
from repcrm.schemas.client import ClientResponse
from repcrm.schemas.property import PropertyResponse


class MatchCreate(BaseModel):
    """Ingestão de match calculado externamente.

    Match ingestion request schema. The score comes from the external
    matcher and is stored as received.

    Attributes:
        client_id: UUID do cliente (Client identifier)
        property_id: UUID do imóvel (Property identifier)
        match_score: compatibilidade 0–100 (External match score)
    """

    client_id: UUID
    property_id: UUID
    match_score: int = Field(..., ge=0, le=100)


class MatchStatusUpdate(BaseModel):
    """Mudança de situação — pending|negotiating."""

    status: MatchStatus


class MatchResponse(BaseModel):
    """Resposta de match com cliente e imóvel desnormalizados.

    Match response schema. ``client`` and ``property`` are embedded so the
    match cards render without extra requests.
    """

    id: str
    client_id: str
    property_id: str
    match_score: int
    is_viewed: bool
    status: str
    created_at: datetime
    client: ClientResponse | None = None
    property: PropertyResponse | None = None
