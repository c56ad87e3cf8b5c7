"""API de matches — listagem, ingestão e triagem.

Match API tests — ingestion rules, viewed/status transitions and
the unviewed badge counter.
"""

import uuid

from httpx import AsyncClient

from repcrm.models import Client, Property
from tests.conftest import auth_header

URL = "/api/v1/matches"


class TestMatchList:
    """Listagem."""

    async def test_list_with_details(self, client: AsyncClient, match, token):
        res = await client.get(URL, headers=auth_header(token))
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["status"] == "pending"
        assert data[0]["is_viewed"] is False
        assert data[0]["client"]["name"] == "Ana Souza"
        assert data[0]["property"]["cover_photo"].endswith("/a.jpg")

    async def test_status_filter(self, client: AsyncClient, match, token):
        res = await client.get(URL, params={"status": "negotiating"}, headers=auth_header(token))
        assert res.json() == []

        res = await client.get(URL, params={"status": "all"}, headers=auth_header(token))
        assert len(res.json()) == 1

    async def test_other_user_sees_nothing(self, client: AsyncClient, match, other_token):
        res = await client.get(URL, headers=auth_header(other_token))
        assert res.json() == []

        res = await client.get(f"{URL}/unviewed-count", headers=auth_header(other_token))
        assert res.json() == {"count": 0}


class TestMatchCreate:
    """Ingestão de matches."""

    async def test_create_match(self, client: AsyncClient, buyer, prop, token):
        res = await client.post(
            URL,
            json={"client_id": str(buyer.id), "property_id": str(prop.id), "match_score": 92},
            headers=auth_header(token),
        )
        assert res.status_code == 201
        data = res.json()
        assert data["match_score"] == 92
        assert data["status"] == "pending"
        assert data["is_viewed"] is False
        assert data["client"]["id"] == str(buyer.id)
        assert data["property"]["id"] == str(prop.id)

    async def test_duplicate_pair(self, client: AsyncClient, match, token):
        res = await client.post(
            URL,
            json={"client_id": str(match.client_id), "property_id": str(match.property_id), "match_score": 50},
            headers=auth_header(token),
        )
        assert res.status_code == 409

    async def test_score_out_of_range(self, client: AsyncClient, buyer, prop, token):
        res = await client.post(
            URL,
            json={"client_id": str(buyer.id), "property_id": str(prop.id), "match_score": 101},
            headers=auth_header(token),
        )
        assert res.status_code == 422

    async def test_unknown_property(self, client: AsyncClient, buyer, token):
        res = await client.post(
            URL,
            json={"client_id": str(buyer.id), "property_id": str(uuid.uuid4()), "match_score": 70},
            headers=auth_header(token),
        )
        assert res.status_code == 404

    async def test_property_of_other_user(self, client: AsyncClient, db, buyer, other_user_id, token):
        foreign = Property(
            user_id=other_user_id,
            type="casa",
            street="Rua Alheia, 1",
            region="Portão",
            transfer_value=90000,
        )
        db.add(foreign)
        await db.flush()

        res = await client.post(
            URL,
            json={"client_id": str(buyer.id), "property_id": str(foreign.id), "match_score": 70},
            headers=auth_header(token),
        )
        assert res.status_code == 404

    async def test_client_of_other_user(self, client: AsyncClient, db, prop, other_user_id, token):
        foreign = Client(user_id=other_user_id, name="Outro", phone="41 90000-0000", type="comprador")
        db.add(foreign)
        await db.flush()

        res = await client.post(
            URL,
            json={"client_id": str(foreign.id), "property_id": str(prop.id), "match_score": 70},
            headers=auth_header(token),
        )
        assert res.status_code == 404


class TestMatchTriage:
    """Visualização, situação e descarte."""

    async def test_mark_viewed(self, client: AsyncClient, match, token):
        res = await client.get(f"{URL}/unviewed-count", headers=auth_header(token))
        assert res.json() == {"count": 1}

        res = await client.patch(f"{URL}/{match.id}/viewed", headers=auth_header(token))
        assert res.status_code == 200
        assert res.json()["is_viewed"] is True

        res = await client.get(f"{URL}/unviewed-count", headers=auth_header(token))
        assert res.json() == {"count": 0}

    async def test_status_change_marks_viewed(self, client: AsyncClient, match, token):
        res = await client.patch(
            f"{URL}/{match.id}/status", json={"status": "negotiating"}, headers=auth_header(token)
        )
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "negotiating"
        assert data["is_viewed"] is True

        res = await client.get(f"{URL}/unviewed-count", headers=auth_header(token))
        assert res.json() == {"count": 0}

    async def test_invalid_status(self, client: AsyncClient, match, token):
        res = await client.patch(
            f"{URL}/{match.id}/status", json={"status": "closed"}, headers=auth_header(token)
        )
        assert res.status_code == 422

    async def test_other_user_cannot_triage(self, client: AsyncClient, match, other_token):
        res = await client.patch(f"{URL}/{match.id}/viewed", headers=auth_header(other_token))
        assert res.status_code == 404

        res = await client.delete(f"{URL}/{match.id}", headers=auth_header(other_token))
        assert res.status_code == 404

    async def test_delete_match(self, client: AsyncClient, match, token):
        res = await client.delete(f"{URL}/{match.id}", headers=auth_header(token))
        assert res.status_code == 204

        res = await client.get(URL, headers=auth_header(token))
        assert res.json() == []

        res = await client.delete(f"{URL}/{match.id}", headers=auth_header(token))
        assert res.status_code == 404
