"""API de imóveis — CRUD, filtros, capa e remoção de fotos.

Property API tests — create/read/update/delete, search and filters,
cover selection, media removal and owner isolation.
"""

import uuid

import pytest
from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/properties"

PAYLOAD = {
    "type": "casa",
    "street": "Rua XV de Novembro, 50",
    "neighborhood": "Centro",
    "region": "Centro",
    "transfer_value": "R$ 250.000,00",
    "monthly_payment": "1.850,50",
    "bank_constructor": "Itaú",
}


class TestPropertyCreate:
    """Cadastro de imóvel."""

    async def test_create_property(self, client: AsyncClient, token, user_id):
        res = await client.post(URL, json=PAYLOAD, headers=auth_header(token))
        assert res.status_code == 201
        data = res.json()
        assert data["user_id"] == str(user_id)
        assert data["transfer_value"] == 250000.0
        assert data["monthly_payment"] == 1850.5
        assert data["transfer_value_formatted"] == "R$ 250.000,00"
        assert data["monthly_payment_formatted"] == "R$ 1.850,50"
        assert data["city"] == "Curitiba"
        assert data["state"] == "PR"
        assert data["status"] == "disponivel"
        assert data["photos"] == []
        assert data["cover_photo"] is None

    async def test_missing_street_is_rejected(self, client: AsyncClient, token):
        """Sem endereço — 422 e nada é gravado."""
        payload = {k: v for k, v in PAYLOAD.items() if k != "street"}
        res = await client.post(URL, json=payload, headers=auth_header(token))
        assert res.status_code == 422

        res = await client.get(URL, headers=auth_header(token))
        assert res.json() == []

    async def test_blank_street_is_rejected(self, client: AsyncClient, token):
        res = await client.post(URL, json={**PAYLOAD, "street": "   "}, headers=auth_header(token))
        assert res.status_code == 422

    async def test_zero_transfer_value_is_rejected(self, client: AsyncClient, token):
        res = await client.post(URL, json={**PAYLOAD, "transfer_value": "0,00"}, headers=auth_header(token))
        assert res.status_code == 422

    async def test_value_beyond_column_range_is_rejected(self, client: AsyncClient, token):
        """Acima do limite de Numeric(14, 2): 422 em vez de erro do banco."""
        res = await client.post(URL, json={**PAYLOAD, "transfer_value": 1e15}, headers=auth_header(token))
        assert res.status_code == 422

        res = await client.post(
            URL, json={**PAYLOAD, "monthly_payment": "1.000.000.000.000,00"}, headers=auth_header(token)
        )
        assert res.status_code == 422

        res = await client.post(
            URL, json={**PAYLOAD, "transfer_value": "999.999.999.999,99"}, headers=auth_header(token)
        )
        assert res.status_code == 201

    async def test_unknown_type_is_rejected(self, client: AsyncClient, token):
        res = await client.post(URL, json={**PAYLOAD, "type": "castelo"}, headers=auth_header(token))
        assert res.status_code == 422

    async def test_unknown_status_is_rejected(self, client: AsyncClient, token):
        res = await client.post(URL, json={**PAYLOAD, "status": "alugado"}, headers=auth_header(token))
        assert res.status_code == 422

    async def test_create_without_auth(self, client: AsyncClient):
        res = await client.post(URL, json=PAYLOAD)
        assert res.status_code in (401, 403)


class TestPropertyRead:
    """Listagem, busca e detalhe."""

    async def test_list_newest_first(self, client: AsyncClient, token):
        for street in ("Rua A", "Rua B"):
            await client.post(URL, json={**PAYLOAD, "street": street}, headers=auth_header(token))

        res = await client.get(URL, headers=auth_header(token))
        assert res.status_code == 200
        assert [p["street"] for p in res.json()] == ["Rua B", "Rua A"]

    async def test_search_is_case_insensitive(self, client: AsyncClient, prop, token):
        res = await client.get(URL, params={"search": "MARCOS"}, headers=auth_header(token))
        assert [p["id"] for p in res.json()] == [str(prop.id)]

        res = await client.get(URL, params={"search": "brasilio"}, headers=auth_header(token))
        assert res.json() == []

    async def test_search_by_street(self, client: AsyncClient, prop, token):
        res = await client.get(URL, params={"search": "itiberê"}, headers=auth_header(token))
        assert len(res.json()) == 1

    async def test_filters(self, client: AsyncClient, prop, token):
        await client.post(URL, json={**PAYLOAD, "status": "vendido"}, headers=auth_header(token))

        res = await client.get(URL, params={"status": "vendido"}, headers=auth_header(token))
        assert [p["status"] for p in res.json()] == ["vendido"]

        res = await client.get(URL, params={"type": "apartamento"}, headers=auth_header(token))
        assert [p["id"] for p in res.json()] == [str(prop.id)]

        res = await client.get(URL, params={"region": "Centro"}, headers=auth_header(token))
        assert len(res.json()) == 1

    async def test_all_disables_filters(self, client: AsyncClient, prop, token):
        await client.post(URL, json=PAYLOAD, headers=auth_header(token))
        res = await client.get(
            URL,
            params={"status": "all", "type": "all", "region": "all"},
            headers=auth_header(token),
        )
        assert len(res.json()) == 2

    async def test_get_detail(self, client: AsyncClient, prop, token):
        res = await client.get(f"{URL}/{prop.id}", headers=auth_header(token))
        assert res.status_code == 200
        data = res.json()
        assert data["cover_photo"] == prop.photos[0]
        assert data["transfer_value_formatted"] == "R$ 160.000,00"

    async def test_get_nonexistent(self, client: AsyncClient, token):
        res = await client.get(f"{URL}/{uuid.uuid4()}", headers=auth_header(token))
        assert res.status_code == 404

    async def test_other_user_cannot_see(self, client: AsyncClient, prop, other_token):
        res = await client.get(f"{URL}/{prop.id}", headers=auth_header(other_token))
        assert res.status_code == 404

        res = await client.get(URL, headers=auth_header(other_token))
        assert res.json() == []


class TestPropertyUpdate:
    """Atualização parcial."""

    async def test_partial_update(self, client: AsyncClient, prop, token):
        res = await client.put(
            f"{URL}/{prop.id}",
            json={"status": "negociacao", "monthly_payment": None},
            headers=auth_header(token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "negociacao"
        assert data["monthly_payment"] is None
        assert data["monthly_payment_formatted"] == "-"
        assert data["street"] == prop.street

    async def test_required_field_cannot_be_cleared(self, client: AsyncClient, prop, token):
        res = await client.put(f"{URL}/{prop.id}", json={"street": None}, headers=auth_header(token))
        assert res.status_code == 422

    async def test_update_other_users_property(self, client: AsyncClient, prop, other_token):
        res = await client.put(f"{URL}/{prop.id}", json={"notes": "x"}, headers=auth_header(other_token))
        assert res.status_code == 404


class TestPropertyDelete:
    """Exclusão."""

    async def test_delete_cascades_matches(self, client: AsyncClient, prop, match, token):
        res = await client.delete(f"{URL}/{prop.id}", headers=auth_header(token))
        assert res.status_code == 204

        res = await client.get(f"{URL}/{prop.id}", headers=auth_header(token))
        assert res.status_code == 404

        res = await client.get("/api/v1/matches", headers=auth_header(token))
        assert res.json() == []

    async def test_delete_nonexistent(self, client: AsyncClient, token):
        res = await client.delete(f"{URL}/{uuid.uuid4()}", headers=auth_header(token))
        assert res.status_code == 404


class TestPropertyPhotos:
    """Capa e remoção de mídia."""

    async def test_set_cover_moves_photo_first(self, client: AsyncClient, token):
        photos = [f"http://localhost:8000/uploads/property-photos/{n}.jpg" for n in "abc"]
        res = await client.post(URL, json={**PAYLOAD, "photos": photos}, headers=auth_header(token))
        prop_id = res.json()["id"]

        res = await client.put(f"{URL}/{prop_id}/cover", json={"photo_url": photos[2]}, headers=auth_header(token))
        assert res.status_code == 200
        data = res.json()
        assert data["photos"] == [photos[2], photos[0], photos[1]]
        assert data["cover_photo"] == photos[2]

    async def test_set_cover_unknown_photo(self, client: AsyncClient, prop, token):
        res = await client.put(
            f"{URL}/{prop.id}/cover",
            json={"photo_url": "http://elsewhere/x.jpg"},
            headers=auth_header(token),
        )
        assert res.status_code == 400

    async def test_remove_photo_deletes_file(self, client: AsyncClient, token, user_id, local_uploads):
        stored = local_uploads / str(user_id) / "1700000000000-ab12cd34.jpg"
        stored.parent.mkdir()
        stored.write_bytes(b"jpeg")
        photo = f"http://localhost:8000/uploads/property-photos/{user_id}/{stored.name}"
        kept = "http://localhost:8000/uploads/property-photos/b.jpg"
        res = await client.post(URL, json={**PAYLOAD, "photos": [photo, kept]}, headers=auth_header(token))
        prop_id = res.json()["id"]

        res = await client.request(
            "DELETE",
            f"{URL}/{prop_id}/photos",
            json={"photo_url": photo},
            headers=auth_header(token),
        )
        assert res.status_code == 200
        assert res.json()["photos"] == [kept]
        assert not stored.exists()

    async def test_remove_foreign_photo_keeps_owner_file(
        self, client: AsyncClient, token, other_user_id, local_uploads
    ):
        """URL de outro usuário é só desvinculada; o arquivo dele fica."""
        stored = local_uploads / str(other_user_id) / "1700000000000-aaaa.jpg"
        stored.parent.mkdir()
        stored.write_bytes(b"jpeg")
        foreign = f"http://localhost:8000/uploads/property-photos/{other_user_id}/{stored.name}"
        res = await client.post(URL, json={**PAYLOAD, "photos": [foreign]}, headers=auth_header(token))
        prop_id = res.json()["id"]

        res = await client.request(
            "DELETE",
            f"{URL}/{prop_id}/photos",
            json={"photo_url": foreign},
            headers=auth_header(token),
        )
        assert res.status_code == 200
        assert res.json()["photos"] == []
        assert stored.read_bytes() == b"jpeg"

    async def test_remove_photo_with_relative_path(self, client: AsyncClient, token, local_uploads):
        outside = local_uploads.parent / "outside.jpg"
        outside.write_bytes(b"keep")
        photo = "http://localhost:8000/uploads/property-photos/../outside.jpg"
        res = await client.post(URL, json={**PAYLOAD, "photos": [photo]}, headers=auth_header(token))
        prop_id = res.json()["id"]

        res = await client.request(
            "DELETE",
            f"{URL}/{prop_id}/photos",
            json={"photo_url": photo},
            headers=auth_header(token),
        )
        assert res.status_code == 200
        assert res.json()["photos"] == []
        assert outside.exists()

    async def test_file_kept_when_commit_fails(
        self, client: AsyncClient, db, token, user_id, local_uploads, monkeypatch
    ):
        """Se a remoção não for gravada, o arquivo continua no storage."""
        stored = local_uploads / str(user_id) / "1700000000000-ab12cd34.jpg"
        stored.parent.mkdir()
        stored.write_bytes(b"jpeg")
        photo = f"http://localhost:8000/uploads/property-photos/{user_id}/{stored.name}"
        res = await client.post(URL, json={**PAYLOAD, "photos": [photo]}, headers=auth_header(token))
        prop_id = res.json()["id"]

        async def failing_commit():
            raise RuntimeError("commit failed")

        monkeypatch.setattr(db, "commit", failing_commit)
        with pytest.raises(RuntimeError):
            await client.request(
                "DELETE",
                f"{URL}/{prop_id}/photos",
                json={"photo_url": photo},
                headers=auth_header(token),
            )
        assert stored.exists()

    async def test_remove_video(self, client: AsyncClient, token):
        video = "http://localhost:8000/uploads/property-photos/tour.mp4"
        res = await client.post(URL, json={**PAYLOAD, "videos": [video]}, headers=auth_header(token))
        data = res.json()
        assert data["cover_photo"] == video

        res = await client.request(
            "DELETE",
            f"{URL}/{data['id']}/photos",
            json={"photo_url": video},
            headers=auth_header(token),
        )
        assert res.status_code == 200
        assert res.json()["videos"] == []
        assert res.json()["cover_photo"] is None

    async def test_remove_unknown_photo(self, client: AsyncClient, prop, token):
        res = await client.request(
            "DELETE",
            f"{URL}/{prop.id}/photos",
            json={"photo_url": "http://elsewhere/x.jpg"},
            headers=auth_header(token),
        )
        assert res.status_code == 400
