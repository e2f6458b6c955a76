"""Tests for the canines API"""

import pytest

from daycare.models import Canine, Vaccination


@pytest.fixture
def canine_payload(owner):
    return {
        "ownerId": owner.id,
        "name": "Bella",
        "breed": "Border Collie",
        "dateOfBirth": "2021-02-10T00:00:00.000Z",
        "gender": "FEMALE",
        "color": "Black and white",
        "microChipNumber": "985112003456789",
        "spayed": True,
        "notes": "",
        "vetName": "Dr Hale",
        "vetPhone": "",
        "vetAddress": "",
        "fleaed": True,
        "DHPP": "2024-01-10T00:00:00.000Z",
        "LEPTO": "2024-02-10T00:00:00.000Z",
        "KC": "2024-03-10T00:00:00.000Z",
        "socialSkills": {"dogs": "plays well"},
        "behaviour": {"separationAnxiety": False},
        "health": {"medication": None},
    }


class TestCaninesAPI:
    def test_create_canine_with_vaccinations(self, client, db, canine_payload, auth_headers):
        response = client.post("/canines", json=canine_payload, headers=auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Bella"
        assert data["gender"] == "FEMALE"
        assert data["notes"] is None
        assert data["socialSkills"] == {"dogs": "plays well"}
        assert len(data["vaccinations"]) == 1
        assert data["vaccinations"][0]["DHPP"] == "2024-01-10T00:00:00Z"
        assert data["vaccinations"][0]["fleaed"] is True
        assert db.query(Vaccination).count() == 1

    def test_create_for_missing_owner_returns_404(self, client, db, canine_payload, auth_headers):
        canine_payload["ownerId"] = "missing"

        response = client.post("/canines", json=canine_payload, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Owner Not Found"}
        assert db.query(Canine).count() == 0

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", ""),
            ("gender", "UNKNOWN"),
            ("dateOfBirth", "soon"),
            ("DHPP", "never"),
            ("vetName", "X"),
        ],
    )
    def test_invalid_fields_rejected(self, client, canine_payload, auth_headers, field, value):
        canine_payload[field] = value

        response = client.post("/canines", json=canine_payload, headers=auth_headers)

        assert response.status_code == 400

    def test_medical_fields_must_be_objects(self, client, canine_payload, auth_headers):
        canine_payload["health"] = "healthy"

        response = client.post("/canines", json=canine_payload, headers=auth_headers)

        assert response.status_code == 400

    def test_update_canine_updates_vaccination(self, client, db, canine, canine_payload, auth_headers):
        canine_payload["name"] = "Rex II"
        canine_payload["KC"] = ""
        canine_payload["fleaed"] = False

        response = client.patch(f"/canines/{canine.id}", json=canine_payload, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Rex II"
        assert data["vaccinations"][0]["KC"] is None
        assert data["vaccinations"][0]["fleaed"] is False
        assert db.query(Vaccination).count() == 1

    def test_update_missing_canine_returns_404(self, client, canine_payload, auth_headers):
        response = client.patch("/canines/missing", json=canine_payload, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Canine not found"}

    def test_list_includes_owner(self, client, canine, auth_headers):
        data = client.get("/canines", headers=auth_headers).json()

        assert len(data) == 1
        assert data[0]["owner"]["name"] == "Jane Walker"
        assert data[0]["bookings"] == []
        assert len(data[0]["vaccinations"]) == 1

    def test_get_and_delete_canine(self, client, db, canine, auth_headers):
        assert client.get(f"/canines/{canine.id}", headers=auth_headers).json()["name"] == "Rex"

        response = client.delete(f"/canines/{canine.id}", headers=auth_headers)

        assert response.json() == {"count": 1}
        assert db.query(Vaccination).count() == 0
        assert client.get(f"/canines/{canine.id}", headers=auth_headers).status_code == 404
