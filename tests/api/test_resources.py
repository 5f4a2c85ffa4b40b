"""API resource tests."""

from uuid import uuid4

from falcon.testing import TestClient

from convention_hub.domain.value_objects import Capability, CollaboratorRole

from tests.conftest import seed_collaborator, seed_convention, seed_edition


def as_user(user_id: str, admin: bool = False) -> dict[str, str]:
    """Headers read by the auth-bypass middleware."""
    headers = {"X-Test-User": user_id}
    if admin:
        headers["X-Test-Admin"] = "1"
    return headers


def _create_convention(client: TestClient, user_id: str = "u1") -> dict:
    result = client.simulate_post(
        "/v1/conventions", json={"name": "GeekCon"}, headers=as_user(user_id)
    )
    assert result.status_code == 201
    return result.json


class TestConventions:
    def test_create_requires_authentication(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/conventions", json={"name": "GeekCon"})
        assert result.status_code == 401
        assert result.json == {"error": "Unauthorized"}

    def test_create_and_read_capabilities(self, client: TestClient) -> None:
        convention = _create_convention(client)
        assert convention["author_id"] == "u1"

        result = client.simulate_get(
            f"/v1/conventions/{convention['id']}/capabilities", headers=as_user("u1")
        )
        assert result.status_code == 200
        assert result.json["resource"] == "convention"
        assert set(result.json["capabilities"]) == {c.value for c in Capability}

    def test_create_missing_name_is_400(self, client: TestClient) -> None:
        result = client.simulate_post("/v1/conventions", json={}, headers=as_user("u1"))
        assert result.status_code == 400

    def test_malformed_update_body_is_400(self, client: TestClient) -> None:
        convention = _create_convention(client)
        url = f"/v1/conventions/{convention['id']}"
        list_body = client.simulate_patch(url, json=[1], headers=as_user("u1"))
        assert list_body.status_code == 400
        assert list_body.json == {"error": "Request body must be a JSON object"}

        numeric_name = client.simulate_patch(url, json={"name": 5}, headers=as_user("u1"))
        assert numeric_name.status_code == 400
        assert numeric_name.json == {"error": "name must be a string"}

        numeric_create = client.simulate_post(
            "/v1/conventions", json={"name": 5}, headers=as_user("u1")
        )
        assert numeric_create.status_code == 400

        archive_list = client.simulate_post(f"{url}/archive", json=[True], headers=as_user("u1"))
        assert archive_list.status_code == 400

    def test_stranger_cannot_update(self, client: TestClient) -> None:
        convention = _create_convention(client)
        result = client.simulate_patch(
            f"/v1/conventions/{convention['id']}",
            json={"name": "Hijacked"},
            headers=as_user("u2"),
        )
        assert result.status_code == 403
        assert result.json == {"error": "Insufficient rights"}

    def test_global_admin_can_update(self, client: TestClient) -> None:
        convention = _create_convention(client)
        result = client.simulate_patch(
            f"/v1/conventions/{convention['id']}",
            json={"name": "Renamed"},
            headers=as_user("root", admin=True),
        )
        assert result.status_code == 200
        assert result.json["name"] == "Renamed"

    def test_get_unknown_and_malformed(self, client: TestClient) -> None:
        assert client.simulate_get(f"/v1/conventions/{uuid4()}", headers=as_user("u1")).status_code == 404
        assert client.simulate_get("/v1/conventions/not-a-uuid", headers=as_user("u1")).status_code == 400

    def test_delete_without_editions(self, client: TestClient) -> None:
        convention = _create_convention(client)
        result = client.simulate_delete(
            f"/v1/conventions/{convention['id']}", headers=as_user("u1")
        )
        assert result.status_code == 200
        assert result.json["outcome"] == "delete"
        assert client.simulate_get(
            f"/v1/conventions/{convention['id']}", headers=as_user("u1")
        ).status_code == 404

    def test_delete_with_editions_archives(self, client: TestClient, fake_uow) -> None:
        convention = seed_convention(fake_uow, "u1")
        seed_edition(fake_uow, convention)
        result = client.simulate_delete(f"/v1/conventions/{convention.id}", headers=as_user("u1"))
        assert result.status_code == 200
        assert result.json["outcome"] == "archive"
        assert result.json["convention"]["is_archived"] is True

    def test_archive_toggle(self, client: TestClient) -> None:
        convention = _create_convention(client)
        url = f"/v1/conventions/{convention['id']}/archive"
        archived = client.simulate_post(url, json={"archived": True}, headers=as_user("u1"))
        assert archived.json["is_archived"] is True
        restored = client.simulate_post(url, json={"archived": False}, headers=as_user("u1"))
        assert restored.json["is_archived"] is False
        bad = client.simulate_post(url, json={"archived": "yes"}, headers=as_user("u1"))
        assert bad.status_code == 400


class TestCollaborators:
    def test_grant_list_update_revoke(self, client: TestClient) -> None:
        convention = _create_convention(client)
        base = f"/v1/conventions/{convention['id']}/collaborators"

        granted = client.simulate_post(
            base, json={"user_id": "u2", "role": "MODERATOR"}, headers=as_user("u1")
        )
        assert granted.status_code == 201
        assert granted.json["rights"]["editConvention"] is True
        assert granted.json["rights"]["manageCollaborators"] is False

        listed = client.simulate_get(base, headers=as_user("u2"))
        assert listed.status_code == 200
        assert [c["user_id"] for c in listed.json["items"]] == ["u1", "u2"]

        collaborator_url = f"{base}/{granted.json['id']}"
        updated = client.simulate_patch(
            collaborator_url, json={"rights": {"deleteConvention": True}}, headers=as_user("u1")
        )
        assert updated.status_code == 200
        assert updated.json["rights"]["deleteConvention"] is True

        revoked = client.simulate_delete(collaborator_url, headers=as_user("u1"))
        assert revoked.status_code == 204

        history = client.simulate_get(
            f"/v1/conventions/{convention['id']}/history", headers=as_user("u1")
        )
        assert [e["change_type"] for e in history.json["items"]] == [
            "REVOKED",
            "ROLE_CHANGED",
            "GRANTED",
            "GRANTED",
        ]

    def test_unknown_role_or_capability_is_400(self, client: TestClient) -> None:
        convention = _create_convention(client)
        base = f"/v1/conventions/{convention['id']}/collaborators"
        bad_role = client.simulate_post(
            base, json={"user_id": "u2", "role": "OWNER"}, headers=as_user("u1")
        )
        assert bad_role.status_code == 400
        bad_right = client.simulate_post(
            base, json={"user_id": "u2", "rights": {"fly": True}}, headers=as_user("u1")
        )
        assert bad_right.status_code == 400
        assert "fly" in bad_right.json["error"]

    def test_malformed_rights_fields_are_400(self, client: TestClient) -> None:
        convention = _create_convention(client)
        base = f"/v1/conventions/{convention['id']}/collaborators"
        rights_list = client.simulate_post(
            base, json={"user_id": "u2", "rights": ["editConvention"]}, headers=as_user("u1")
        )
        assert rights_list.status_code == 400
        assert rights_list.json == {"error": "rights must be an object"}

        numeric_edition = client.simulate_post(
            base,
            json={"user_id": "u2", "per_edition": [{"edition_id": 5, "can_edit": True}]},
            headers=as_user("u1"),
        )
        assert numeric_edition.status_code == 400

        not_an_object = client.simulate_post(base, json=["u2"], headers=as_user("u1"))
        assert not_an_object.status_code == 400

    def test_duplicate_grant_is_409(self, client: TestClient) -> None:
        convention = _create_convention(client)
        base = f"/v1/conventions/{convention['id']}/collaborators"
        client.simulate_post(base, json={"user_id": "u2"}, headers=as_user("u1"))
        again = client.simulate_post(base, json={"user_id": "u2"}, headers=as_user("u1"))
        assert again.status_code == 409

    def test_moderator_cannot_grant(self, client: TestClient, fake_uow) -> None:
        convention = seed_convention(fake_uow, "u1")
        seed_collaborator(fake_uow, convention, "mod", CollaboratorRole.MODERATOR.capabilities)
        result = client.simulate_post(
            f"/v1/conventions/{convention.id}/collaborators",
            json={"user_id": "u3", "role": "ADMINISTRATOR"},
            headers=as_user("mod"),
        )
        assert result.status_code == 403

    def test_history_hidden_from_strangers(self, client: TestClient) -> None:
        convention = _create_convention(client)
        result = client.simulate_get(
            f"/v1/conventions/{convention['id']}/history", headers=as_user("stranger")
        )
        assert result.status_code == 403


class TestEditions:
    def test_edition_creator_capabilities(self, client: TestClient, fake_uow) -> None:
        convention = seed_convention(fake_uow, "u1")
        edition = seed_edition(fake_uow, convention, creator_id="u3")
        result = client.simulate_get(f"/v1/editions/{edition.id}/capabilities", headers=as_user("u3"))
        assert result.status_code == 200
        assert result.json["capabilities"] == ["deleteAllEditions", "editAllEditions"]

    def test_create_update_delete(self, client: TestClient) -> None:
        convention = _create_convention(client)
        created = client.simulate_post(
            f"/v1/conventions/{convention['id']}/editions",
            json={"name": "2027", "start_date": "2027-05-01", "end_date": "2027-05-03"},
            headers=as_user("u1"),
        )
        assert created.status_code == 201
        assert created.json["start_date"] == "2027-05-01"

        url = f"/v1/editions/{created.json['id']}"
        patched = client.simulate_patch(url, json={"name": "2027 Spring"}, headers=as_user("u1"))
        assert patched.json["name"] == "2027 Spring"
        assert client.simulate_patch(url, json={"name": "x"}, headers=as_user("u2")).status_code == 403
        assert client.simulate_delete(url, headers=as_user("u1")).status_code == 204

    def test_bad_date_is_400(self, client: TestClient) -> None:
        convention = _create_convention(client)
        result = client.simulate_post(
            f"/v1/conventions/{convention['id']}/editions",
            json={"name": "2027", "start_date": "May 1st"},
            headers=as_user("u1"),
        )
        assert result.status_code == 400

    def test_null_date_clears_it(self, client: TestClient) -> None:
        convention = _create_convention(client)
        created = client.simulate_post(
            f"/v1/conventions/{convention['id']}/editions",
            json={"name": "2027", "start_date": "2027-05-01", "end_date": "2027-05-03"},
            headers=as_user("u1"),
        )
        url = f"/v1/editions/{created.json['id']}"

        renamed = client.simulate_patch(url, json={"name": "2027 Spring"}, headers=as_user("u1"))
        assert renamed.json["end_date"] == "2027-05-03"

        cleared = client.simulate_patch(url, json={"end_date": None}, headers=as_user("u1"))
        assert cleared.status_code == 200
        assert cleared.json["start_date"] == "2027-05-01"
        assert cleared.json["end_date"] is None

    def test_malformed_body_is_400(self, client: TestClient) -> None:
        convention = _create_convention(client)
        created = client.simulate_post(
            f"/v1/conventions/{convention['id']}/editions",
            json={"name": "2027"},
            headers=as_user("u1"),
        )
        url = f"/v1/editions/{created.json['id']}"
        assert client.simulate_patch(url, json=[1], headers=as_user("u1")).status_code == 400
        assert client.simulate_patch(url, json={"name": 5}, headers=as_user("u1")).status_code == 400
        assert (
            client.simulate_patch(url, json={"start_date": 20270501}, headers=as_user("u1")).status_code
            == 400
        )
        numeric_name = client.simulate_post(
            f"/v1/conventions/{convention['id']}/editions",
            json={"name": 2027},
            headers=as_user("u1"),
        )
        assert numeric_name.status_code == 400

    def test_archived_convention_rejects_edition(self, client: TestClient, fake_uow) -> None:
        convention = seed_convention(fake_uow, "u1", is_archived=True)
        result = client.simulate_post(
            f"/v1/conventions/{convention.id}/editions", json={"name": "2027"}, headers=as_user("u1")
        )
        assert result.status_code == 409


def test_invariant_violation_is_500(client: TestClient, fake_uow) -> None:
    convention = seed_convention(fake_uow, "u1", with_creator=False)
    result = client.simulate_get(
        f"/v1/conventions/{convention.id}/capabilities", headers=as_user("stranger")
    )
    assert result.status_code == 500
    assert result.json == {"title": "500 Internal Server Error"}
