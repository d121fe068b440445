"""Tests for the clients and projects endpoints."""

from contracting import messages
from contracting.models import Project
from contracting.storage import EntityKind

from tests.fixtures.contracting import SAMPLE_CLIENT, project_body, statement_body


class TestRootAndHealth:

    def test_root_message(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json() == {"message": messages.API_RUNNING}

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == "contracting-api"
        assert "version" in data

    def test_unknown_route_has_message(self, client):
        resp = client.get("/api/nothing-here")
        assert resp.status_code == 404
        assert "message" in resp.json()


class TestClients:

    def test_create_assigns_sequential_ids(self, client):
        first = client.post("/api/clients", json=SAMPLE_CLIENT)
        second = client.post("/api/clients", json={"name": "Second"})
        assert first.status_code == 201
        assert first.json()["id"] == 1
        assert second.json()["id"] == 2
        assert first.json()["contactPerson"] == "Omar Hassan"

    def test_name_required(self, client, store):
        resp = client.post("/api/clients", json={"phone": "123"})
        assert resp.status_code == 400
        assert resp.json() == {"message": messages.CLIENT_NAME_REQUIRED}
        assert store.list(EntityKind.CLIENTS) == []

    def test_empty_name_rejected(self, client):
        assert client.post("/api/clients", json={"name": ""}).status_code == 400

    def test_list(self, client):
        client.post("/api/clients", json=SAMPLE_CLIENT)
        data = client.get("/api/clients").json()
        assert len(data) == 1
        assert data[0]["name"] == SAMPLE_CLIENT["name"]

    def test_no_update_or_delete(self, client, client_id):
        assert client.patch(f"/api/clients/{client_id}", json={"name": "Y"}).status_code in (404, 405)
        assert client.delete(f"/api/clients/{client_id}").status_code in (404, 405)


class TestCreateProject:

    def test_defaults(self, client, client_id):
        resp = client.post("/api/projects", json={"code": "P1", "name": "Proj", "clientId": client_id})
        assert resp.status_code == 201
        data = resp.json()
        assert data["id"] == 1
        assert data["status"] == "PLANNED"
        assert data["progress"] == 0
        assert data["clientId"] == client_id

    def test_duplicate_code_rejected(self, client, client_id, store):
        client.post("/api/projects", json={"code": "P1", "name": "Proj", "clientId": client_id})
        resp = client.post("/api/projects", json={"code": "P1", "name": "Dup", "clientId": client_id})
        assert resp.status_code == 400
        assert resp.json()["message"] == messages.PROJECT_CODE_TAKEN
        assert [p.name for p in store.list(EntityKind.PROJECTS)] == ["Proj"]
        assert store.next_id(EntityKind.PROJECTS) == 2

    def test_unknown_client_rejected(self, client, store):
        resp = client.post("/api/projects", json=project_body(client_id=99))
        assert resp.status_code == 400
        assert resp.json()["message"] == messages.CLIENT_NOT_FOUND
        assert store.list(EntityKind.PROJECTS) == []

    def test_missing_fields(self, client, client_id):
        resp = client.post("/api/projects", json={"name": "No code", "clientId": client_id})
        assert resp.status_code == 400
        assert resp.json()["message"] == messages.PROJECT_FIELDS_REQUIRED

    def test_progress_clamped_high(self, client, client_id):
        resp = client.post("/api/projects", json=project_body(client_id, progress=150))
        assert resp.json()["progress"] == 100

    def test_progress_clamped_low(self, client, client_id):
        resp = client.post("/api/projects", json=project_body(client_id, progress=-5))
        assert resp.json()["progress"] == 0

    def test_invalid_status(self, client, client_id):
        resp = client.post("/api/projects", json=project_body(client_id, status="DONE"))
        assert resp.status_code == 400
        assert resp.json()["message"].startswith(messages.INVALID_REQUEST)

    def test_client_id_must_be_integer(self, client, client_id, store):
        resp = client.post("/api/projects", json=project_body(str(client_id)))
        assert resp.status_code == 400
        assert store.list(EntityKind.PROJECTS) == []

    def test_progress_rounds_half_up(self, client, client_id):
        resp = client.post("/api/projects", json=project_body(client_id, progress=50.5))
        assert resp.json()["progress"] == 51


class TestReadProjects:

    def test_list_joins_client(self, client, client_id, project_id):
        data = client.get("/api/projects").json()
        assert data[0]["client"]["id"] == client_id
        assert data[0]["client"]["name"] == "X"

    def test_get_single(self, client, client_id, project_id):
        resp = client.get(f"/api/projects/{project_id}")
        assert resp.status_code == 200
        assert resp.json()["code"] == "P1"
        assert resp.json()["client"]["id"] == client_id

    def test_get_unknown(self, client):
        resp = client.get("/api/projects/42")
        assert resp.status_code == 404
        assert resp.json() == {"message": messages.PROJECT_NOT_FOUND}

    def test_get_non_numeric_id(self, client):
        assert client.get("/api/projects/abc").status_code == 404

    def test_orphaned_client_is_null(self, client, store):
        # Only reachable by writing to the store directly
        store.insert(EntityKind.PROJECTS, Project(code="ORPH", name="Orphan", client_id=77))
        data = client.get("/api/projects").json()
        assert data[0]["client"] is None
        assert client.get(f"/api/projects/{data[0]['id']}").json()["client"] is None


class TestUpdateProject:

    def test_partial_update(self, client, client_id):
        created = client.post("/api/projects", json=project_body(client_id, progress=20)).json()
        resp = client.patch(f"/api/projects/{created['id']}", json={"status": "IN_PROGRESS"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "IN_PROGRESS"
        for key in ("code", "name", "clientId", "progress", "budget", "location"):
            assert data[key] == created[key]

    def test_progress_clamped(self, client, project_id):
        assert client.patch(f"/api/projects/{project_id}", json={"progress": 150}).json()["progress"] == 100
        assert client.patch(f"/api/projects/{project_id}", json={"progress": -5}).json()["progress"] == 0

    def test_change_client_validated(self, client, project_id, client_id):
        resp = client.patch(f"/api/projects/{project_id}", json={"clientId": 999})
        assert resp.status_code == 400
        assert resp.json()["message"] == messages.CLIENT_NOT_FOUND
        assert client.get(f"/api/projects/{project_id}").json()["clientId"] == client_id

    def test_change_client(self, client, project_id):
        other = client.post("/api/clients", json={"name": "Other"}).json()["id"]
        resp = client.patch(f"/api/projects/{project_id}", json={"clientId": other})
        assert resp.json()["clientId"] == other

    def test_code_clash_with_other_project(self, client, client_id, project_id):
        client.post("/api/projects", json=project_body(client_id, code="P2"))
        resp = client.patch(f"/api/projects/{project_id}", json={"code": "P2"})
        assert resp.status_code == 400
        assert resp.json()["message"] == messages.PROJECT_CODE_TAKEN

    def test_keeping_own_code_is_fine(self, client, project_id):
        resp = client.patch(f"/api/projects/{project_id}", json={"code": "P1", "name": "Renamed"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Renamed"

    def test_null_clears_optional_field(self, client, client_id):
        created = client.post("/api/projects", json=project_body(client_id)).json()
        data = client.patch(f"/api/projects/{created['id']}", json={"location": None}).json()
        assert data["location"] is None
        assert data["budget"] == created["budget"]

    def test_null_ignored_for_required_field(self, client, project_id):
        data = client.patch(f"/api/projects/{project_id}", json={"name": None}).json()
        assert data["name"] == "Proj"

    def test_unknown_project(self, client):
        resp = client.patch("/api/projects/42", json={"name": "x"})
        assert resp.status_code == 404


class TestDeleteProject:

    def test_cascades_only_own_statements(self, client, client_id, project_id):
        other = client.post("/api/projects", json=project_body(client_id, code="P2")).json()["id"]
        client.post("/api/statements", json=statement_body(project_id, number="1"))
        client.post("/api/statements", json=statement_body(project_id, number="2"))
        kept = client.post("/api/statements", json=statement_body(other, number="3")).json()

        resp = client.delete(f"/api/projects/{project_id}")
        assert resp.status_code == 200
        assert resp.json()["id"] == project_id

        statements = client.get("/api/statements").json()
        assert [s["id"] for s in statements] == [kept["id"]]
        assert client.get(f"/api/projects/{project_id}").status_code == 404

    def test_employee_labels_untouched(self, client, project_id):
        client.post("/api/employees", json={
            "name": "W", "jobTitle": "J", "specialization": "S",
            "dailyWage": 100, "projectName": "Proj",
        })
        client.delete(f"/api/projects/{project_id}")
        assert client.get("/api/employees").json()[0]["projectName"] == "Proj"

    def test_unknown_project(self, client):
        resp = client.delete("/api/projects/42")
        assert resp.status_code == 404
        assert resp.json()["message"] == messages.PROJECT_NOT_FOUND
