"""End-to-end checks through the HTTP layer."""
from types import SimpleNamespace

import pytest

from app.core.config import settings

API = settings.API_V1_STR


@pytest.fixture
def ids(org):
    """Plain integer ids so tests never touch ORM state shared with the client"""
    return SimpleNamespace(
        it_approver=org.it_approver.id,
        lead=org.lead.id,
        alice=org.alice.id,
        bob=org.bob.id,
        loner=org.loner.id,
        manager=org.manager.id,
        it=org.it.id,
        engineering=org.engineering.id,
        team=org.team.id,
        platform=org.platform.id,
        billing=org.billing.id,
        laptop=org.laptop.id,
        monitor=org.monitor.id,
        phone=org.phone.id,
    )


def create_request(client, requester_id, asset_id, request_type="Employee"):
    return client.post(
        f"{API}/asset-requests/",
        json={"requester_id": requester_id, "asset_id": asset_id, "request_type": request_type},
    )


def decide(client, request_id, approver_id, level, status, remarks=None):
    return client.post(
        f"{API}/asset-requests/approvals",
        json={
            "request_id": request_id,
            "approver_id": approver_id,
            "approval_level": level,
            "approval_status": status,
            "remarks": remarks,
        },
    )


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


class TestAssetRequestEndpoints:

    def test_create_returns_201_with_id(self, client, ids):
        response = create_request(client, ids.alice, ids.laptop)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Asset request created successfully"
        assert isinstance(body["request_id"], int)

    def test_missing_field_is_400(self, client, ids):
        response = client.post(
            f"{API}/asset-requests/",
            json={"requester_id": ids.alice, "request_type": "Employee"},
        )

        assert response.status_code == 400
        assert "asset_id" in response.json()["error"]

    def test_unknown_request_type_is_400(self, client, ids):
        response = create_request(client, ids.alice, ids.laptop, request_type="Contractor")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_pending_is_not_a_decision(self, client, ids):
        request_id = create_request(client, ids.alice, ids.laptop).json()["request_id"]

        response = decide(client, request_id, ids.lead, "TeamLead", "Pending")

        assert response.status_code == 400

    def test_workflow_errors_render_as_error_body(self, client, ids):
        response = create_request(client, ids.alice, ids.phone)
        assert response.status_code == 400
        assert response.json() == {"error": "Asset out of stock"}

        response = create_request(client, ids.loner, ids.laptop)
        assert response.status_code == 400
        assert response.json() == {"error": "Employee must be assigned to a team"}

    def test_unknown_asset_is_404(self, client, ids):
        response = create_request(client, ids.alice, 9999)

        assert response.status_code == 404
        assert "error" in response.json()

    def test_full_employee_workflow(self, client, ids):
        request_id = create_request(client, ids.alice, ids.monitor).json()["request_id"]

        queue = client.get(f"{API}/asset-requests/pending-approvals", params={"approver_id": ids.it_approver})
        assert queue.json() == []

        response = decide(client, request_id, ids.lead, "TeamLead", "Approved", "go ahead")
        assert response.status_code == 200
        assert response.json() == {
            "message": "Approval updated",
            "request_id": request_id,
            "request_status": "Pending",
        }

        queue = client.get(f"{API}/asset-requests/pending-approvals", params={"approver_id": ids.it_approver})
        assert [(row["request_id"], row["approval_level"]) for row in queue.json()] == [
            (request_id, "IT")
        ]

        response = decide(client, request_id, ids.it_approver, "IT", "Approved")
        assert response.json() == {
            "message": "Approval updated and asset issued",
            "request_id": request_id,
            "request_status": "Issued",
        }

        asset = client.get(f"{API}/assets/{ids.monitor}").json()
        assert asset["quantity"] == 0

        gates = client.get(f"{API}/asset-requests/{request_id}/approvals").json()
        assert [(gate["approval_level"], gate["approval_status"]) for gate in gates] == [
            ("TeamLead", "Approved"),
            ("IT", "Approved"),
        ]

        owned = client.get(
            f"{API}/asset-requests/employee-assets",
            params={"employee_id": ids.alice, "status": "Issued"},
        ).json()
        assert [(row["request_id"], row["serial_number"]) for row in owned] == [
            (request_id, "SN-MONITOR-001")
        ]

        trail = client.get(f"{API}/audit-logs/request/{request_id}").json()
        assert [entry["action_type"] for entry in trail] == ["Request", "Approve", "Approve", "Issue"]

    def test_second_decision_on_gate_is_400(self, client, ids):
        request_id = create_request(client, ids.alice, ids.laptop).json()["request_id"]
        decide(client, request_id, ids.lead, "TeamLead", "Rejected")

        response = decide(client, request_id, ids.lead, "TeamLead", "Approved")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_manual_issue_of_pending_request_is_400(self, client, ids):
        request_id = create_request(client, ids.alice, ids.laptop).json()["request_id"]

        response = client.post(f"{API}/asset-requests/{request_id}/issue")

        assert response.status_code == 400

    def test_list_requests_by_status(self, client, ids):
        first = create_request(client, ids.alice, ids.laptop).json()["request_id"]
        second = create_request(client, ids.manager, ids.laptop, "Management").json()["request_id"]
        decide(client, second, ids.it_approver, "IT", "Rejected")

        pending = client.get(f"{API}/asset-requests/", params={"status": "Pending"}).json()
        rejected = client.get(f"{API}/asset-requests/", params={"status": "Rejected"}).json()

        assert [row["request_id"] for row in pending] == [first]
        assert [(row["request_id"], row["requester_name"]) for row in rejected] == [
            (second, "Mark Tester")
        ]


class TestAssetEndpoints:

    def test_create_and_filter(self, client):
        response = client.post(
            f"{API}/assets/",
            json={"asset_type": "Dock", "serial_number": "SN-DOCK-001", "quantity": 3},
        )
        assert response.status_code == 201
        assert response.json()["status"] == "Available"

        docks = client.get(f"{API}/assets/", params={"asset_type": "Dock"}).json()
        assert [asset["serial_number"] for asset in docks] == ["SN-DOCK-001"]

    def test_duplicate_serial_number(self, client, ids):
        response = client.post(
            f"{API}/assets/",
            json={"asset_type": "Laptop", "serial_number": "SN-LAPTOP-001"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Serial number already exists"}

    def test_negative_quantity_rejected(self, client, ids):
        response = client.put(f"{API}/assets/{ids.laptop}", json={"quantity": -1})

        assert response.status_code == 400

    @pytest.mark.parametrize("field", ["serial_number", "quantity", "asset_type", "status"])
    def test_null_for_required_column_is_400(self, client, ids, field):
        response = client.put(f"{API}/assets/{ids.laptop}", json={field: None})

        assert response.status_code == 400
        assert field in response.json()["error"]
        asset = client.get(f"{API}/assets/{ids.laptop}").json()
        assert asset["serial_number"] == "SN-LAPTOP-001"
        assert asset["quantity"] == 5

    def test_update_still_works_after_rejected_null(self, client, ids):
        client.put(f"{API}/assets/{ids.laptop}", json={"serial_number": None})

        response = client.put(f"{API}/assets/{ids.laptop}", json={"quantity": 7})

        assert response.status_code == 200
        assert response.json()["quantity"] == 7

    def test_restock(self, client, ids):
        response = client.put(f"{API}/assets/{ids.phone}", json={"quantity": 2})

        assert response.status_code == 200
        assert response.json()["quantity"] == 2
        assert create_request(client, ids.alice, ids.phone).status_code == 201

    def test_delete_unused_asset(self, client, ids):
        response = client.delete(f"{API}/assets/{ids.phone}")

        assert response.json() == {"message": "Asset deleted successfully"}
        assert client.get(f"{API}/assets/{ids.phone}").status_code == 404

    def test_delete_requested_asset_is_refused(self, client, ids):
        create_request(client, ids.alice, ids.laptop)

        response = client.delete(f"{API}/assets/{ids.laptop}")

        assert response.status_code == 400
        assert client.get(f"{API}/assets/{ids.laptop}").status_code == 200


class TestTeamEndpoints:

    def test_members_by_lead(self, client, ids):
        body = client.get(f"{API}/teams/lead/{ids.lead}/members").json()

        assert body["team"] == {"team_id": ids.team, "team_name": "Backend"}
        assert [member["employee_id"] for member in body["members"]] == [ids.alice, ids.bob]

    def test_onboard_employee_then_request(self, client, ids):
        assert create_request(client, ids.loner, ids.laptop).status_code == 400

        client.put(f"{API}/teams/employee-team", json={"employee_id": ids.loner, "team_id": ids.team})
        response = client.put(
            f"{API}/teams/employee-projects",
            json={"employee_id": ids.loner, "project_ids": [ids.platform]},
        )
        assert response.json() == {"message": "Employee projects updated successfully"}

        assert create_request(client, ids.loner, ids.laptop).status_code == 201

    def test_assign_lead(self, client, ids):
        response = client.put(f"{API}/teams/lead", json={"employee_id": ids.bob, "team_id": ids.team})

        assert response.status_code == 200
        members = client.get(f"{API}/teams/lead/{ids.bob}/members").json()["members"]
        assert [member["employee_id"] for member in members] == [ids.lead, ids.alice]


class TestDepartmentEndpoints:

    def test_create_and_list(self, client, ids):
        response = client.post(f"{API}/departments/", json={"name": "Finance", "code": "FIN"})

        assert response.status_code == 201
        assert response.json()["code"] == "FIN"
        names = [row["name"] for row in client.get(f"{API}/departments/").json()]
        assert names == ["Information Technology", "Management", "Engineering", "Finance"]

    def test_duplicate_name_or_code(self, client, ids):
        response = client.post(f"{API}/departments/", json={"name": "Management"})
        assert response.json() == {"error": "Department name already exists"}

        response = client.post(f"{API}/departments/", json={"name": "Infra", "code": "IT"})
        assert response.status_code == 400
        assert response.json() == {"error": "Department code already exists"}

    def test_rename(self, client, ids):
        response = client.put(f"{API}/departments/{ids.engineering}", json={"name": "R&D"})

        assert response.status_code == 200
        assert response.json()["name"] == "R&D"

    def test_delete_department_with_members_is_refused(self, client, ids):
        response = client.delete(f"{API}/departments/{ids.engineering}")

        assert response.status_code == 400
        assert response.json() == {"error": "Cannot delete department: it is still referenced"}
        assert client.get(f"{API}/departments/{ids.engineering}").status_code == 200

    def test_delete_empty_department(self, client):
        department_id = client.post(f"{API}/departments/", json={"name": "Finance"}).json()["id"]

        response = client.delete(f"{API}/departments/{department_id}")

        assert response.json() == {"message": "Department deleted successfully"}
        assert client.get(f"{API}/departments/{department_id}").status_code == 404


class TestProjectEndpoints:

    def test_create_and_get(self, client):
        response = client.post(
            f"{API}/projects/",
            json={"name": "Mobile", "start_date": "2026-01-01", "end_date": "2026-06-30"},
        )

        assert response.status_code == 201
        project = client.get(f"{API}/projects/{response.json()['id']}").json()
        assert (project["name"], project["end_date"]) == ("Mobile", "2026-06-30")

    def test_end_before_start_is_400(self, client):
        response = client.post(
            f"{API}/projects/",
            json={"name": "Mobile", "start_date": "2026-06-30", "end_date": "2026-01-01"},
        )

        assert response.status_code == 400

    def test_duplicate_name(self, client, ids):
        response = client.post(f"{API}/projects/", json={"name": "Platform"})

        assert response.status_code == 400
        assert response.json() == {"error": "Project name already exists"}

    def test_delete_drops_memberships(self, client, ids):
        response = client.delete(f"{API}/projects/{ids.billing}")

        assert response.json() == {"message": "Project deleted successfully"}
        assert client.get(f"{API}/employees/{ids.bob}").json()["project_ids"] == [ids.platform]


class TestEmployeeEndpoints:

    def new_employee(self, client, ids, **overrides):
        payload = {
            "first_name": "Omar",
            "last_name": "Tester",
            "email": "omar@example.com",
            "department_id": ids.engineering,
            "team_id": ids.team,
            "project_ids": [ids.platform],
        }
        payload.update(overrides)
        return client.post(f"{API}/employees/", json=payload)

    def test_new_hire_can_request_an_asset(self, client, ids):
        response = self.new_employee(client, ids)

        assert response.status_code == 201
        body = response.json()
        assert (body["full_name"], body["role"]) == ("Omar Tester", "Employee")
        assert (body["team_id"], body["project_ids"]) == (ids.team, [ids.platform])
        assert create_request(client, body["id"], ids.laptop).status_code == 201

    def test_duplicate_email(self, client, ids):
        response = self.new_employee(client, ids, email="alice@example.com")

        assert response.status_code == 400
        assert response.json() == {"error": "Employee with this email already exists"}

    def test_invalid_references(self, client, ids):
        assert self.new_employee(client, ids, department_id=9999).json() == {"error": "Invalid department"}
        assert self.new_employee(client, ids, team_id=9999).json() == {"error": "Invalid team"}
        assert self.new_employee(client, ids, project_ids=[9999]).json() == {
            "error": "One or more project IDs are invalid"
        }
        assert client.get(f"{API}/employees/", params={"limit": 500}).json()[-1]["first_name"] == "Mark"

    def test_malformed_email_is_400(self, client, ids):
        assert self.new_employee(client, ids, email="not-an-email").status_code == 400

    def test_list_is_paginated_by_id(self, client, ids):
        rows = client.get(f"{API}/employees/", params={"skip": 1, "limit": 2}).json()

        assert [row["first_name"] for row in rows] == ["Irene", "Laura"]

    def test_clearing_team_blocks_requests(self, client, ids):
        response = client.put(f"{API}/employees/{ids.alice}", json={"team_id": None, "designation": "SRE"})

        assert response.status_code == 200
        assert (response.json()["team_id"], response.json()["designation"]) == (None, "SRE")
        assert create_request(client, ids.alice, ids.laptop).json() == {
            "error": "Employee must be assigned to a team"
        }

    def test_update_replaces_projects(self, client, ids):
        response = client.put(f"{API}/employees/{ids.bob}", json={"project_ids": [ids.billing]})

        assert response.json()["project_ids"] == [ids.billing]
        assert response.json()["team_id"] == ids.team

    def test_null_email_is_400(self, client, ids):
        response = client.put(f"{API}/employees/{ids.alice}", json={"email": None})

        assert response.status_code == 400
        assert client.get(f"{API}/employees/{ids.alice}").json()["email"] == "alice@example.com"

    def test_delete_employee_without_history(self, client, ids):
        response = client.delete(f"{API}/employees/{ids.bob}")

        assert response.json() == {"message": "Employee deleted successfully"}
        members = client.get(f"{API}/teams/lead/{ids.lead}/members").json()["members"]
        assert [member["employee_id"] for member in members] == [ids.alice]

    def test_delete_employee_with_requests_is_refused(self, client, ids):
        create_request(client, ids.alice, ids.laptop)

        response = client.delete(f"{API}/employees/{ids.alice}")

        assert response.status_code == 400
        assert response.json() == {"error": "Cannot delete employee: it is still referenced"}
        assert client.get(f"{API}/employees/{ids.alice}").status_code == 200

    def test_unknown_employee_is_404(self, client):
        assert client.get(f"{API}/employees/9999").status_code == 404
        assert client.delete(f"{API}/employees/9999").status_code == 404
