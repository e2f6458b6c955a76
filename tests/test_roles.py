"""Tests for role change requests"""

import asyncio

import pytest

from daycare.domain.roles.service import RoleRequestService
from daycare.models import Notification, NotificationReadState, RoleRequest


@pytest.fixture
def role_request(client, admin, auth_headers):
    response = client.post(
        "/roles/requests",
        json={"requestedRole": "ADMIN", "reason": "I run the front desk"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


class TestSubmitRoleRequest:
    def test_creates_request_notification_and_admin_read_state(
        self, client, db, user, admin, role_request, admin_headers
    ):
        assert role_request["status"] == "PENDING"
        assert role_request["userId"] == user.id

        notification = db.query(Notification).one()
        assert notification.type == "ROLE_REQUEST"
        assert notification.request_id == role_request["id"]
        assert notification.extra == {"reason": "I run the front desk"}
        assert notification.title == "Role Change Request by Test User"

        states = db.query(NotificationReadState).all()
        assert [(s.user_id, s.read) for s in states] == [(admin.id, False)]

        assert client.get("/notifications/unread-count", headers=admin_headers).json() == {
            "unreadCount": 1
        }

    def test_blank_reason_rejected(self, client, db, auth_headers):
        response = client.post(
            "/roles/requests", json={"requestedRole": "ADMIN", "reason": "  "}, headers=auth_headers
        )

        assert response.status_code == 400
        assert db.query(RoleRequest).count() == 0

    def test_unknown_role_rejected(self, client, auth_headers):
        response = client.post(
            "/roles/requests", json={"requestedRole": "OWNER", "reason": "why not"}, headers=auth_headers
        )

        assert response.status_code == 400


class TestDecideRoleRequest:
    def test_accept_grants_role_and_emails_requester(
        self, client, db, user, role_request, admin_headers, sent_emails
    ):
        response = client.patch(f"/roles/{role_request['id']}/accept", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Role request accepted"}

        db.refresh(user)
        assert user.role == "ADMIN"

        stored = db.query(RoleRequest).one()
        assert stored.status == "ACCEPTED"
        assert stored.approved_at is not None
        assert db.query(Notification).one().handled_at is not None
        assert sent_emails == [("accepted", "staff@example.com", "ADMIN")]

    def test_reject_leaves_role_unchanged(
        self, client, db, user, admin, role_request, admin_headers, sent_emails
    ):
        response = client.patch(f"/roles/{role_request['id']}/reject", headers=admin_headers)

        assert response.status_code == 200
        db.refresh(user)
        assert user.role == "USER"

        stored = db.query(RoleRequest).one()
        assert stored.status == "REJECTED"
        assert stored.rejected_at is not None
        assert stored.handled_by_id == admin.id
        assert db.query(Notification).one().handled_by_id == admin.id
        assert sent_emails == [("rejected", "staff@example.com", "ADMIN")]

    def test_non_admin_cannot_decide(self, client, db, role_request, auth_headers, sent_emails):
        response = client.patch(f"/roles/{role_request['id']}/accept", headers=auth_headers)

        assert response.status_code == 401
        assert db.query(RoleRequest).one().status == "PENDING"
        assert sent_emails == []

    def test_unknown_request_returns_404(self, client, admin_headers, sent_emails):
        response = client.patch("/roles/missing/accept", headers=admin_headers)

        assert response.status_code == 404

    def test_email_failure_does_not_fail_decision(
        self, client, db, user, role_request, admin_headers, monkeypatch
    ):
        async def broken_send(to, role):
            raise RuntimeError("Resend unavailable")

        monkeypatch.setattr("daycare.domain.roles.service.send_role_accepted_email", broken_send)

        response = client.patch(f"/roles/{role_request['id']}/accept", headers=admin_headers)

        assert response.status_code == 200
        db.refresh(user)
        assert user.role == "ADMIN"


class TestDecisionAtomicity:
    def test_accept_commits_decision_and_role_together(
        self, db, user, admin, role_request, sent_emails, monkeypatch
    ):
        commits = []
        real_commit = db.commit

        def counting_commit():
            commits.append(True)
            real_commit()

        monkeypatch.setattr(db, "commit", counting_commit)

        asyncio.run(RoleRequestService(db).accept_request(role_request["id"], admin))

        assert len(commits) == 1
        db.refresh(user)
        assert user.role == "ADMIN"
        assert db.query(RoleRequest).one().status == "ACCEPTED"
