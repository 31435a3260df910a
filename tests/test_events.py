"""Tests for Event CRUD and ownership.

Covers:
- Event create (with and without invitations)
- Owner-only read / update / delete
- Delete cascades to invitations and reminders
- List only returns the caller's events, soonest first
"""
from datetime import datetime, timedelta, timezone

from planner.models.invitation import EventInvitation
from planner.models.reminder import EventReminder
from tests.conftest import register_user, create_test_contact, create_test_event


def _setup(client):
    """Create an owner, a second user and one event owned by the first."""
    owner = register_user(client, username="owner")
    other = register_user(client, username="other")
    event = create_test_event(client, owner["headers"], name="Dinner").json()["event"]
    return owner, other, event


class TestEventCreate:

    def test_create_event(self, client):
        owner = register_user(client)
        resp = create_test_event(client, owner["headers"], name="Dinner")
        assert resp.status_code == 201
        event = resp.json()["event"]
        assert event["name"] == "Dinner"
        assert event["address"] == "1 Main St"
        assert event["user_id"] == owner["user_id"]

    def test_missing_fields(self, client):
        owner = register_user(client)
        resp = client.post("/api/events/", json={"name": "Dinner"}, headers=owner["headers"])
        assert resp.status_code == 422

    def test_blank_name(self, client):
        owner = register_user(client)
        resp = client.post("/api/events/", json={
            "name": "", "address": "x", "time": "2030-01-01T18:00:00Z",
        }, headers=owner["headers"])
        assert resp.status_code == 422

    def test_time_normalized_to_utc(self, client):
        owner = register_user(client)
        resp = client.post("/api/events/", json={
            "name": "Brunch", "address": "Cafe", "time": "2030-05-01T10:00:00+02:00",
        }, headers=owner["headers"])
        assert resp.status_code == 201
        event = resp.json()["event"]
        stored = datetime.fromisoformat(event["time"].replace("Z", "+00:00"))
        assert stored.utcoffset() == timedelta(0)
        assert stored == datetime(2030, 5, 1, 8, 0, tzinfo=timezone.utc)
        assert datetime.fromisoformat(event["created_at"].replace("Z", "+00:00")).tzinfo is not None


class TestEventRead:

    def test_get_event(self, client):
        owner, _, event = _setup(client)
        resp = client.get(f"/api/events/{event['event_id']}", headers=owner["headers"])
        assert resp.status_code == 200
        assert resp.json()["name"] == "Dinner"

    def test_get_missing(self, client):
        owner, _, _ = _setup(client)
        assert client.get("/api/events/nope", headers=owner["headers"]).status_code == 404

    def test_get_other_users_event(self, client):
        _, other, event = _setup(client)
        resp = client.get(f"/api/events/{event['event_id']}", headers=other["headers"])
        assert resp.status_code == 403

    def test_list_mine_sorted(self, client):
        owner, other, _ = _setup(client)
        create_test_event(client, owner["headers"], name="Soon", hours_from_now=2)
        create_test_event(client, other["headers"], name="Theirs")

        resp = client.get("/api/events/", headers=owner["headers"])
        assert [e["name"] for e in resp.json()] == ["Soon", "Dinner"]

    def test_requires_auth(self, client):
        assert client.get("/api/events/").status_code == 401
        resp = client.get("/api/events/", headers={"Authorization": "Bearer not-a-token"})
        assert resp.status_code == 401


class TestEventUpdate:

    def test_update_fields(self, client):
        owner, _, event = _setup(client)
        resp = client.put(f"/api/events/{event['event_id']}", json={"name": "Late Dinner"},
                          headers=owner["headers"])
        assert resp.status_code == 200
        assert resp.json()["name"] == "Late Dinner"
        assert resp.json()["address"] == "1 Main St"

    def test_update_time(self, client):
        owner, _, event = _setup(client)
        new_time = (datetime.now(timezone.utc) + timedelta(days=90)).replace(microsecond=0)
        resp = client.put(f"/api/events/{event['event_id']}", json={"time": new_time.isoformat()},
                          headers=owner["headers"])
        assert resp.status_code == 200
        stored = datetime.fromisoformat(resp.json()["time"].replace("Z", "+00:00"))
        assert stored == new_time

    def test_update_by_non_owner(self, client):
        _, other, event = _setup(client)
        resp = client.put(f"/api/events/{event['event_id']}", json={"name": "Hijacked"},
                          headers=other["headers"])
        assert resp.status_code == 403


class TestEventDelete:

    def test_delete_cascades(self, client, db):
        owner, _, _ = _setup(client)
        contact = create_test_contact(client, owner["headers"])
        event = create_test_event(client, owner["headers"], contact_ids=[contact["contact_id"]]).json()["event"]
        client.post(f"/api/events/{event['event_id']}/reminders", json={"auto_create": True},
                    headers=owner["headers"])

        resp = client.delete(f"/api/events/{event['event_id']}", headers=owner["headers"])
        assert resp.status_code == 204
        assert client.get(f"/api/events/{event['event_id']}", headers=owner["headers"]).status_code == 404

        assert db.query(EventInvitation).filter(EventInvitation.event_id == event["event_id"]).count() == 0
        assert db.query(EventReminder).filter(EventReminder.event_id == event["event_id"]).count() == 0
        # The contact itself survives
        assert client.get(f"/api/contacts/{contact['contact_id']}", headers=owner["headers"]).status_code == 200

    def test_delete_by_non_owner(self, client):
        owner, other, event = _setup(client)
        resp = client.delete(f"/api/events/{event['event_id']}", headers=other["headers"])
        assert resp.status_code == 403
        assert client.get(f"/api/events/{event['event_id']}", headers=owner["headers"]).status_code == 200
