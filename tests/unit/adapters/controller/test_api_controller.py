"""
Tests for the HTTP API controller.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from wavechat.adapters.controller import APIController
from wavechat.adapters.storage import InMemoryKeyValueStore
from wavechat.core.exceptions import DatabaseServiceError


@pytest.fixture
def controller(make_service, quiet_logger, tmp_path):
    service = make_service(store=InMemoryKeyValueStore())
    return APIController(service=service, config_path=str(tmp_path / "missing.yaml"), logger=quiet_logger)


@pytest.fixture
def client(controller):
    asyncio.run(controller.initialize())
    return TestClient(controller.get_app())


def test_requires_initialization(controller):
    client = TestClient(controller.get_app())
    assert client.get("/conversations").status_code == 503


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["healthy"] is True


def test_conversations(client):
    response = client.get("/conversations")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == ["1", "2", "3", "4", "5"]

    response = client.post("/conversations", json={"name": "Alex"})
    assert response.status_code == 201
    created = response.json()
    assert created["participantName"] == "Alex"
    assert client.get("/conversations").json()[0]["id"] == created["id"]


def test_create_conversation_validation(client):
    assert client.post("/conversations", json={"name": ""}).status_code == 422
    assert client.post("/conversations", json={}).status_code == 422


def test_messages(client):
    response = client.get("/conversations/1/messages")
    assert response.status_code == 200
    assert len(response.json()) == 6

    assert client.get("/conversations/unknown/messages").status_code == 404



def test_conversation_routes_skip_list_delay(client, controller, monkeypatch):
    async def listing_not_allowed():
        raise AssertionError("conversation list fetched for an existence check")

    monkeypatch.setattr(controller.service, "get_conversations", listing_not_allowed)

    assert client.get("/conversations/1/messages").status_code == 200
    assert client.post("/conversations/1/read").status_code == 200
    assert client.post("/conversations/1/messages", json={"text": "Hi"}).status_code == 201
    assert client.get("/conversations/unknown/messages").status_code == 404


def test_send_message(client):
    response = client.post("/conversations/2/messages", json={"text": "See you there"})
    assert response.status_code == 201
    assert response.json()["text"] == "See you there"

    conversations = client.get("/conversations").json()
    assert conversations[1]["lastMessage"] == "See you there"

    assert client.post("/conversations/2/messages", json={"text": ""}).status_code == 422
    assert client.post("/conversations/unknown/messages", json={"text": "Hi"}).status_code == 404


def test_mark_read(client):
    response = client.post("/conversations/1/read")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/conversations").json()[0]["unreadCount"] == 0

    assert client.post("/conversations/unknown/read").status_code == 404


def test_update_tags(client):
    response = client.put("/messages/103/tags", json={"tags": ["Decision"]})
    assert response.status_code == 200
    assert response.json() == {"success": True, "tags": ["Decision"]}

    assert client.put("/messages/unknown/tags", json={"tags": []}).status_code == 404
    assert client.put("/messages/103/tags", json={"tags": "Decision"}).status_code == 422


def test_delete_message(client):
    assert client.delete("/messages/101").status_code == 200
    assert client.delete("/messages/101").status_code == 404


def test_reactions(client):
    response = client.post("/messages/106/reactions", json={"emoji": "👍", "timestamp": 1.5, "username": "You"})
    assert response.status_code == 201

    reactions = client.get("/messages/106/reactions").json()
    assert reactions[-1]["emoji"] == "👍"
    assert reactions[-1]["timestamp"] == 1.5

    assert client.post("/messages/106/reactions", json={"timestamp": 1.5}).status_code == 422
    assert client.post("/messages/106/reactions", json={"emoji": "👍", "timestamp": -2}).status_code == 422


def test_replies(client):
    response = client.post("/messages/305/replies", json={"text": "Thanks!", "timestamp": 3})
    assert response.status_code == 201

    replies = client.get("/messages/305/replies").json()
    assert [r["text"] for r in replies] == ["Great solution, I'll implement it today", "Thanks!"]
    assert client.get("/messages/unknown/replies").json() == []


def test_transcript(client):
    response = client.get("/messages/103/transcript")
    assert response.status_code == 200
    assert len(response.json()["segments"]) == 3


def test_service_errors_return_500(client, controller, monkeypatch):
    async def failing():
        raise DatabaseServiceError("store unavailable")

    monkeypatch.setattr(controller.service, "get_conversations", failing)

    response = client.get("/conversations")
    assert response.status_code == 500
    assert response.json()["detail"] == "store unavailable"
