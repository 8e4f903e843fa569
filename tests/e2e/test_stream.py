"""End-to-end tests for the live gallery stream."""

import pytest
from fastapi.testclient import TestClient

from gallery.config import Settings
from gallery.interface.api.app import create_app
from tests.conftest import make_principal, sign_in
from tests.di import build_test_container


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def app_instance(settings):
    return create_app(build_test_container(settings=settings))


def _submit(client: TestClient, title: str) -> str:
    response = client.post(
        "/designs",
        data={"title": title},
        files={"image": (f"{title}.png", title.encode(), "image/png")},
    )
    return response.json()["design_id"]


class TestDesignStream:
    """End-to-end tests for /designs/stream."""

    def test_first_message_is_current_gallery(self, app_instance):
        """An empty gallery still gets an initial snapshot."""
        with TestClient(app_instance) as client:
            with client.websocket_connect("/designs/stream") as websocket:
                message = websocket.receive_json()

        assert message["version"] == 1
        assert message["designs"] == []
        assert message["top"] == []

    def test_votes_are_pushed(self, app_instance, settings):
        with TestClient(app_instance) as client:
            sign_in(client, make_principal(), settings)
            design_id = _submit(client, "Helmet-1")

            with client.websocket_connect("/designs/stream") as websocket:
                initial = websocket.receive_json()
                client.post(f"/designs/{design_id}/vote", json={"reaction": "like"})
                update = websocket.receive_json()

        assert initial["diff"]["added"] == [design_id]
        assert update["version"] == initial["version"] + 1
        assert update["diff"]["changed"] == [design_id]
        assert update["top"][0]["design_id"] == design_id
        assert update["top"][0]["score"] == 1

    def test_new_designs_are_pushed(self, app_instance, settings):
        with TestClient(app_instance) as client:
            sign_in(client, make_principal(), settings)

            with client.websocket_connect("/designs/stream") as websocket:
                websocket.receive_json()
                design_id = _submit(client, "Helmet-2")
                update = websocket.receive_json()

        assert update["diff"]["added"] == [design_id]
        assert [d["design_id"] for d in update["designs"]] == [design_id]
