"""HTTP tests for the roast API - roaster injected, no internet."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from threadroast import Roaster, RoastConfig, __version__
from threadroast.api import app, get_roaster


NASA_ITEM = {"bio": "Space agency", "posts": [{"text": "We launched a rocket"}]}


@pytest.fixture
def providers():
    """Mocked scrape and completion providers."""
    scraper = MagicMock()
    scraper.fetch_items = AsyncMock(return_value=[NASA_ITEM])
    writer = MagicMock()
    writer.complete = AsyncMock(return_value="Nice rocket, still can't find funding.")
    return scraper, writer


@pytest.fixture
def client(providers):
    """TestClient with the roaster dependency overridden."""
    scraper, writer = providers
    roaster = Roaster(RoastConfig(), scraper=scraper, writer=writer)
    app.dependency_overrides[get_roaster] = lambda: roaster
    # Not entered as a context manager, so the lifespan never builds real clients
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRoastEndpoint:
    """POST /api/roast status and body mapping."""

    def test_success(self, client, providers):
        response = client.post("/api/roast", json={"accountName": "nasa"})

        assert response.status_code == 200
        assert response.json() == {"roast": "Nice rocket, still can't find funding."}

    def test_empty_account_name(self, client, providers):
        scraper, writer = providers
        response = client.post("/api/roast", json={"accountName": ""})

        assert response.status_code == 400
        assert response.json() == {"message": "Account name is required"}
        scraper.fetch_items.assert_not_awaited()
        writer.complete.assert_not_awaited()

    def test_missing_account_name(self, client):
        response = client.post("/api/roast", json={})

        assert response.status_code == 400
        assert response.json() == {"message": "Account name is required"}

    def test_padded_account_name_kept(self, client, providers):
        scraper, writer = providers
        response = client.post("/api/roast", json={"accountName": " nasa "})

        assert response.status_code == 200
        scraper.fetch_items.assert_awaited_once_with(" nasa ")
        assert 'account " nasa "' in writer.complete.await_args.args[0]

    def test_snake_case_key_not_accepted(self, client, providers):
        scraper, _ = providers
        response = client.post("/api/roast", json={"account_name": "nasa"})

        assert response.status_code == 400
        assert response.json() == {"message": "Account name is required"}
        scraper.fetch_items.assert_not_awaited()

    @pytest.mark.parametrize("value", [123, True, ["nasa"]])
    def test_non_string_account_name(self, client, providers, value):
        scraper, _ = providers
        response = client.post("/api/roast", json={"accountName": value})

        assert response.status_code == 400
        assert response.json() == {"message": "Account name is required"}
        scraper.fetch_items.assert_not_awaited()

    def test_unparsable_body(self, client, providers):
        scraper, _ = providers
        response = client.post(
            "/api/roast",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Account name is required"}
        scraper.fetch_items.assert_not_awaited()

    def test_not_found(self, client, providers):
        scraper, writer = providers
        scraper.fetch_items.return_value = []

        response = client.post("/api/roast", json={"accountName": "ghost"})

        assert response.status_code == 404
        assert response.json() == {"message": "No data found for this account."}
        writer.complete.assert_not_awaited()

    def test_shape_mismatch(self, client, providers):
        scraper, writer = providers
        scraper.fetch_items.return_value = [{"bio": "B", "posts": [{"caption": "P1"}]}]

        response = client.post("/api/roast", json={"accountName": "drift"})

        assert response.status_code == 500
        assert response.json() == {"message": "Invalid data structure returned by the scraper."}
        writer.complete.assert_not_awaited()

    def test_provider_failure(self, client, providers):
        _, writer = providers
        writer.complete.side_effect = RuntimeError("upstream 502: secret detail")

        response = client.post("/api/roast", json={"accountName": "nasa"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to generate roast"}
        assert "secret" not in response.text


class TestSystemEndpoints:
    """Health and config endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__

    def test_config_hides_credentials(self, client, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-should-not-leak")

        response = client.get("/api/config")

        assert response.status_code == 200
        body = response.json()
        assert body["actor_id"] == "curious_coder/threads-scraper"
        assert "sk-should-not-leak" not in response.text
