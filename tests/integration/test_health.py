"""Integration tests for health and root endpoints."""

from fastapi import status

import config


def test_health_check(client):
    response = client.get("/api/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": "ok",
        "env": config.settings.ENV,
        "store": "ready",
    }


def test_root(client):
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["message"] == config.settings.APP_NAME
    assert response.json()["version"] == "0.1.0"


def test_unknown_path_is_404(client):
    assert client.get("/api/unknown").status_code == status.HTTP_404_NOT_FOUND
