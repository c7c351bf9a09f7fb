from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import config
from main import app


def _write_test_config(config_path: Path) -> None:
    config_path.write_text(
        "\n".join(
            [
                "[server]",
                "host = \"127.0.0.1\"",
                "port = 8000",
                "",
                "[logging]",
                "level = \"WARNING\"",
                "",
                "[ratings]",
                "default_elo = 1200",
                "recent_window = 10",
                "",
                "[engine]",
                "depth = 15",
            ]
        ),
        encoding="utf-8",
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / ".chesstrack"
    config_dir.mkdir()
    config_path = config_dir / "config.toml"
    _write_test_config(config_path)
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_path)
    return config_path


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user(client):
    response = client.post("/api/user", json={"username": "magnus"})
    assert response.status_code == 200
    return response.json()
