from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from src.shared.env import load_secret_file_variables


def test_secret_file_fills_missing_variable(tmp_path: Path) -> None:
    secret_file = tmp_path / "mongo_uri"
    secret_file.write_text("mongodb://user:pw@mongo:27017\n", encoding="utf-8")
    environ = {"DB_MONGO_URI_FILE": str(secret_file)}

    resolved = load_secret_file_variables(environ)

    assert environ["DB_MONGO_URI"] == "mongodb://user:pw@mongo:27017"
    assert resolved == {"DB_MONGO_URI": "mongodb://user:pw@mongo:27017"}


def test_process_environment_is_the_default_target(tmp_path, monkeypatch) -> None:
    secret_file = tmp_path / "redis_url"
    secret_file.write_text("redis://:pw@cache:6379/0", encoding="utf-8")
    monkeypatch.setenv("HEALTH_REDIS_URL_FILE", str(secret_file))
    monkeypatch.setenv("HEALTH_REDIS_URL", "")

    load_secret_file_variables()

    assert os.environ["HEALTH_REDIS_URL"] == "redis://:pw@cache:6379/0"


def test_existing_values_and_empty_paths_are_left_alone() -> None:
    environ = {
        "SERVICE_TITLE": "present",
        "SERVICE_TITLE_FILE": "/tmp/ignored",
        "SERVICE_VERSION_FILE": "",
    }

    resolved = load_secret_file_variables(environ)

    assert resolved == {}
    assert environ["SERVICE_TITLE"] == "present"
    assert "SERVICE_VERSION" not in environ


def _missing(tmp_path: Path) -> str:
    return str(tmp_path / "absent")


def _binary(tmp_path: Path) -> str:
    path = tmp_path / "binary"
    path.write_bytes(b"\xff\xfe\xfd")
    return str(path)


def _directory(tmp_path: Path) -> str:
    return str(tmp_path)


@pytest.mark.parametrize(
    ("make_path", "event"),
    [
        (_missing, "env.secret_file.missing"),
        (_binary, "env.secret_file.decode_failed"),
        (_directory, "env.secret_file.load_failed"),
    ],
)
def test_unreadable_secret_files_are_logged_and_skipped(
    tmp_path, caplog, make_path, event
) -> None:
    environ = {"DB_MONGO_URI_FILE": make_path(tmp_path)}

    with caplog.at_level(logging.WARNING):
        resolved = load_secret_file_variables(environ)

    assert resolved == {}
    assert "DB_MONGO_URI" not in environ
    assert any(record.message == event for record in caplog.records)
