"""Shared pytest fixtures."""

import os

import pytest

from formfor.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop FORMFOR_* variables and the cached settings around each test."""
    for key in list(os.environ):
        if key.startswith("FORMFOR_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML document to a temporary file and return its path."""

    def _write(text: str, name: str = "formfor.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
