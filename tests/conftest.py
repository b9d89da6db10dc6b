from __future__ import annotations

import json

import pytest


@pytest.fixture
def tmp_data(tmp_path):
    """Temporary data directory for test outputs."""
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture
def people_file(tmp_data):
    """A small people registry on disk."""
    path = tmp_data / "people.json"
    path.write_text(json.dumps({
        "people": [
            {"id": 1, "name": "Ada Lovelace", "slug": "ada-lovelace"},
            {"id": "grace@example.com", "name": "Grace Hopper", "slug": "grace-hopper"},
            {"id": 3, "initials": "30", "name": "30MPC", "slug": "30mpc"},
            {"id": 4, "name": "", "slug": "nameless"},
        ]
    }))
    return path
