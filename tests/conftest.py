from __future__ import annotations

import pathlib

import pytest


@pytest.fixture
def temp_root(tmp_path: pathlib.Path) -> pathlib.Path:
    temp_root = tmp_path / 'temp_root'
    temp_root.mkdir()
    return temp_root
