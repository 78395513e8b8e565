"""Shared fixtures and path setup for the test suite."""

import sys
from pathlib import Path

import pytest

# Modules live flat at the repository root, next to app.py
_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT))


@pytest.fixture
def registry():
    from lokasi_registry import get_registry
    return get_registry()


@pytest.fixture
def student():
    return {"ID_Murid": "1001", "Nama_Murid": "Ani Purnamasari", "Kelas": "Kelas 3A"}
