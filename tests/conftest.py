"""Root test configuration: isolate tests from the caller's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any DOCSTORE_* env vars so settings always start from defaults."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name, raising=False)
