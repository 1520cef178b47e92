import os
import pytest


@pytest.fixture(autouse=True)
def _guard_cwd():
    """Fail-safe: restore cwd after every test."""
    original_cwd = os.getcwd()
    yield
    os.chdir(original_cwd)
