import shutil

import pytest


@pytest.fixture(scope="session")
def tesseract_installed() -> None:
    if shutil.which("tesseract") is None:
        pytest.skip("tesseract binary not available on PATH")
