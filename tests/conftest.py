from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def lao_text() -> str:
    return (FIXTURES / "lao.txt,v").read_text(encoding="utf-8")


@pytest.fixture
def shopping_text() -> str:
    return (FIXTURES / "shopping.txt,v").read_text(encoding="utf-8")
