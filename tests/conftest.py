"""Pytest configuration for datavalidator tests."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from datavalidator.parser import clear_cache  # noqa: E402


@dataclass
class Address:
    street: str = field(metadata={"validate": "min:3;max:50"})
    zip: str = field(metadata={"validate": "len:5"})


@dataclass
class Account:
    login: str = field(metadata={"validate": "min:3;max:12"})
    age: int = field(metadata={"validate": "min:18;max:65"})
    role: str = field(metadata={"validate": "in:admin,staff,guest"})
    level: int = field(metadata={"validate": "in:1,2,3"})
    home: Address
    tags: list[str] = field(default_factory=list, metadata={"validate": "max:4"})
    scores: tuple[int, ...] = field(default=(), metadata={"validate": "min:0;max:100"})
    nickname: Optional[str] = field(default=None, metadata={"validate": "len:4"})
    note: str = ""


@pytest.fixture
def valid_account():
    """An Account satisfying every annotation."""
    return Account(
        login="alice",
        age=30,
        role="staff",
        level=2,
        home=Address(street="Main street", zip="12345"),
        tags=["a", "bb"],
        scores=(0, 55, 100),
        nickname="ally",
    )


@pytest.fixture(autouse=True)
def fresh_parse_cache():
    """Start every test with an empty parse cache."""
    clear_cache()
    yield
    clear_cache()
