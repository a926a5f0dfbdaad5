"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import Dict, Any

from lingocards.logger import reset_logger
from lingocards.schema import WordItem


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test gets its own global logger instance."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def valid_word() -> Dict[str, Any]:
    """Valid word record."""
    return {
        "id": "001",
        "word": "sit",
        "translation": "座る",
        "example": "The cat sat on the mat.",
        "notes": "Past tense: sat",
    }


@pytest.fixture
def invalid_word() -> Dict[str, Any]:
    """Invalid word record (missing translation)."""
    return {
        "id": "002",
        "word": "run",
    }


@pytest.fixture
def cat_item() -> WordItem:
    return WordItem(
        id="001",
        word="sit",
        translation="座る",
        example="The cat sat on the mat.",
    )


@pytest.fixture
def words_file(tmp_path, valid_word) -> Path:
    """Word list with two valid records."""
    path = tmp_path / "words.json"
    data = [
        valid_word,
        {"id": "003", "word": "apple", "translation": "りんご"},
    ]
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def mixed_words_file(tmp_path, valid_word, invalid_word) -> Path:
    """Word list wrapped in an object, with one bad record."""
    path = tmp_path / "mixed.json"
    path.write_text(
        json.dumps({"words": [valid_word, invalid_word]}, ensure_ascii=False),
        encoding="utf-8",
    )
    return path
