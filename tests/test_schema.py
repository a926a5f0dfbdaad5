"""
Tests for word record validation and loading.
"""

import pytest
from lingocards.schema import validate_word, word_from_dict, load_words, search_words, WordItem


class TestValidateWord:
    """Test basic validation function."""

    def test_valid_word(self, valid_word):
        """Valid record should have no errors."""
        assert validate_word(valid_word) == []

    def test_missing_required_field(self, invalid_word):
        """Missing required field should error."""
        errors = validate_word(invalid_word)
        assert len(errors) == 1
        assert "translation" in errors[0]

    def test_empty_string_field(self):
        """Blank required field should error."""
        errors = validate_word({"id": "1", "word": "   ", "translation": "x"})
        assert any("word" in err for err in errors)

    def test_optional_fields(self):
        """Optional fields can be omitted or null."""
        assert validate_word({"id": "1", "word": "run", "translation": "走る"}) == []
        assert validate_word({"id": "1", "word": "run", "translation": "走る", "example": None}) == []

    def test_optional_field_wrong_type(self):
        errors = validate_word({"id": "1", "word": "run", "translation": "走る", "notes": 5})
        assert any("notes" in err for err in errors)

    def test_not_an_object(self):
        assert validate_word(["run"]) == ["Word record must be a JSON object"]


class TestWordFromDict:
    """Test building WordItem records."""

    def test_builds_item(self, valid_word):
        item = word_from_dict(valid_word)
        assert item == WordItem(
            id="001",
            word="sit",
            translation="座る",
            example="The cat sat on the mat.",
            notes="Past tense: sat",
        )

    def test_blank_example_is_missing(self):
        item = word_from_dict({"id": "1", "word": "run", "translation": "走る", "example": "  "})
        assert item.example is None
        assert item.to_dict() == {"id": "1", "word": "run", "translation": "走る"}

    def test_invalid_raises(self, invalid_word):
        with pytest.raises(ValueError, match="translation"):
            word_from_dict(invalid_word)


class TestLoadWords:
    """Test loading word lists from JSON files."""

    def test_load_list(self, words_file):
        words, errors = load_words(words_file)
        assert errors == []
        assert [w.id for w in words] == ["001", "003"]

    def test_load_wrapped_with_errors(self, mixed_words_file):
        words, errors = load_words(mixed_words_file)
        assert [w.id for w in words] == ["001"]
        assert errors == ["record 1: Missing required field: translation"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_words(path)

    def test_no_word_array(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text('{"items": []}', encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a list"):
            load_words(path)


class TestSearchWords:
    """Test filtering a word list."""

    def test_matches_word_case_insensitive(self, words_file):
        words, _ = load_words(words_file)
        assert [w.id for w in search_words(words, "APP")] == ["003"]

    def test_matches_translation(self, words_file):
        words, _ = load_words(words_file)
        assert [w.id for w in search_words(words, "座")] == ["001"]

    def test_empty_term_returns_all(self, words_file):
        words, _ = load_words(words_file)
        assert search_words(words, "") == words

    def test_no_match(self, words_file):
        words, _ = load_words(words_file)
        assert search_words(words, "zebra") == []
