import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

REQUIRED_STR_FIELDS = ["id", "word", "translation"]
OPTIONAL_STR_FIELDS = ["example", "notes"]


@dataclass(frozen=True)
class WordItem:
    id: str
    word: str
    translation: str
    example: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def validate_word(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    if not isinstance(data, dict):
        return ["Word record must be a JSON object"]

    errors: List[str] = []

    for f in REQUIRED_STR_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {f}")
        elif not _is_non_empty_str(data[f]):
            errors.append(f"Field '{f}' must be a non-empty string")

    # Optional strings may be absent or null, but not another type
    for f in OPTIONAL_STR_FIELDS:
        if data.get(f) is not None and not isinstance(data[f], str):
            errors.append(f"Field '{f}' must be a string if provided")

    return errors


def word_from_dict(data: Dict[str, Any]) -> WordItem:
    errors = validate_word(data)
    if errors:
        raise ValueError("; ".join(errors))
    return WordItem(
        id=data["id"].strip(),
        word=data["word"].strip(),
        translation=data["translation"].strip(),
        # Blank optional fields behave as missing
        example=(data.get("example") or "").strip() or None,
        notes=(data.get("notes") or "").strip() or None,
    )


def load_words(path: Path) -> Tuple[List[WordItem], List[str]]:
    """
    Load word records from a JSON file.

    Accepts either a top-level array or an object with a "words" array.

    Returns:
        (valid words, error messages prefixed with the record position)

    Raises:
        ValueError: If the file is not valid JSON or has no word array
    """
    with Path(path).open("r", encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    records = payload.get("words") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise ValueError(f"Expected a list of word records in {path}")

    words: List[WordItem] = []
    errors: List[str] = []
    for position, record in enumerate(records):
        record_errors = validate_word(record)
        if record_errors:
            errors.extend(f"record {position}: {e}" for e in record_errors)
            continue
        words.append(word_from_dict(record))
    return words, errors


def search_words(words: List[WordItem], term: str) -> List[WordItem]:
    """Case-insensitive substring match on the word or its translation."""
    needle = (term or "").lower()
    return [
        w for w in words
        if needle in w.word.lower() or needle in w.translation.lower()
    ]
