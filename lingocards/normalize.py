import re

_NON_SENTENCE_CHARS = re.compile(r"[^a-z0-9 ]")


def normalize_sentence(text: str | None) -> str:
    """Lower-case, keep only ASCII letters, digits and spaces, then strip."""
    if not text:
        return ""
    return _NON_SENTENCE_CHARS.sub("", text.lower()).strip()


def bigrams(text: str) -> list[str]:
    # Overlapping windows of width 2; strings shorter than 2 yield nothing
    return [text[i:i + 2] for i in range(len(text) - 1)]
