import re

PUNCT_RE = re.compile(r"[^\w\s-]+", re.UNICODE)
SPACE_RE = re.compile(r"\s+")

CATEGORY_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
HYPHEN_RUN_RE = re.compile(r"-+")


def normalize_query(text: str | None) -> str:
    """Lowercase, trim, drop punctuation except hyphens, collapse whitespace."""
    text = (text or "").lower().strip()
    text = PUNCT_RE.sub("", text)
    text = SPACE_RE.sub(" ", text)
    return text.strip()


def normalize_category(text: str | None) -> str:
    text = (text or "").lower().strip()
    text = text.replace("&", "and")
    text = CATEGORY_STRIP_RE.sub("", text)
    text = SPACE_RE.sub("-", text)
    return HYPHEN_RUN_RE.sub("-", text)


def contains_word(text: str, word: str) -> bool:
    if not word:
        return False
    return re.search(rf"\b{re.escape(word)}\b", text) is not None
