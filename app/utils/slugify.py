import re
import unicodedata
from typing import Optional
from uuid import uuid4


def normalize_name(value: Optional[str]) -> str:
    """Collapse internal whitespace and trim"""
    if value is None:
        return ""
    return " ".join(str(value).split()).strip()


def slugify(value: Optional[str]) -> str:
    """
    Lowercase, dash separated slug. Letters outside ASCII (Arabic names) are
    kept; punctuation is dropped. Falls back to a random hex slug when nothing
    usable remains.
    """
    text = unicodedata.normalize("NFKC", normalize_name(value)).lower()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_-]+", "-", text).strip("-")
    return text or uuid4().hex
