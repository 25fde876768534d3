import hashlib
import re
from collections import Counter
from datetime import datetime, timezone
from typing import Dict

from string_analyzer.models import PropertyRecord

# Word separators: space, tab, newline, carriage return
WORD_SEPARATORS = re.compile(r"[ \t\n\r]+")

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the UTF-8 encoded string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string reads the same both ways, ignoring case only"""
    lowered = text.lower()
    left, right = 0, len(lowered) - 1
    while left < right:
        if lowered[left] != lowered[right]:
            return False
        left += 1
        right -= 1
    return True


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string (case-sensitive)"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count non-empty runs between spaces, tabs and line breaks"""
    return len([part for part in WORD_SEPARATORS.split(text) if part])


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(value: str) -> PropertyRecord:
    """
    Analyze a string and return all computed properties.

    Length and character iteration use Unicode code points, so a
    non-BMP character such as an emoji counts as one character.
    """
    sha256_hash = compute_sha256(value)

    return PropertyRecord(
        id=sha256_hash,
        value=value,
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=sha256_hash,
        character_frequency_map=get_character_frequency(value),
        created_at=datetime.now(timezone.utc),
    )


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp as UTC with a literal Z suffix"""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)
