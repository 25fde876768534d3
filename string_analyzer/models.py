from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class PropertyRecord:
    """Computed properties of one stored string. The id is its SHA-256 hash."""

    id: str
    value: str
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


FilterValue = Union[bool, int, str]


@dataclass(frozen=True)
class FilterSpec:
    """
    Optional conjunction of predicates over PropertyRecord.

    Absent fields impose no constraint. An inverted length range
    (min_length > max_length) is a valid spec that matches nothing.
    """

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def matches(self, record: PropertyRecord) -> bool:
        if self.is_palindrome is not None and record.is_palindrome != self.is_palindrome:
            return False
        if self.min_length is not None and record.length < self.min_length:
            return False
        if self.max_length is not None and record.length > self.max_length:
            return False
        if self.word_count is not None and record.word_count != self.word_count:
            return False
        if self.contains_character:
            if self.contains_character.lower() not in record.value.lower():
                return False
        return True

    def applied(self) -> List[Tuple[str, FilterValue]]:
        """Present filters as ordered (name, value) pairs"""
        pairs: List[Tuple[str, FilterValue]] = []
        if self.is_palindrome is not None:
            pairs.append(("is_palindrome", self.is_palindrome))
        if self.min_length is not None:
            pairs.append(("min_length", self.min_length))
        if self.max_length is not None:
            pairs.append(("max_length", self.max_length))
        if self.word_count is not None:
            pairs.append(("word_count", self.word_count))
        if self.contains_character:
            pairs.append(("contains_character", self.contains_character))
        return pairs

    def is_empty(self) -> bool:
        return not self.applied()

    def has_conflicting_length_range(self) -> bool:
        return (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        )
