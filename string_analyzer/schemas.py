from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from string_analyzer.models import FilterSpec, FilterValue, PropertyRecord
from string_analyzer.utils import format_timestamp


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: str

    @classmethod
    def from_record(cls, record: PropertyRecord) -> "StringResponse":
        return cls(
            id=record.id,
            value=record.value,
            properties=StringProperties(
                length=record.length,
                is_palindrome=record.is_palindrome,
                unique_characters=record.unique_characters,
                word_count=record.word_count,
                sha256_hash=record.sha256_hash,
                character_frequency_map=record.character_frequency_map,
            ),
            created_at=format_timestamp(record.created_at),
        )


def filters_to_dict(filters: FilterSpec) -> Dict[str, FilterValue]:
    return {name: value for name, value in filters.applied()}


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Optional[Dict[str, FilterValue]] = None


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, FilterValue]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    strings: int
