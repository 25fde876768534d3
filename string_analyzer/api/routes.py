from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import Optional
import logging

from string_analyzer import crud
from string_analyzer.database import StringStore, get_db
from string_analyzer.models import FilterSpec
from string_analyzer.nl_parser import parse_natural_language_query
from string_analyzer.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
    filters_to_dict,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, db: StringStore = Depends(get_db)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    if crud.string_exists(db, string_data.value):
        logger.info("Rejected duplicate string")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="String already exists in the system"
        )

    record = crud.create_string_analysis(db, string_data.value)
    return StringResponse.from_record(record)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None, min_length=1, max_length=1),
    db: StringStore = Depends(get_db)
):
    """
    Get all strings with optional filtering.
    An inverted length range is not an error here, it just matches nothing.
    """
    filters = FilterSpec(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    strings = crud.get_all_strings(db, filters)
    filters_applied = filters_to_dict(filters)

    return StringListResponse(
        data=[StringResponse.from_record(s) for s in strings],
        count=len(strings),
        filters_applied=filters_applied if filters_applied else None
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    db: StringStore = Depends(get_db)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if query is None or not query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter is required"
        )

    filters = parse_natural_language_query(query)
    parsed_filters = filters_to_dict(filters)
    logger.info(f"Interpreted query {query!r} as {parsed_filters}")

    if filters.has_conflicting_length_range():
        logger.warning(f"Conflicting length range for query {query!r}")
        raise HTTPException(
            status_code=422,
            detail="Query parsed but resulted in conflicting filters"
        )

    strings = crud.get_all_strings(db, filters)

    return NaturalLanguageResponse(
        data=[StringResponse.from_record(s) for s in strings],
        count=len(strings),
        interpreted_query=InterpretedQuery(
            original=query,
            parsed_filters=parsed_filters
        )
    )


@router.get("/strings/id/{string_id}", response_model=StringResponse)
def get_string_by_id(string_id: str, db: StringStore = Depends(get_db)):
    """Get analysis by its SHA-256 id"""
    record = crud.get_string_by_id(db, string_id.lower())
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="String does not exist in the system"
        )
    return StringResponse.from_record(record)


@router.get("/strings/{string_value}", response_model=StringResponse)
def get_string(string_value: str, db: StringStore = Depends(get_db)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = crud.get_string_by_value(db, string_value)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="String does not exist in the system"
        )
    return StringResponse.from_record(record)


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, db: StringStore = Depends(get_db)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not crud.delete_string(db, string_value):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="String does not exist in the system"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
