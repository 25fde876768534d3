import logging
from typing import List, Optional

from string_analyzer.database import StringStore
from string_analyzer.models import FilterSpec, PropertyRecord
from string_analyzer.utils import analyze_string

logger = logging.getLogger(__name__)


def string_exists(db: StringStore, value: str) -> bool:
    return db.exists(value)


def create_string_analysis(db: StringStore, value: str) -> PropertyRecord:
    """Analyze and store a string. Uniqueness is checked by the caller."""
    record = analyze_string(value)
    db.add(record)
    logger.info(f"Stored string analysis {record.id[:12]} (length={record.length})")
    return record


def get_string_by_value(db: StringStore, value: str) -> Optional[PropertyRecord]:
    """Get string analysis by value"""
    return db.get_by_value(value)


def get_string_by_id(db: StringStore, string_id: str) -> Optional[PropertyRecord]:
    """Get string analysis by ID (hash)"""
    return db.get_by_id(string_id)


def get_all_strings(db: StringStore, filters: Optional[FilterSpec] = None) -> List[PropertyRecord]:
    """Get all strings with optional filters"""
    if filters is None or filters.is_empty():
        return db.get_all()
    return db.get_filtered(filters)


def delete_string(db: StringStore, value: str) -> bool:
    """Delete string analysis by value"""
    deleted = db.delete(value)
    if deleted:
        logger.info("Deleted string analysis")
    return deleted
