"""
Entity schemas for every record type the UI submits, keyed by entity name.
"""

from functools import lru_cache

from src.core.models import RecordSchema
from src.core.rules import RuleEngine

from .business_day import ADD_YEAR_SCHEMA, BUSINESS_DAY_SCHEMA
from .employee import EMPLOYEE_SCHEMA
from .expense import EXPENSE_SCHEMA, MONTHLY_COST_SCHEMA
from .field import FIELD_SCHEMA
from .project import PROJECT_SCHEMA
from .settings import BASE_ADDRESS_SCHEMA
from .work_day import WEATHER_ENTRY_SCHEMA, WORK_DAY_SCHEMA, WORK_RECORD_INPUT_SCHEMA

ENTITY_SCHEMAS: dict[str, RecordSchema] = {
    schema.entity: schema
    for schema in (
        EMPLOYEE_SCHEMA,
        PROJECT_SCHEMA,
        FIELD_SCHEMA,
        EXPENSE_SCHEMA,
        MONTHLY_COST_SCHEMA,
        BUSINESS_DAY_SCHEMA,
        ADD_YEAR_SCHEMA,
        BASE_ADDRESS_SCHEMA,
        WEATHER_ENTRY_SCHEMA,
        WORK_RECORD_INPUT_SCHEMA,
        WORK_DAY_SCHEMA,
    )
}


def get_schema(entity: str) -> RecordSchema:
    try:
        return ENTITY_SCHEMAS[entity]
    except KeyError:
        raise KeyError(f"Unknown entity '{entity}'. Known: {sorted(ENTITY_SCHEMAS)}")


@lru_cache(maxsize=None)
def get_engine(entity: str) -> RuleEngine:
    """Shared engine per entity; engines hold no per-call state."""
    return RuleEngine(get_schema(entity))


__all__ = [
    "ENTITY_SCHEMAS",
    "get_schema",
    "get_engine",
    "EMPLOYEE_SCHEMA",
    "PROJECT_SCHEMA",
    "FIELD_SCHEMA",
    "EXPENSE_SCHEMA",
    "MONTHLY_COST_SCHEMA",
    "BUSINESS_DAY_SCHEMA",
    "ADD_YEAR_SCHEMA",
    "BASE_ADDRESS_SCHEMA",
    "WEATHER_ENTRY_SCHEMA",
    "WORK_RECORD_INPUT_SCHEMA",
    "WORK_DAY_SCHEMA",
]
