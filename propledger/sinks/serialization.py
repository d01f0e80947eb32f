"""Shared serialization utilities for sinks."""

from dataclasses import asdict, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from propledger.engine.dates import parse_date
from propledger.models import Payment, Property, Tenant

# Snapshot keys use the camelCase layout of exported backup files
PROPERTY_FIELDS = {
    "property_id": "id",
    "name": "name",
    "address": "address",
    "property_type": "type",
    "purchase_price": "purchasePrice",
    "purchase_date": "purchaseDate",
    "image": "image",
    "down_payment": "downPayment",
    "monthly_amortization": "monthlyAmortization",
    "current_market_value": "currentMarketValue",
}

TENANT_FIELDS = {
    "tenant_id": "id",
    "property_id": "propertyId",
    "name": "name",
    "email": "email",
    "rent_amount": "rentAmount",
    "rent_due_day": "rentDueDay",
    "lease_start": "leaseStart",
    "lease_end": "leaseEnd",
    "status": "status",
}

PAYMENT_FIELDS = {
    "payment_id": "id",
    "tenant_id": "tenantId",
    "property_id": "propertyId",
    "amount": "amount",
    "date": "date",
    "payment_type": "type",
    "method": "method",
    "note": "note",
    "month_key": "monthKey",
    "expense_category": "expenseCategory",
}

RECORD_FIELDS: dict[type, dict[str, str]] = {
    Property: PROPERTY_FIELDS,
    Tenant: TENANT_FIELDS,
    Payment: PAYMENT_FIELDS,
}

DATE_FIELDS = {"purchase_date", "lease_start", "lease_end", "date"}


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def json_number(value: Decimal) -> int | float:
    """Render a Decimal as a JSON number, integral values as ints."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def to_record(obj: Property | Tenant | Payment) -> dict[str, Any]:
    """Convert an entity to its snapshot record, omitting unset fields."""
    aliases = RECORD_FIELDS[type(obj)]
    record: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if isinstance(value, Decimal):
            record[aliases[f.name]] = json_number(value)
        else:
            record[aliases[f.name]] = serialize_value(value)
    return record


def from_record(cls: type, record: dict[str, Any]) -> Any:
    """Build an entity from a snapshot record.

    Raises
    ------
    ValueError
        If a required field is missing or a value is malformed.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Expected an object, got {type(record).__name__}")

    kwargs: dict[str, Any] = {}
    for name, alias in RECORD_FIELDS[cls].items():
        value = record.get(alias)
        if value is None or value == "":
            continue
        if name in DATE_FIELDS:
            value = parse_date(value)
        elif name == "rent_due_day":
            try:
                value = int(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid rent due day: {value!r}") from exc
        kwargs[name] = value

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValueError(f"Incomplete {cls.__name__} record: {exc}") from exc
