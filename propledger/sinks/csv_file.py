"""CSV bulk transaction import and summary export."""

import csv
import io
import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, TextIO

from propledger.engine.categories import normalize_expense_category
from propledger.engine.dates import month_key, parse_date
from propledger.models import Payment, PaymentMethod, PaymentType, PeriodSummary, Property

logger = logging.getLogger(__name__)

IMPORT_COLUMNS = ("Date", "Amount", "Property Name", "Category", "Note")
SUMMARY_HEADER = ("Period", "Income", "Expense", "Net Income")


@dataclass
class CsvImportResult:
    """Payments parsed from a CSV file and how many rows were dropped."""

    payments: list[Payment] = field(default_factory=list)
    skipped: int = 0

    @property
    def total_rows(self) -> int:
        return len(self.payments) + self.skipped


def _open_text(source: str | Path | TextIO) -> TextIO:
    if isinstance(source, (str, Path)):
        return open(source, newline="", encoding="utf-8-sig")
    return source


def _parse_amount(text: str | None) -> Decimal | None:
    if text is None or not text.strip():
        return None
    try:
        amount = Decimal(text.strip().replace(",", ""))
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def import_payments_csv(
    source: str | Path | TextIO,
    properties: Iterable[Property],
) -> CsvImportResult:
    """Parse a headered ``Date, Amount, Property Name, Category, Note`` file.

    ``Rent`` and ``Deposit`` categories become those payment types; anything
    else is an expense in the matching category, ``Other`` when unknown.
    Rows without a date, a numeric amount or a known property are skipped.

    Parameters
    ----------
    source : str | Path | TextIO
        File path or open text stream.
    properties : Iterable[Property]
        Properties to match the ``Property Name`` column against.

    Returns
    -------
    CsvImportResult
        Parsed payments and the skipped row count.
    """
    by_name = {p.name.strip().lower(): p for p in properties}
    result = CsvImportResult()

    stream = _open_text(source)
    try:
        reader = csv.DictReader(stream)
        for line_no, row in enumerate(reader, start=2):
            if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
                continue  # blank line

            payment = _row_to_payment(row, by_name)
            if payment is None:
                result.skipped += 1
                logger.warning("Skipping CSV line %d: %s", line_no, dict(row))
                continue
            result.payments.append(payment)
    finally:
        if stream is not source:
            stream.close()

    logger.info(
        "Imported %d payments from CSV, skipped %d rows",
        len(result.payments),
        result.skipped,
        extra={"extra": {"imported": len(result.payments), "skipped": result.skipped}},
    )
    return result


def _row_to_payment(row: dict[str, str | None], by_name: dict[str, Property]) -> Payment | None:
    when = parse_date(row.get("Date"))
    amount = _parse_amount(row.get("Amount"))
    prop_name = (row.get("Property Name") or "").strip().lower()
    if when is None or amount is None or not prop_name:
        return None

    prop = by_name.get(prop_name)
    if prop is None:
        return None

    category = (row.get("Category") or "").strip() or "Other"
    expense_category = None
    if category.lower() == "rent":
        payment_type = PaymentType.RENT
    elif category.lower() == "deposit":
        payment_type = PaymentType.DEPOSIT
    else:
        payment_type = PaymentType.EXPENSE
        expense_category = normalize_expense_category(category)

    return Payment(
        payment_id=f"imp_{uuid.uuid4().hex[:12]}",
        property_id=prop.property_id,
        amount=abs(amount),
        date=when,
        payment_type=payment_type,
        method=PaymentMethod.CASH,
        note=(row.get("Note") or "").strip(),
        month_key=month_key(when),
        expense_category=expense_category,
    )


def export_summary_csv(rows: Iterable[PeriodSummary], target: str | Path | TextIO | None = None) -> str:
    """Write period rows as ``Period,Income,Expense,Net Income`` CSV.

    Returns the CSV text; also writes it to ``target`` when given.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(SUMMARY_HEADER)
    for row in rows:
        writer.writerow([row.period, row.income, row.expense, row.net])
    text = buffer.getvalue()

    if isinstance(target, (str, Path)):
        Path(target).write_text(text, encoding="utf-8")
    elif target is not None:
        target.write(text)
    return text
