"""Expense category resolution.

Older records carry the category only as a ``"Category: note"`` prefix in
the free-text note. Resolution is kept in one place so the note parsing can
be retired without touching the reports.
"""

from propledger.models import ExpenseCategory, Payment

UNCATEGORIZED = "Uncategorized"


def category_from_note(note: str | None) -> str | None:
    """Return the text before the first colon of ``note``, if any."""
    if not note or ":" not in note:
        return None
    prefix = note.split(":", 1)[0].strip()
    return prefix or None


def resolve_expense_category(payment: Payment) -> str:
    """Structured category, else the note prefix, else ``"Uncategorized"``."""
    if payment.expense_category is not None:
        return ExpenseCategory(payment.expense_category).value
    return category_from_note(payment.note) or UNCATEGORIZED


def normalize_expense_category(text: str | None) -> ExpenseCategory:
    """Map free text onto the closed category set, case-insensitively.

    Unknown or empty values become ``ExpenseCategory.OTHER``.
    """
    if not text:
        return ExpenseCategory.OTHER
    wanted = text.strip().lower()
    for category in ExpenseCategory:
        if category.value.lower() == wanted:
            return category
    return ExpenseCategory.OTHER
