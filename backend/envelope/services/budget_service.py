"""
Monthly budget math.

Everything is recomputed from a DataStore snapshot on every call; there is no
cached summary state. Months are "YYYY-MM" strings and are compared as
(year, month) numbers, never by string prefix.
"""

import re
from collections.abc import Iterable
from datetime import date

from ..exceptions import InvalidInput
from ..models import (
    Category,
    CategorySummary,
    DataStore,
    GroupSummary,
    INCOME_GROUP,
    MonthlySummary,
    SPENDABLE_ACCOUNT_TYPES,
    Transaction,
    TransactionType,
    UncategorizedSummary,
)
from .balance import compute_balances

_MONTH_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


def parse_month(month: str) -> tuple[int, int]:
    """Parse "YYYY-MM" (a one-digit month is accepted) into (year, month)."""
    match = _MONTH_RE.match(month or "")
    if not match:
        raise InvalidInput(f'Invalid month: "{month}" (expected YYYY-MM)')
    year, month_num = int(match.group(1)), int(match.group(2))
    if not 1 <= month_num <= 12:
        raise InvalidInput(f'Invalid month: "{month}" (month must be 01-12)')
    return year, month_num


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def _in_month(tx_date: date, period: tuple[int, int]) -> bool:
    return (tx_date.year, tx_date.month) == period


def _month_transactions(transactions: Iterable[Transaction], period: tuple[int, int]) -> list[Transaction]:
    return [tx for tx in transactions if _in_month(tx.date, period)]


def _spent_by_category(transactions: Iterable[Transaction]) -> dict[str, int]:
    """Signed per-category totals. Uncategorized rows and transfers have no category and are skipped."""
    spent: dict[str, int] = {}
    for tx in transactions:
        if tx.category_id == "":
            continue
        spent[tx.category_id] = spent.get(tx.category_id, 0) + tx.amount
    return spent


def _spendable_balance(data_store: DataStore) -> int:
    balances = compute_balances(data_store.transactions)
    return sum(
        balances.get(account.id, 0)
        for account in data_store.accounts
        if not account.archived and account.type in SPENDABLE_ACCOUNT_TYPES
    )


def _envelope_categories(categories: Iterable[Category]) -> list[Category]:
    """Non-archived categories that take part in assigned-amount math."""
    return [c for c in categories if not c.archived and c.group != INCOME_GROUP]


def compute_available_to_budget(data_store: DataStore, month: str) -> int:
    """
    Money that is not yet assigned to any envelope.

    Spendable balance minus what is still left in each envelope this month.
    An overspent envelope counts as 0 remaining, so overspending is absorbed by
    the spendable balance instead of inflating availability. May be negative.
    """
    period = parse_month(month)
    spent = _spent_by_category(_month_transactions(data_store.transactions, period))

    remaining = sum(
        max(0, category.assigned + spent.get(category.id, 0))
        for category in _envelope_categories(data_store.categories)
    )
    return _spendable_balance(data_store) - remaining


def _group_categories(categories: Iterable[Category]) -> dict[str, list[Category]]:
    """
    Group non-archived categories by group name.

    Budget groups keep the order in which they first appear; the Income group,
    if any, comes last.
    """
    groups: dict[str, list[Category]] = {}
    income: list[Category] = []
    for category in categories:
        if category.archived:
            continue
        if category.group == INCOME_GROUP:
            income.append(category)
        else:
            groups.setdefault(category.group, []).append(category)
    if income:
        groups[INCOME_GROUP] = income
    return groups


def _summarize_group(name: str, categories: list[Category], spent: dict[str, int]) -> GroupSummary:
    is_income = name == INCOME_GROUP
    summaries = []
    for category in sorted(categories, key=lambda c: c.sort_order):
        category_spent = spent.get(category.id, 0)
        summaries.append(CategorySummary(
            id=category.id,
            name=category.name,
            assigned=0 if is_income else category.assigned,
            spent=category_spent,
            available=0 if is_income else category.assigned + category_spent,
        ))

    return GroupSummary(
        name=name,
        categories=summaries,
        total_assigned=0 if is_income else sum(c.assigned for c in summaries),
        total_spent=sum(c.spent for c in summaries),
        total_available=0 if is_income else sum(c.available for c in summaries),
    )


def compute_monthly_summary(data_store: DataStore, month: str) -> MonthlySummary:
    """
    Build the budget screen for one month.

    Income-group categories are listed with their spend for display, but their
    assigned and available figures (and their group's totals) are always 0.
    Archived categories are left out entirely.
    """
    period = parse_month(month)
    month_txs = _month_transactions(data_store.transactions, period)

    total_income = sum(tx.amount for tx in month_txs if tx.type == TransactionType.INCOME)
    spent = _spent_by_category(month_txs)

    groups = [
        _summarize_group(name, categories, spent)
        for name, categories in _group_categories(data_store.categories).items()
    ]

    total_assigned = sum(c.assigned for c in _envelope_categories(data_store.categories))

    # Transfers have no category either, but they are not spending
    uncategorized_spent = sum(
        tx.amount
        for tx in month_txs
        if tx.category_id == "" and tx.type != TransactionType.TRANSFER
    )

    return MonthlySummary(
        month=format_month(*period),
        available_to_budget=compute_available_to_budget(data_store, month),
        total_income=total_income,
        total_assigned=total_assigned,
        groups=groups,
        uncategorized=UncategorizedSummary(spent=uncategorized_spent),
    )
