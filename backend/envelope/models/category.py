from .base import LedgerModel

# Categories in this group are income buckets, not envelopes
INCOME_GROUP = "Income"


class Category(LedgerModel):
    """
    A budget envelope.

    assigned is the amount allotted for the month, in minor units.
    Categories are displayed grouped by group, ordered by sort_order.
    """

    id: str
    name: str
    group: str
    assigned: int = 0
    sort_order: int = 0
    archived: bool = False

    @property
    def is_income(self) -> bool:
        return self.group == INCOME_GROUP

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', group='{self.group}')>"
