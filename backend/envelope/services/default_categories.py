from ..models import Category

# (name, group) in display order
DEFAULT_CATEGORIES = [
    ("Income", "Income"),
    ("Housing", "Fixed"),
    ("Bills & Utilities", "Fixed"),
    ("Subscriptions", "Fixed"),
    ("Groceries", "Daily Living"),
    ("Dining Out", "Daily Living"),
    ("Transportation", "Daily Living"),
    ("Alcohol & Smoking", "Personal"),
    ("Health & Beauty", "Personal"),
    ("Clothing", "Personal"),
    ("Fun & Hobbies", "Personal"),
    ("Allowances", "Personal"),
    ("Education & Business", "Personal"),
    ("Gifts & Giving", "Personal"),
    ("Housekeeping & Maintenance", "Irregular"),
    ("Big Purchases", "Irregular"),
    ("Travel", "Irregular"),
    ("Taxes & Fees", "Irregular"),
]


def get_default_categories() -> list[Category]:
    """Seed categories for a new budget. Ids and sort order run from 1."""
    return [
        Category(id=str(i), name=name, group=group, assigned=0, sort_order=i, archived=False)
        for i, (name, group) in enumerate(DEFAULT_CATEGORIES, start=1)
    ]
