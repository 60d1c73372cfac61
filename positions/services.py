from dataclasses import dataclass

from django.db import models

from .catalog import HotelPosition


class PositionCategory(models.TextChoices):
    FOOD_BEVERAGE = 'Food & Beverage', 'Food & Beverage'
    HOUSEKEEPING = 'Housekeeping', 'Housekeeping'
    FRONT_OFFICE = 'Front Office', 'Front Office'
    CONCIERGE = 'Concierge', 'Concierge'
    OTHER = 'Other', 'Other'


# Evaluated top to bottom, first matching prefix wins.
CATEGORY_RULES = (
    (
        ('FOOD_', 'ASSISTANT_FB', 'OUTLET_', 'BANQUET_', 'BAR_',
         'ROOM_SERVICE', 'RESTAURANT_'),
        PositionCategory.FOOD_BEVERAGE,
    ),
    (
        ('EXECUTIVE_HOUSEKEEPER', 'ASSISTANT_EXECUTIVE_HOUSEKEEPER',
         'HOUSEKEEPING_', 'PUBLIC_AREA', 'LINEN_', 'NIGHT_SUPERVISOR',
         'ROOM_ATTENDANT', 'LAUNDRY_', 'TURNDOWN_', 'UNIFORM_', 'TAILOR'),
        PositionCategory.HOUSEKEEPING,
    ),
    (
        ('FRONT_OFFICE', 'FRONT_DESK', 'GUEST_RELATIONS', 'RECEPTIONIST',
         'TELEPHONE_', 'CASHIER', 'NIGHT_AUDITOR'),
        PositionCategory.FRONT_OFFICE,
    ),
    (
        ('CHIEF_CONCIERGE', 'ASSISTANT_CHIEF_CONCIERGE', 'CONCIERGE_',
         'BELL_', 'DOORMAN', 'VALET_'),
        PositionCategory.CONCIERGE,
    ),
)


@dataclass(frozen=True)
class PositionView:
    name: str
    description: str
    category: str


class PositionCatalog:
    """Read-only access to the hotel positions"""

    def __init__(self, positions=None, rules=CATEGORY_RULES):
        self.positions = tuple(positions) if positions is not None else tuple(HotelPosition)
        self.rules = rules

    def list_all(self):
        """Get all available hotel positions, in catalog order"""
        return [self._to_view(position) for position in self.positions]

    def search(self, query):
        """
        Search positions by name or description (case-insensitive).
        A missing or blank query returns every position.
        """
        if query is None or not query.strip():
            return self.list_all()

        lower_query = query.lower()
        return [
            self._to_view(position)
            for position in self.positions
            if lower_query in position.position_name.lower()
            or lower_query in position.description.lower()
        ]

    def categorize(self, position):
        return self.categorize_identifier(position.name)

    def categorize_identifier(self, identifier):
        for prefixes, category in self.rules:
            if identifier.startswith(prefixes):
                return category
        return PositionCategory.OTHER

    def _to_view(self, position):
        return PositionView(
            name=position.position_name,
            description=position.description,
            category=self.categorize(position).value,
        )
