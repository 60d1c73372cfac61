from django.contrib.auth import get_user_model
from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from .catalog import HotelPosition
from .services import CATEGORY_RULES, PositionCatalog, PositionCategory, PositionView


class PositionCatalogTest(SimpleTestCase):
    """Test cases for listing and searching positions"""

    def setUp(self):
        self.catalog = PositionCatalog()

    def test_list_all_returns_every_position_in_order(self):
        views = self.catalog.list_all()
        self.assertEqual(len(views), len(HotelPosition))
        self.assertEqual(
            [view.name for view in views],
            [position.position_name for position in HotelPosition]
        )
        self.assertEqual(views[0], PositionView(
            name="Food & Beverage Director / F&B Manager",
            description=HotelPosition.FOOD_BEVERAGE_DIRECTOR.description,
            category="Food & Beverage",
        ))

    def test_blank_query_returns_everything(self):
        everything = self.catalog.list_all()
        self.assertEqual(self.catalog.search(None), everything)
        self.assertEqual(self.catalog.search(""), everything)
        self.assertEqual(self.catalog.search("   "), everything)

    def test_search_matches_name_case_insensitively(self):
        results = self.catalog.search("NIGHT")
        self.assertEqual(
            [view.name for view in results],
            ["Night Supervisor", "Night Auditor"]
        )

    def test_search_matches_description(self):
        results = self.catalog.search("luggage")
        self.assertEqual(
            [view.name for view in results],
            ["Bell Captain", "Bellman / Bellboy / Porter"]
        )

    def test_search_results_are_ordered_subset(self):
        everything = self.catalog.list_all()
        results = self.catalog.search("Concierge")
        self.assertTrue(results)
        for view in results:
            self.assertTrue(
                "concierge" in view.name.lower() or "concierge" in view.description.lower()
            )
        positions = [everything.index(view) for view in results]
        self.assertEqual(positions, sorted(positions))

    def test_search_without_matches_is_empty(self):
        self.assertEqual(self.catalog.search("astronaut"), [])


class PositionCategoryTest(SimpleTestCase):
    """Test cases for the prefix based categorization"""

    def setUp(self):
        self.catalog = PositionCatalog()

    def test_identifier_examples(self):
        self.assertEqual(self.catalog.categorize_identifier("FOOD_AND_BEVERAGE_MANAGER"), PositionCategory.FOOD_BEVERAGE)
        self.assertEqual(self.catalog.categorize_identifier("FRONT_DESK_AGENT"), PositionCategory.FRONT_OFFICE)
        self.assertEqual(self.catalog.categorize_identifier("VALET_ATTENDANT"), PositionCategory.CONCIERGE)
        self.assertEqual(self.catalog.categorize_identifier("GENERAL_MANAGER"), PositionCategory.OTHER)

    def test_catalog_positions(self):
        self.assertEqual(self.catalog.categorize(HotelPosition.ROOM_SERVICE_MANAGER), "Food & Beverage")
        self.assertEqual(self.catalog.categorize(HotelPosition.ASSISTANT_EXECUTIVE_HOUSEKEEPER), "Housekeeping")
        self.assertEqual(self.catalog.categorize(HotelPosition.TAILOR), "Housekeeping")
        self.assertEqual(self.catalog.categorize(HotelPosition.NIGHT_AUDITOR), "Front Office")
        self.assertEqual(self.catalog.categorize(HotelPosition.DOORMAN), "Concierge")

    def test_positions_without_matching_prefix_are_other(self):
        others = [
            view.name for view in self.catalog.list_all()
            if view.category == PositionCategory.OTHER
        ]
        self.assertEqual(others, [
            "Assistant Front Office Manager / Duty Manager",
            "Bellman / Bellboy / Porter",
        ])

    def test_only_the_leading_prefix_counts(self):
        self.assertEqual(
            self.catalog.categorize_identifier("BANQUET_HOUSEKEEPING_SUPERVISOR"),
            PositionCategory.FOOD_BEVERAGE
        )

    def test_first_matching_rule_wins(self):
        overlapping = (
            (("ROOM_",), PositionCategory.FOOD_BEVERAGE),
            (("ROOM_ATTENDANT",), PositionCategory.HOUSEKEEPING),
        )
        catalog = PositionCatalog(rules=overlapping)
        self.assertEqual(catalog.categorize_identifier("ROOM_ATTENDANT"), PositionCategory.FOOD_BEVERAGE)

        catalog = PositionCatalog(rules=tuple(reversed(overlapping)))
        self.assertEqual(catalog.categorize_identifier("ROOM_ATTENDANT"), PositionCategory.HOUSEKEEPING)

    def test_default_rule_order(self):
        self.assertEqual(
            [category for _, category in CATEGORY_RULES],
            [
                PositionCategory.FOOD_BEVERAGE,
                PositionCategory.HOUSEKEEPING,
                PositionCategory.FRONT_OFFICE,
                PositionCategory.CONCIERGE,
            ]
        )


class PositionAPITest(APITestCase):
    """Test cases for the positions endpoints"""

    def setUp(self):
        self.user = get_user_model().objects.create_user(
            username="frontdesk", password="s3cret-pass"
        )

    def test_requires_authentication(self):
        response = self.client.get(reverse('position-list'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_positions(self):
        self.client.force_authenticate(self.user)
        response = self.client.get(reverse('position-list'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), len(HotelPosition))
        self.assertEqual(set(response.data[0].keys()), {'name', 'description', 'category'})

    def test_search_positions(self):
        self.client.force_authenticate(self.user)
        response = self.client.get(reverse('position-search'), {'q': 'luggage'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [item['category'] for item in response.data],
            ["Concierge", "Other"]
        )

    def test_search_without_query_lists_everything(self):
        self.client.force_authenticate(self.user)
        response = self.client.get(reverse('position-search'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), len(HotelPosition))
