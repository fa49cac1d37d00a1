"""Unit tests for marketing_api.services.campaigns: filters, pagination and ranking."""

import unittest

from marketing_api.core.errors import NotFound
from marketing_api.core.store import DataStore
from marketing_api.models import Campaign, CompanyInfo
from marketing_api.services.campaigns import (
    CampaignFilters,
    filter_campaigns,
    get_campaign,
    list_campaigns,
    paginate,
    top_campaigns_by_revenue,
)


def _campaign(
    campaign_id: int,
    status: str = "active",
    medium: str = "Email",
    product_category: str = "Electronics",
    revenue: float = 1000,
    **kwargs: object,
) -> Campaign:
    """Build a minimal Campaign for tests."""
    return Campaign(
        id=campaign_id,
        name=f"Campaign {campaign_id}",
        status=status,
        medium=medium,
        product_category=product_category,
        revenue=revenue,
        **kwargs,
    )


def _campaigns(count: int) -> list[Campaign]:
    return [_campaign(i) for i in range(1, count + 1)]


class TestFilterCampaigns(unittest.TestCase):
    """status/medium are case-insensitive equality, category is a case-insensitive substring."""

    def setUp(self) -> None:
        self.campaigns = [
            _campaign(1, status="Active", medium="Social Media", product_category="Electronics"),
            _campaign(2, status="paused", medium="email", product_category="Smart Home Electronics"),
            _campaign(3, status="ACTIVE", medium="Email", product_category="Fashion"),
            _campaign(4, status="inactive", medium="Email", product_category="Home & Garden"),
        ]

    def _ids(self, filters: CampaignFilters) -> list[int]:
        return [c.id for c in filter_campaigns(self.campaigns, filters)]

    def test_no_filters_returns_all(self) -> None:
        self.assertEqual(self._ids(CampaignFilters()), [1, 2, 3, 4])

    def test_status_is_case_insensitive_equality(self) -> None:
        self.assertEqual(self._ids(CampaignFilters(status="active")), [1, 3])
        # "inactive" contains "active" but is not equal to it
        self.assertNotIn(4, self._ids(CampaignFilters(status="active")))

    def test_medium_is_case_insensitive_equality(self) -> None:
        self.assertEqual(self._ids(CampaignFilters(medium="EMAIL")), [2, 3, 4])
        self.assertEqual(self._ids(CampaignFilters(medium="Social")), [])

    def test_category_is_case_insensitive_substring(self) -> None:
        self.assertEqual(self._ids(CampaignFilters(category="electronics")), [1, 2])
        self.assertEqual(self._ids(CampaignFilters(category="HOME")), [2, 4])

    def test_filters_combine(self) -> None:
        self.assertEqual(
            self._ids(CampaignFilters(status="active", medium="email", category="fash")), [3]
        )

    def test_empty_filter_values_are_ignored(self) -> None:
        self.assertEqual(self._ids(CampaignFilters(status="", medium="", category="")), [1, 2, 3, 4])


class TestPaginate(unittest.TestCase):
    """Pages are 1-indexed; total is ceil(count / limit)."""

    def test_defaults(self) -> None:
        page = paginate(_campaigns(23))
        self.assertEqual(page.page, 1)
        self.assertEqual(len(page.items), 10)
        self.assertEqual(page.total_pages, 3)
        self.assertEqual(page.total_items, 23)

    def test_second_page(self) -> None:
        page = paginate(_campaigns(12), page=2, limit=5)
        self.assertEqual([c.id for c in page.items], [6, 7, 8, 9, 10])
        self.assertEqual(page.total_pages, 3)

    def test_last_partial_page(self) -> None:
        page = paginate(_campaigns(12), page=3, limit=5)
        self.assertEqual([c.id for c in page.items], [11, 12])

    def test_page_past_end_is_empty(self) -> None:
        page = paginate(_campaigns(3), page=5, limit=5)
        self.assertEqual(page.items, [])
        self.assertEqual(page.total_pages, 1)
        self.assertEqual(page.total_items, 3)

    def test_empty_input(self) -> None:
        page = paginate([], page=1, limit=10)
        self.assertEqual(page.items, [])
        self.assertEqual(page.total_pages, 0)

    def test_exact_multiple(self) -> None:
        self.assertEqual(paginate(_campaigns(10), limit=5).total_pages, 2)

    def test_invalid_page_or_limit(self) -> None:
        with self.assertRaises(ValueError):
            paginate(_campaigns(3), page=0)
        with self.assertRaises(ValueError):
            paginate(_campaigns(3), limit=0)


class TestStoreOperations(unittest.TestCase):
    """list_campaigns and get_campaign read from the store."""

    def setUp(self) -> None:
        self.store = DataStore(
            campaigns=tuple(
                [_campaign(1, status="active"), _campaign(2, status="paused"), _campaign(3)]
            ),
            company=CompanyInfo(name="Test Co"),
        )

    def test_list_campaigns_filters_then_paginates(self) -> None:
        page = list_campaigns(self.store, CampaignFilters(status="active"), page=1, limit=1)
        self.assertEqual([c.id for c in page.items], [1])
        self.assertEqual(page.total_items, 2)
        self.assertEqual(page.total_pages, 2)

    def test_get_campaign(self) -> None:
        self.assertEqual(get_campaign(self.store, 2).status, "paused")

    def test_get_unknown_campaign(self) -> None:
        with self.assertRaises(NotFound) as ctx:
            get_campaign(self.store, 99)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, "Campaign not found")


class TestTopCampaignsByRevenue(unittest.TestCase):
    """Ranking returns the highest revenue first and leaves the input order alone."""

    def test_orders_by_revenue_descending(self) -> None:
        campaigns = [
            _campaign(1, revenue=10),
            _campaign(2, revenue=50),
            _campaign(3, revenue=30),
            _campaign(4, revenue=70),
            _campaign(5, revenue=20),
            _campaign(6, revenue=60),
        ]
        top = top_campaigns_by_revenue(campaigns)
        self.assertEqual([c.id for c in top], [4, 6, 2, 3, 5])
        self.assertEqual([c.id for c in campaigns], [1, 2, 3, 4, 5, 6])

    def test_fewer_than_count(self) -> None:
        self.assertEqual(len(top_campaigns_by_revenue(_campaigns(2))), 2)


if __name__ == "__main__":
    unittest.main()
