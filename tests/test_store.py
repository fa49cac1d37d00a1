"""Unit tests for marketing_api.core.store: loading the JSON dataset into an immutable store."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from marketing_api.core.config import DEFAULT_DATA_DIR
from marketing_api.core.store import (
    MARKETING_DATA_FILE,
    OBFUSCATED_USERS_FILE,
    USERS_FILE,
    DataLoadError,
    load_store,
)
from marketing_api.models import Campaign


class TestLoadBundledData(unittest.TestCase):
    """The bundled dataset loads into typed records."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.store = load_store(DEFAULT_DATA_DIR)

    def test_counts(self) -> None:
        self.assertEqual(len(self.store.campaigns), 15)
        self.assertEqual(len(self.store.accounts), 4)
        self.assertEqual(len(self.store.obfuscated_accounts), 3)
        self.assertEqual(self.store.get_company_info().name, "Amana Marketing")

    def test_records_are_typed(self) -> None:
        campaign = self.store.get_campaign(1)
        self.assertIsInstance(campaign, Campaign)
        self.assertEqual(campaign.product_category, "Electronics")
        self.assertIsNone(self.store.get_campaign(999))

    def test_usernames_unique_across_collections(self) -> None:
        names = [a.username for a in self.store.accounts + self.store.obfuscated_accounts]
        self.assertEqual(len(names), len(set(names)))

    def test_list_users_strips_secrets(self) -> None:
        users = self.store.list_users()
        self.assertEqual(len(users), len(self.store.accounts))
        for user in users:
            self.assertNotIn("password", user.model_dump())

    def test_store_is_immutable(self) -> None:
        with self.assertRaises(ValidationError):
            self.store.campaigns = ()
        with self.assertRaises(ValidationError):
            self.store.accounts[0].role = "admin"


class TestLoadFailures(unittest.TestCase):
    """Missing, non-JSON or invalid files raise DataLoadError."""

    def setUp(self) -> None:
        self.data_dir = Path(tempfile.mkdtemp())
        for name in (USERS_FILE, OBFUSCATED_USERS_FILE, MARKETING_DATA_FILE):
            shutil.copy(DEFAULT_DATA_DIR / name, self.data_dir / name)

    def tearDown(self) -> None:
        shutil.rmtree(self.data_dir, ignore_errors=True)

    def _write(self, name: str, content: object) -> None:
        (self.data_dir / name).write_text(json.dumps(content), encoding="utf-8")

    def test_copied_data_loads(self) -> None:
        self.assertEqual(len(load_store(self.data_dir).campaigns), 15)

    def test_missing_file(self) -> None:
        (self.data_dir / USERS_FILE).unlink()
        with self.assertRaises(DataLoadError) as ctx:
            load_store(self.data_dir)
        self.assertIn("not found", ctx.exception.message)

    def test_not_json(self) -> None:
        (self.data_dir / MARKETING_DATA_FILE).write_text("{not json", encoding="utf-8")
        with self.assertRaises(DataLoadError) as ctx:
            load_store(self.data_dir)
        self.assertIn("not valid JSON", ctx.exception.message)

    def test_account_missing_password(self) -> None:
        self._write(USERS_FILE, {"users": [{"id": 1, "username": "x", "role": "user"}]})
        with self.assertRaises(DataLoadError) as ctx:
            load_store(self.data_dir)
        self.assertIn("invalid records", ctx.exception.message)

    def test_unknown_role_rejected(self) -> None:
        self._write(
            USERS_FILE,
            {"users": [{"username": "x", "password": "y", "role": "superuser"}]},
        )
        with self.assertRaises(DataLoadError):
            load_store(self.data_dir)

    def test_unknown_fields_ignored_and_missing_defaulted(self) -> None:
        self._write(
            MARKETING_DATA_FILE,
            {
                "company_info": {"name": "Tiny Co", "extra": True},
                "campaigns": [{"id": 7, "name": "Bare", "unexpected": "value"}],
            },
        )
        store = load_store(self.data_dir)
        campaign = store.get_campaign(7)
        self.assertEqual(campaign.revenue, 0)
        self.assertEqual(campaign.status, "")
        self.assertEqual(store.get_marketing_stats().total_campaigns, 0)


if __name__ == "__main__":
    unittest.main()
