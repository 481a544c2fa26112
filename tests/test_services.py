"""
Tests for the whitelist and content services.
"""
import asyncio
import logging

import pytest

from landing_api.app.schemas.whitelist import WhitelistCreate
from landing_api.app.services.content_service import ContentService, ContentValidationError
from landing_api.app.services.whitelist_service import DUPLICATE_EMAIL_DETAIL, WhitelistService, mask_email


class TestWhitelistService:

    def test_submit_email_creates_entry(self, store):
        entry = asyncio.run(WhitelistService.submit_email(store, WhitelistCreate(email="cfo@example.com")))
        assert entry.email == "cfo@example.com"
        emails = asyncio.run(WhitelistService.list_emails(store))
        assert [e.email for e in emails] == ["cfo@example.com"]

    def test_duplicate_submission_is_rejected(self, store):
        data = WhitelistCreate(email="cfo@example.com")
        asyncio.run(WhitelistService.submit_email(store, data))
        with pytest.raises(ValueError, match=DUPLICATE_EMAIL_DETAIL):
            asyncio.run(WhitelistService.submit_email(store, data))
        assert len(store.list_whitelist_entries()) == 1

    def test_duplicate_check_is_case_sensitive(self, store):
        asyncio.run(WhitelistService.submit_email(store, WhitelistCreate(email="cfo@example.com")))
        asyncio.run(WhitelistService.submit_email(store, WhitelistCreate(email="CFO@example.com")))
        assert len(store.list_whitelist_entries()) == 2


class TestContentService:

    def test_update_known_section(self, store):
        record = asyncio.run(ContentService.update_section(store, "hero", {"title": "X", "tagline": "Y"}))
        assert record.content == {"title": "X", "tagline": "Y"}
        fetched = asyncio.run(ContentService.get_section(store, "hero"))
        assert fetched.content == {"title": "X", "tagline": "Y"}

    def test_invalid_known_section_does_not_touch_store(self, store):
        before = store.get_content_section("about")
        with pytest.raises(ContentValidationError) as excinfo:
            asyncio.run(ContentService.update_section(store, "about", {"heading": "Only a heading"}))
        assert excinfo.value.section == "about"
        missing = {tuple(err["loc"]) for err in excinfo.value.errors}
        assert ("description",) in missing
        assert store.get_content_section("about") == before

    def test_nested_solutions_card_is_validated(self, store):
        doc = store.get_content_section("solutions").content
        del doc["payment"]["benefit"]
        with pytest.raises(ContentValidationError) as excinfo:
            ContentService.validate_content("solutions", doc)
        assert ["payment", "benefit"] in [err["loc"] for err in excinfo.value.errors]

    def test_team_accepts_camel_case_footer_note(self, store):
        doc = store.get_content_section("team").content
        ContentService.validate_content("team", doc)

    def test_extra_keys_are_kept(self, store):
        doc = {"title": "X", "tagline": "Y", "cta": "Join"}
        record = asyncio.run(ContentService.update_section(store, "hero", doc))
        assert record.content["cta"] == "Join"

    def test_unknown_section_accepts_any_document(self, store):
        record = asyncio.run(ContentService.update_section(store, "press", {"quote": "Nice"}))
        assert record.section == "press"
        sections = asyncio.run(ContentService.list_sections(store))
        assert len(sections) == 5

    def test_missing_section_returns_none(self, store):
        assert asyncio.run(ContentService.get_section(store, "nonexistent")) is None


class TestWhitelistLogging:

    def test_mask_email(self):
        assert mask_email("founder@example.com") == "f***@example.com"
        assert mask_email("broken") == "***"

    def test_submission_logs_do_not_contain_address(self, store, caplog):
        data = WhitelistCreate(email="founder@example.com")
        with caplog.at_level(logging.INFO, logger="landing_api.app.services.whitelist_service"):
            entry = asyncio.run(WhitelistService.submit_email(store, data))
            with pytest.raises(ValueError):
                asyncio.run(WhitelistService.submit_email(store, data))
        assert entry.id in caplog.text
        assert "f***@example.com" in caplog.text
        assert "founder@example.com" not in caplog.text
