"""
Tests for the in-memory store and default content seeding.
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from landing_api.app.core import store as store_module
from landing_api.app.core.store import DEFAULT_CONTENT, InMemoryStore, init_store


def test_new_store_is_empty():
    s = InMemoryStore()
    assert s.list_whitelist_entries() == []
    assert s.list_content_sections() == []


def test_seeded_store_has_four_sections_in_order(store):
    sections = store.list_content_sections()
    assert len(sections) == 4
    assert [s.section for s in sections] == ["hero", "about", "solutions", "team"]


def test_seeded_content_matches_defaults(store):
    hero = store.get_content_section("hero")
    assert hero.content == {
        "title": "BridgeGas",
        "tagline": "Bridging TradFi & Crypto Payment Solutions",
    }
    team = store.get_content_section("team")
    assert team.content["kirill"]["role"] == "Founder & CEO"
    assert "footerNote" in team.content


def test_create_whitelist_entry_is_listed_once():
    s = InMemoryStore()
    entry = s.create_whitelist_entry("founder@example.com")
    entries = s.list_whitelist_entries()
    assert [e.email for e in entries].count("founder@example.com") == 1
    assert entries[0].id == entry.id
    assert entries[0].created_at.tzinfo is not None


def test_create_whitelist_entry_does_not_enforce_uniqueness():
    s = InMemoryStore()
    first = s.create_whitelist_entry("a@b.com")
    second = s.create_whitelist_entry("a@b.com")
    entries = s.list_whitelist_entries()
    assert len(entries) == 2
    assert first.id != second.id
    assert {e.id for e in entries} == {first.id, second.id}


def test_whitelist_listing_keeps_insertion_order():
    s = InMemoryStore()
    for email in ["one@example.com", "two@example.com", "three@example.com"]:
        s.create_whitelist_entry(email)
    assert [e.email for e in s.list_whitelist_entries()] == [
        "one@example.com",
        "two@example.com",
        "three@example.com",
    ]


def test_get_missing_section_returns_none(store):
    assert store.get_content_section("nonexistent") is None


def test_get_section_is_exact_match(store):
    assert store.get_content_section("Hero") is None
    assert store.get_content_section(" hero") is None


def test_upsert_twice_keeps_single_record_and_id():
    s = InMemoryStore()
    first = s.upsert_content_section("pricing", {"heading": "one"})
    second = s.upsert_content_section("pricing", {"heading": "two"})
    records = [r for r in s.list_content_sections() if r.section == "pricing"]
    assert len(records) == 1
    assert records[0].content == {"heading": "two"}
    assert records[0].id == first.id == second.id


def test_upsert_hero_refreshes_updated_at(store):
    before = store.get_content_section("hero")
    store.upsert_content_section("hero", {"title": "X", "tagline": "Y"})
    after = store.get_content_section("hero")
    assert after.content == {"title": "X", "tagline": "Y"}
    assert after.updated_at >= before.updated_at
    assert after.id == before.id


def test_updated_at_never_goes_backwards():
    s = InMemoryStore()
    first = s.upsert_content_section("hero", {"title": "A", "tagline": "B"})
    earlier = first.updated_at - timedelta(hours=1)
    with patch.object(store_module, "_now", return_value=earlier):
        second = s.upsert_content_section("hero", {"title": "C", "tagline": "D"})
    assert second.updated_at == first.updated_at


def test_new_section_gets_current_timestamp():
    s = InMemoryStore()
    fixed = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    with patch.object(store_module, "_now", return_value=fixed):
        record = s.upsert_content_section("faq", {"q": "a"})
    assert record.updated_at == fixed


def test_returned_records_are_copies(store):
    hero = store.get_content_section("hero")
    hero.content["title"] = "mutated"
    assert store.get_content_section("hero").content["title"] == "BridgeGas"

    listed = store.list_content_sections()
    listed.clear()
    assert len(store.list_content_sections()) == 4


def test_upsert_copies_input_document():
    s = InMemoryStore()
    doc = {"card": {"title": "T"}}
    s.upsert_content_section("extra", doc)
    doc["card"]["title"] = "changed"
    assert s.get_content_section("extra").content == {"card": {"title": "T"}}


def test_init_store_upserts_each_default_in_order():
    s = InMemoryStore()
    with patch.object(s, "upsert_content_section", wraps=s.upsert_content_section) as spy:
        init_store(s)
    assert [c.args[0] for c in spy.call_args_list] == [item["section"] for item in DEFAULT_CONTENT]


def test_init_store_again_does_not_duplicate(store):
    ids = {r.section: r.id for r in store.list_content_sections()}
    init_store(store)
    again = store.list_content_sections()
    assert len(again) == 4
    assert {r.section: r.id for r in again} == ids
