from __future__ import annotations

from app.application.utils.booking_id import generate_booking_id


def test_strips_punctuation_and_uppercases():
    """Test that punctuation and spaces are dropped and the name part is upper-cased."""
    assert generate_booking_id("O'Brien 3!", 1716200000123) == "BK-OBRIEN-000123"


def test_short_names_are_not_padded():
    """Test that names shorter than six characters are kept as is."""
    assert generate_booking_id("Al", 1716200456789) == "BK-AL-456789"


def test_non_ascii_letters_are_dropped():
    """Test that letters outside A-Z are stripped."""
    assert generate_booking_id("Zoë Müller", 1716200000999) == "BK-ZOMLLE-000999"


def test_same_name_same_millisecond_collides():
    """Test that no hidden state makes ids unique."""
    assert generate_booking_id("Jane Doe", 1716200000123) == generate_booking_id("Jane Doe", 1716200000123)
