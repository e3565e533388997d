"""Tests for category slug generation."""

from app.utils.slugify import normalize_name, slugify


class TestSlugify:
    def test_ascii(self):
        assert slugify("  Home   Appliances! ") == "home-appliances"

    def test_arabic_letters_are_kept(self):
        assert slugify("هواتف ذكية") == "هواتف-ذكية"

    def test_fallback_when_nothing_left(self):
        slug = slugify("!!!")
        assert len(slug) == 32
        assert all(c in "0123456789abcdef" for c in slug)


def test_normalize_name():
    assert normalize_name("  Smart    Phones ") == "Smart Phones"
    assert normalize_name(None) == ""
