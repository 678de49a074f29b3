"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_tag,
    make_stub_locale_markers,
    make_stub_markers,
)

__all__ = [
    "make_locale_tag",
    "make_stub_locale_markers",
    "make_stub_markers",
]
