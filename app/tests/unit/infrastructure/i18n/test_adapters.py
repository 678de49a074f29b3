"""Tests for infrastructure.i18n.adapters module."""

from unittest.mock import Mock

import pytest
from babel.support import Translations

from infrastructure.i18n import LocaleMarkerAPI, TranslationsMarkers, v2


class TestTranslationsMarkers:
    """Tests for TranslationsMarkers adapter."""

    @pytest.fixture
    def null_markers(self):
        """Adapter over an empty catalog."""
        return TranslationsMarkers(Translations(), "fr-CA")

    def test_satisfies_locale_marker_api(self, null_markers):
        assert isinstance(null_markers, LocaleMarkerAPI)

    def test_empty_catalog_g(self, null_markers):
        assert null_markers.g("Hello") == "Hello"

    def test_empty_catalog_ng(self, null_markers):
        """An empty gettext catalog uses the n == 1 rule."""
        assert null_markers.ng("file", "files", 1) == "file"
        assert null_markers.ng("file", "files", 5) == "files"

    def test_current_locale_is_base_language(self, null_markers):
        assert null_markers.current_locale() == "fr"

    def test_delegates_to_catalog(self):
        translations = Mock()
        translations.gettext.return_value = "Bonjour"
        translations.ngettext.return_value = "fichiers"
        markers = TranslationsMarkers(translations, "fr_FR")

        assert markers.g("Hello") == "Bonjour"
        assert markers.ng("file", "files", 3) == "fichiers"
        translations.gettext.assert_called_once_with("Hello")
        translations.ngettext.assert_called_once_with("file", "files", 3)

    def test_invalid_locale_raises(self):
        with pytest.raises(ValueError):
            TranslationsMarkers(Translations(), "xx-XX")

    def test_registered_with_v2(self, null_markers):
        v2.initialise(null_markers)
        assert v2.current_locale() == "fr"
        assert v2.ng("file", "files", 5) == "files"
