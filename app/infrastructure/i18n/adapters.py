"""Adapters exposing ready-made translation catalogs as markers."""

from babel.support import NullTranslations

from infrastructure.i18n.models import LocaleTag


class TranslationsMarkers:
    """LocaleMarkerAPI backed by a gettext translations object.

    Works with ``babel.support.Translations`` and with any stdlib
    ``gettext.NullTranslations`` subclass.

    Usage:
        from babel.support import Translations
        from infrastructure.i18n import v2

        translations = Translations.load("locales", ["fr_CA"], domain="app")
        v2.initialise(TranslationsMarkers(translations, "fr-CA"))

    Attributes:
        translations: Catalog providing gettext/ngettext.
        locale: Parsed LocaleTag the catalog was loaded for.
    """

    def __init__(self, translations: NullTranslations, locale: str):
        """Initialize the adapter.

        Args:
            translations: Catalog providing gettext/ngettext.
            locale: Locale identifier of the catalog (e.g., "fr-CA").

        Raises:
            ValueError: If locale is not a known locale identifier.
        """
        self.translations = translations
        self.locale = LocaleTag.from_string(locale)

    def g(self, msgid: str) -> str:
        return self.translations.gettext(msgid)

    def ng(self, msgid: str, msgid_plural: str, n: int) -> str:
        return self.translations.ngettext(msgid, msgid_plural, n)

    def current_locale(self) -> str:
        return self.locale.base
