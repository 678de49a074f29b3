"""i18n marker facade - implementation-agnostic translation API.

Library packages mark user-facing strings with ``g`` and ``ng``. The
application either:

1. registers markers implementing MarkerAPI with ``initialise``, or
2. leaves the package uninitialised, disabling translation.

Without markers, ``g`` returns its input and ``ng`` returns the singular form
when ``n == 1`` and the plural form otherwise.

Main components:
- markers: MarkerAPI and LocaleMarkerAPI capability sets
- models: FallbackPolicy, LocaleTag
- facade: TranslationFacade and LocaleTranslationFacade
- detectors: environment and static locale detectors
- adapters: TranslationsMarkers for babel/gettext catalogs
- v2: module-level API adding ``current_locale``, singular-only fallback

Example:
    from infrastructure import i18n

    # At application startup
    i18n.initialise(app_markers)

    # In library code
    label = i18n.ng("{n} file", "{n} files", n).format(n=n)
"""

from typing import Optional

from infrastructure.i18n.adapters import TranslationsMarkers
from infrastructure.i18n.detectors import (
    EnvironmentLocaleDetector,
    LocaleDetectionError,
    LocaleDetector,
    StaticLocaleDetector,
    detect_language,
)
from infrastructure.i18n.facade import LocaleTranslationFacade, TranslationFacade
from infrastructure.i18n.markers import LocaleMarkerAPI, MarkerAPI
from infrastructure.i18n.models import DEFAULT_LANGUAGE, FallbackPolicy, LocaleTag

_facade = TranslationFacade(policy=FallbackPolicy.PLURAL_HEURISTIC)


def initialise(markers: Optional[MarkerAPI]) -> None:
    """Register markers; must be called before translation is enabled.

    It is valid never to call it and still use ``g`` and ``ng``.
    """
    _facade.initialise(markers)


def is_initialised() -> bool:
    return _facade.is_initialised()


def g(msgid: str) -> str:
    """Shorthand for gettext behaviour."""
    return _facade.g(msgid)


def ng(msgid: str, msgid_plural: str, n: int) -> str:
    """Shorthand for ngettext behaviour."""
    return _facade.ng(msgid, msgid_plural, n)


__all__ = [
    "initialise",
    "is_initialised",
    "g",
    "ng",
    "MarkerAPI",
    "LocaleMarkerAPI",
    "FallbackPolicy",
    "LocaleTag",
    "DEFAULT_LANGUAGE",
    "TranslationFacade",
    "LocaleTranslationFacade",
    "LocaleDetector",
    "LocaleDetectionError",
    "EnvironmentLocaleDetector",
    "StaticLocaleDetector",
    "detect_language",
    "TranslationsMarkers",
]
