"""i18n marker facade, version 2.

Adds ``current_locale`` to the capability set. Without markers, ``ng``
always returns the singular form and ``current_locale`` reports the base
language detected from the environment, or "en" if detection fails.

The slot here is independent of the one in ``infrastructure.i18n``;
applications register LocaleMarkerAPI markers with this module's
``initialise``.
"""

from typing import Optional

from infrastructure.i18n.facade import LocaleTranslationFacade
from infrastructure.i18n.markers import LocaleMarkerAPI
from infrastructure.i18n.models import FallbackPolicy

_facade = LocaleTranslationFacade(policy=FallbackPolicy.SINGULAR)


def initialise(markers: Optional[LocaleMarkerAPI]) -> None:
    """Register markers; must be called before translation is enabled."""
    _facade.initialise(markers)


def is_initialised() -> bool:
    return _facade.is_initialised()


def g(msgid: str) -> str:
    """Shorthand for gettext behaviour."""
    return _facade.g(msgid)


def ng(msgid: str, msgid_plural: str, n: int) -> str:
    """Shorthand for ngettext behaviour. Falls back to ``msgid`` for any n."""
    return _facade.ng(msgid, msgid_plural, n)


def current_locale() -> str:
    """Base language of the current locale, e.g. "en"."""
    return _facade.current_locale()


__all__ = ["initialise", "is_initialised", "g", "ng", "current_locale"]
