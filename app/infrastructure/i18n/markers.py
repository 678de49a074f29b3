"""Capability sets an application implements to enable translation.

Library code never implements these; the application registers one instance
with the facade at start-up. Any object with matching methods qualifies.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MarkerAPI(Protocol):
    """Message lookup and plural selection.

    ``g`` is the shorthand for gettext behaviour, ``ng`` for ngettext.
    """

    def g(self, msgid: str) -> str:  # pragma: no cover - typing helper
        ...

    def ng(
        self, msgid: str, msgid_plural: str, n: int
    ) -> str:  # pragma: no cover - typing helper
        ...


@runtime_checkable
class LocaleMarkerAPI(MarkerAPI, Protocol):
    """MarkerAPI plus the active locale.

    ``current_locale`` should return a base language code such as "en"; the
    facade passes it through without normalisation.
    """

    def current_locale(self) -> str:  # pragma: no cover - typing helper
        ...
