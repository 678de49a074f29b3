"""Value types for the i18n marker facade.

Defines the fallback policies used when no markers are registered and the
parsed locale tag returned by locale detectors.
"""

from dataclasses import dataclass
from enum import Enum

from babel import Locale, UnknownLocaleError
from babel.core import parse_locale

DEFAULT_LANGUAGE = "en"


class FallbackPolicy(str, Enum):
    """Plural selection used by ``ng`` when no markers are registered.

    PLURAL_HEURISTIC is the version 1 behaviour: ``n == 1`` selects the
    singular form, anything else the plural form. SINGULAR always returns
    the singular form regardless of ``n``.
    """

    PLURAL_HEURISTIC = "plural_heuristic"
    SINGULAR = "singular"

    def select(self, msgid: str, msgid_plural: str, n: int) -> str:
        """Pick the untranslated form for count ``n``.

        Args:
            msgid: Singular form.
            msgid_plural: Plural form.
            n: Count, any integer.

        Returns:
            The selected form, unchanged.
        """
        if self is FallbackPolicy.PLURAL_HEURISTIC and n != 1:
            return msgid_plural
        return msgid


@dataclass(frozen=True)
class LocaleTag:
    """Parsed locale identifier.

    Attributes:
        language: Base language subtag (e.g., "en").
        territory: Region subtag (e.g., "ZA"), empty if absent.
        script: Script subtag (e.g., "Hant"), empty if absent.
        variant: Variant subtag (e.g., "POSIX"), empty if absent.
    """

    language: str
    territory: str = ""
    script: str = ""
    variant: str = ""

    @classmethod
    def from_identifier(cls, value: str) -> "LocaleTag":
        """Split a BCP 47 or POSIX locale identifier into its subtags.

        Checks syntax only; the language need not be known to CLDR and no
        aliases are applied, so "tl_PH" keeps "tl" and "ber_MA" parses.

        Args:
            value: Locale identifier, e.g. "fr-CA" or "en_ZA.UTF-8".

        Returns:
            LocaleTag instance.

        Raises:
            ValueError: If the identifier is empty or malformed.
        """
        identifier = _strip_identifier(value)
        parts = parse_locale(identifier, sep=_separator(identifier))
        language, territory, script, variant = parts[:4]
        return cls(
            language=language,
            territory=territory or "",
            script=script or "",
            variant=variant or "",
        )

    @classmethod
    def from_string(cls, value: str) -> "LocaleTag":
        """Parse a BCP 47 or POSIX locale identifier known to CLDR.

        Accepts "en-ZA", "en_ZA", "en_ZA.UTF-8", "de_DE@euro" and "en".

        Args:
            value: Locale identifier.

        Returns:
            LocaleTag instance.

        Raises:
            ValueError: If the identifier is empty, malformed or unknown.
        """
        identifier = _strip_identifier(value)
        try:
            locale = Locale.parse(identifier, sep=_separator(identifier))
        except (ValueError, UnknownLocaleError) as e:
            raise ValueError(f"Unsupported locale: {value}") from e

        return cls(
            language=locale.language,
            territory=locale.territory or "",
            script=locale.script or "",
            variant=locale.variant or "",
        )

    @property
    def base(self) -> str:
        """Get the base language subtag (e.g., "en" from "en-ZA")."""
        return self.language

    def __str__(self) -> str:
        """Return the BCP 47 form (e.g., "en-ZA")."""
        parts = [self.language, self.script, self.territory, self.variant]
        return "-".join(part for part in parts if part)


def _strip_identifier(value: str) -> str:
    """Drop the encoding and @modifier suffixes ("de_DE.UTF-8@euro" -> "de_DE")."""
    identifier = (value or "").strip().split(".")[0].split("@")[0]
    if not identifier:
        raise ValueError(f"Empty locale identifier: {value!r}")
    return identifier


def _separator(identifier: str) -> str:
    return "-" if "-" in identifier else "_"
