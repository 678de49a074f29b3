"""Locale detection for the facade's no-markers fallback.

Provides detectors that read the process locale from the environment or
return a fixed tag, and ``detect_language`` which reduces a detection result
to a base language and never fails.
"""

import os
from typing import Protocol, runtime_checkable

from core.logging import get_module_logger
from infrastructure.i18n.models import DEFAULT_LANGUAGE, LocaleTag

logger = get_module_logger()


class LocaleDetectionError(Exception):
    """Raised when a detector cannot determine a usable locale."""


@runtime_checkable
class LocaleDetector(Protocol):
    """Returns the current locale tag or raises LocaleDetectionError."""

    def detect(self) -> LocaleTag:  # pragma: no cover - typing helper
        ...


class EnvironmentLocaleDetector:
    """Detects the locale from process environment variables.

    Checks the configured category variable first, then LANGUAGE, LC_ALL,
    LC_CTYPE and LANG. The first well-formed value wins; BCP 47 ("fr-CA")
    and POSIX ("fr_CA.UTF-8") forms are both accepted, and the language is
    not required to be known to CLDR. "C" and "POSIX" resolve to
    en_US_POSIX.

    Attributes:
        category: Locale category variable checked first (e.g., "LC_MESSAGES").
    """

    FALLBACK_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG")

    def __init__(self, category: str = "LC_MESSAGES"):
        self.category = category
        self.log = logger.bind(category=category)

    @property
    def variables(self) -> tuple:
        return (self.category,) + tuple(
            name for name in self.FALLBACK_VARIABLES if name != self.category
        )

    def detect(self) -> LocaleTag:
        """Detect the environment locale.

        Returns:
            Parsed LocaleTag.

        Raises:
            LocaleDetectionError: If no variable holds a well-formed locale.
        """
        for name in filter(None, self.variables):
            value = os.environ.get(name)
            if not value:
                continue
            if name == "LANGUAGE" and ":" in value:
                value = value.split(":")[0]
            if value.split(".")[0] in ("C", "POSIX"):
                value = "en_US_POSIX"

            try:
                tag = LocaleTag.from_identifier(value)
            except ValueError:
                self.log.debug("skipped_malformed_locale", variable=name, value=value)
                continue

            self.log.debug("detected_environment_locale", variable=name, locale=str(tag))
            return tag

        raise LocaleDetectionError("No locale found in environment")


class StaticLocaleDetector:
    """Returns a fixed locale tag.

    Used for configuration overrides. The tag is parsed on each call so an
    invalid value surfaces as LocaleDetectionError rather than at start-up.
    """

    def __init__(self, identifier: str):
        self.identifier = identifier

    def detect(self) -> LocaleTag:
        try:
            return LocaleTag.from_identifier(self.identifier)
        except ValueError as e:
            raise LocaleDetectionError(str(e)) from e


def detect_language(
    detector: LocaleDetector,
    fallback: str = DEFAULT_LANGUAGE,
) -> str:
    """Return the detected base language, or ``fallback`` on failure.

    Args:
        detector: Detector to query.
        fallback: Language returned when detection fails (default: "en").

    Returns:
        Base language subtag such as "en".
    """
    try:
        return detector.detect().base
    except LocaleDetectionError as e:
        logger.debug("locale_detection_failed", error=str(e), fallback=fallback)
        return fallback
