"""Translation facade holding the process-wide markers slot.

The facade delegates to registered markers and falls back to untranslated
text when none are registered, so library code can mark strings for
translation without depending on a translation backend.

None of the facade functions should be called while defining module-level
constants: the application has not registered its markers yet at import
time, and the untranslated text would be frozen in.
"""

import threading
from typing import Optional

from core.config import settings
from core.logging import get_module_logger
from infrastructure.i18n.detectors import (
    EnvironmentLocaleDetector,
    LocaleDetector,
    StaticLocaleDetector,
    detect_language,
)
from infrastructure.i18n.markers import LocaleMarkerAPI, MarkerAPI
from infrastructure.i18n.models import FallbackPolicy

logger = get_module_logger()


class TranslationFacade:
    """Delegates g/ng to registered markers, with a fallback when unset.

    The slot starts empty and holds at most one markers instance. Registering
    again replaces the previous instance.

    Attributes:
        policy: FallbackPolicy applied by ``ng`` when no markers are set.
    """

    def __init__(self, policy: FallbackPolicy = FallbackPolicy.PLURAL_HEURISTIC):
        self.policy = policy
        self._markers: Optional[MarkerAPI] = None
        self._lock = threading.Lock()

    @property
    def markers(self) -> Optional[MarkerAPI]:
        """Currently registered markers, or None."""
        return self._markers

    def initialise(self, markers: Optional[MarkerAPI]) -> None:
        """Register the markers used for translation.

        Should be called once during start-up, before library code runs.
        Calling it again replaces the previous markers; passing None disables
        translation.

        Args:
            markers: Application-provided markers, or None.
        """
        with self._lock:
            replaced = self._markers is not None
            self._markers = markers
        logger.debug(
            "markers_initialised",
            markers=type(markers).__name__ if markers is not None else None,
            replaced=replaced,
            policy=self.policy.value,
        )

    def is_initialised(self) -> bool:
        return self._markers is not None

    def g(self, msgid: str) -> str:
        """Look up the translation for ``msgid``.

        Returns ``msgid`` unchanged when no markers are registered.
        """
        markers = self._markers
        if markers is None:
            return msgid
        return markers.g(msgid)

    def ng(self, msgid: str, msgid_plural: str, n: int) -> str:
        """Look up the plural-aware translation for count ``n``.

        When no markers are registered the form is chosen by ``policy``.
        """
        markers = self._markers
        if markers is None:
            return self.policy.select(msgid, msgid_plural, n)
        return markers.ng(msgid, msgid_plural, n)


class LocaleTranslationFacade(TranslationFacade):
    """TranslationFacade that also reports the current locale.

    Attributes:
        detector: LocaleDetector used when no markers are registered.
        fallback_language: Language returned when detection fails.
    """

    def __init__(
        self,
        policy: FallbackPolicy = FallbackPolicy.SINGULAR,
        detector: Optional[LocaleDetector] = None,
        fallback_language: Optional[str] = None,
    ):
        super().__init__(policy=policy)
        self.detector = detector or default_detector()
        self.fallback_language = fallback_language or settings.i18n.fallback_language

    def current_locale(self) -> str:
        """Return the base language of the current locale (e.g., "en").

        Registered markers answer directly and their value is returned as is.
        Otherwise the detector is queried, falling back to
        ``fallback_language`` if detection fails.
        """
        markers: Optional[LocaleMarkerAPI] = self._markers
        if markers is None:
            return detect_language(self.detector, self.fallback_language)
        return markers.current_locale()


def default_detector() -> LocaleDetector:
    """Build the detector configured in settings.

    Returns:
        StaticLocaleDetector when I18N_LOCALE_OVERRIDE is set, otherwise an
        EnvironmentLocaleDetector for I18N_LOCALE_CATEGORY.
    """
    if settings.i18n.locale_override:
        return StaticLocaleDetector(settings.i18n.locale_override)
    return EnvironmentLocaleDetector(category=settings.i18n.locale_category)
