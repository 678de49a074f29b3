"""Feature-level fixtures for i18n facade tests.

Resets the module-level markers slots and isolates locale environment
variables so detection results do not depend on the host.
"""

import pytest

from infrastructure import i18n
from infrastructure.i18n import v2
from tests.factories.i18n import (
    FailingLocaleDetector,
    FixedLocaleDetector,
    make_locale_tag,
    make_stub_locale_markers,
    make_stub_markers,
)

LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LC_MESSAGES", "LANG")


@pytest.fixture(autouse=True)
def reset_markers():
    """Start and finish each test with both slots empty."""
    i18n.initialise(None)
    v2.initialise(None)
    yield
    i18n.initialise(None)
    v2.initialise(None)


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove every locale variable the environment detector reads."""
    for name in LOCALE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def stub_markers():
    return make_stub_markers()


@pytest.fixture
def stub_locale_markers():
    return make_stub_locale_markers()


@pytest.fixture
def en_za_detector():
    """Detector reporting en-ZA."""
    return FixedLocaleDetector(make_locale_tag("en", "ZA"))


@pytest.fixture
def failing_detector():
    return FailingLocaleDetector()


@pytest.fixture
def plural_cases():
    """(msgid, msgid_plural, n) triples covering the sign and value edges."""
    return [
        ("file", "files", 1),
        ("file", "files", 0),
        ("file", "files", 2),
        ("file", "files", 5),
        ("file", "files", -1),
        ("file", "files", 10**12),
    ]
