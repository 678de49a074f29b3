"""Tests for the module-level API in infrastructure.i18n."""

from infrastructure import i18n
from tests.factories.i18n import StubMarkers


class TestUninitialised:
    """Behaviour before any markers are registered."""

    def test_not_initialised(self):
        assert not i18n.is_initialised()

    def test_g_returns_msgid(self):
        assert i18n.g("Hello") == "Hello"
        assert i18n.g("") == ""

    def test_ng_singular_for_one(self):
        assert i18n.ng("file", "files", 1) == "file"

    def test_ng_plural_for_other_counts(self):
        """Every n != 1 selects the plural form."""
        assert i18n.ng("file", "files", 5) == "files"
        assert i18n.ng("file", "files", 0) == "files"
        assert i18n.ng("file", "files", 2) == "files"
        assert i18n.ng("file", "files", -1) == "files"


class TestInitialised:
    """Behaviour after markers are registered."""

    def test_hello_scenario(self):
        """g() switches from identity to the markers after initialise()."""
        assert i18n.g("Hello") == "Hello"
        i18n.initialise(StubMarkers(suffix="!"))
        assert i18n.g("Hello") == "Hello!"
        assert i18n.is_initialised()

    def test_ng_delegates_for_every_count(self, stub_markers, plural_cases):
        i18n.initialise(stub_markers)
        for msgid, msgid_plural, n in plural_cases:
            assert i18n.ng(msgid, msgid_plural, n) == stub_markers.ng(
                msgid, msgid_plural, n
            )

    def test_replacement(self):
        """A second initialise() fully replaces the first markers."""
        i18n.initialise(StubMarkers(suffix="-a"))
        i18n.initialise(StubMarkers(suffix="-b"))
        assert i18n.g("Hello") == "Hello-b"
        assert i18n.ng("file", "files", 1) == "file|files|1-b"

    def test_does_not_affect_v2(self, stub_markers):
        """The v1 and v2 slots are independent."""
        from infrastructure.i18n import v2

        i18n.initialise(stub_markers)
        assert not v2.is_initialised()
        assert v2.g("Hello") == "Hello"
