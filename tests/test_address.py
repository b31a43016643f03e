import pytest

from browser_model.address import AddressNormalizer
from browser_model.config import NavigationConfig
from browser_model.errors import AddressResolutionError, ErrorKind
from browser_model.messages import MessageProvider
from browser_model.resolver import OfflineResolver
from browser_model.types import Location


@pytest.fixture
def normalizer():
    return AddressNormalizer(OfflineResolver())


def test_fully_qualified_address_matches_direct_parse(normalizer):
    address = "https://Example.com/docs?page=2#intro"
    assert normalizer.complete(address) == OfflineResolver().parse(address)


def test_fully_qualified_address_ignores_current(normalizer):
    current = Location("http://base.example")
    assert normalizer.complete("https://other.example", current) == Location("https://other.example")


def test_bare_host_gets_default_scheme(normalizer):
    assert normalizer.complete("example.com") == Location("http://example.com")


def test_relative_to_current_location(normalizer):
    current = Location("http://example.com")
    assert normalizer.complete("/path", current) == Location("http://example.com//path")
    assert normalizer.complete("page.html", current) == Location("http://example.com/page.html")


def test_relative_fallback_wins_over_default_scheme(normalizer):
    # the string heuristic appends to the current location first
    current = Location("http://example.com/dir")
    assert normalizer.complete("other.org", current) == Location("http://example.com/dir/other.org")


def test_no_dot_segment_resolution(normalizer):
    current = Location("http://example.com/a/b")
    assert normalizer.complete("../c", current) == Location("http://example.com/a/b/../c")


def test_candidates_order(normalizer):
    current = Location("http://example.com")
    assert normalizer.candidates("x", current) == ["x", "http://example.com/x", "http://x"]
    assert normalizer.candidates("x") == ["x", "http://x"]


def test_default_scheme_comes_from_config():
    config = NavigationConfig(default_scheme="https://")
    normalizer = AddressNormalizer(OfflineResolver(config))
    assert normalizer.complete("example.com") == Location("https://example.com")


@pytest.mark.parametrize("address", ["", "has space", None])
def test_unresolvable_address_raises(normalizer, address):
    with pytest.raises(AddressResolutionError) as excinfo:
        normalizer.complete(address)
    assert excinfo.value.kind is ErrorKind.ADDRESS_RESOLUTION


def test_error_message_uses_message_provider():
    messages = MessageProvider({ErrorKind.ADDRESS_RESOLUTION: "bad: {address}"})
    normalizer = AddressNormalizer(OfflineResolver(), messages=messages)
    with pytest.raises(AddressResolutionError, match="bad: a b") as excinfo:
        normalizer.complete("a b")
    assert excinfo.value.address == "a b"


class StrictHttpsResolver(OfflineResolver):
    """Rejects anything but https with a plain ValueError."""

    def parse(self, address):
        if not address.startswith("https://"):
            raise ValueError(f"not https: {address!r}")
        return super().parse(address)


def test_plain_value_error_moves_to_next_candidate():
    config = NavigationConfig(default_scheme="https://")
    normalizer = AddressNormalizer(StrictHttpsResolver(config))
    assert normalizer.complete("example.com") == Location("https://example.com")
    current = Location("https://example.com")
    assert normalizer.complete("docs", current) == Location("https://example.com/docs")


def test_plain_value_error_on_every_candidate_raises():
    normalizer = AddressNormalizer(StrictHttpsResolver())
    with pytest.raises(AddressResolutionError):
        normalizer.complete("example.com")
