import pytest

from browser_model import NavigationModel
from browser_model.errors import UnreachableAddressError
from browser_model.resolver import ResourceResolver


class FakeResolver(ResourceResolver):
    """Real parsing; reachability decided by a set of unreachable URLs."""

    def __init__(self, unreachable=(), config=None):
        super().__init__(config)
        self.unreachable = set(unreachable)
        self.checked = []

    def check_reachable(self, location):
        self.checked.append(str(location))
        if str(location) in self.unreachable:
            raise UnreachableAddressError(f"{location} is down")


class FakeDriver:
    def __init__(self, fail_on=(), ready_state="complete"):
        self.fail_on = set(fail_on)
        self.ready_state = ready_state
        self.visited = []
        self.quit_called = False

    def get(self, url):
        from selenium.common.exceptions import WebDriverException

        self.visited.append(url)
        if url in self.fail_on:
            raise WebDriverException("net::ERR_NAME_NOT_RESOLVED")

    def execute_script(self, script):
        return self.ready_state

    def quit(self):
        self.quit_called = True


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def model(resolver):
    return NavigationModel(resolver)
