import pytest


def pytest_addoption(parser):
    group = parser.getgroup("sbpatches")
    group.addoption("--quick", action="store_true", default=False,
                    help="skip the randomized diff and patch round trips")
    group.addoption("--slow", action="store_true", default=False,
                    help="run the randomized round trips only")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--slow"):
        return
    only_slow = pytest.mark.skip(reason="--slow given, not a randomized round trip")
    for item in items:
        if 'slow' not in getattr(item, 'fixturenames', ()):
            item.add_marker(only_slow)
