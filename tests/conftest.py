import pytest

from mimesniff.core import Sniffer, default_sniffer
from mimesniff.registry import Registry


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def sniffer(registry: Registry) -> Sniffer:
    """A Sniffer with its own empty registry, isolated from the process-wide one."""
    return Sniffer(registry)


@pytest.fixture
def default_registry():
    """The process-wide registry, emptied before and after the test."""
    reg = default_sniffer().registry
    reg.clear()
    yield reg
    reg.clear()
