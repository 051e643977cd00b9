"""Mock providers for testing."""

from .dns import MockDNSProvider
from .email import MockEmailProvider
from .events import MockEventsProvider
from .oauth import MockOAuthProvider
from .persistence import MockPersistenceProvider
from .traefik import MockTraefikProvider
from .container import build_test_container

__all__ = [
    "MockDNSProvider",
    "MockEmailProvider",
    "MockEventsProvider",
    "MockOAuthProvider",
    "MockPersistenceProvider",
    "MockTraefikProvider",
    "build_test_container",
]
