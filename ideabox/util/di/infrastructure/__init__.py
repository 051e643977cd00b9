"""Infrastructure providers."""

# Import bases
from .dns import DNSProvider
from .email import EmailProvider
from .events import EventsProvider
from .oauth import OAuthProvider
from .persistence import PersistenceProvider
from .traefik import TraefikProvider

# Import implementations (needed for __subclasses__())
from .dns import ProdDNSProvider  # noqa: F401
from .email import ProdEmailProvider  # noqa: F401
from .events import ProdEventsProvider  # noqa: F401
from .oauth import ProdOAuthProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .traefik import ProdTraefikProvider  # noqa: F401

__all__ = [
    "DNSProvider",
    "EmailProvider",
    "EventsProvider",
    "OAuthProvider",
    "PersistenceProvider",
    "TraefikProvider",
    "ProdDNSProvider",
    "ProdEmailProvider",
    "ProdEventsProvider",
    "ProdOAuthProvider",
    "ProdPersistenceProvider",
    "ProdTraefikProvider",
]
