"""DNS infrastructure providers."""

from dishka import Scope, provide

from ideabox.adapter.dnslookup import DnspythonResolver
from ideabox.domain.service import DNSResolver
from ideabox.util.di.base import ProviderBase


class DNSProvider(ProviderBase):
    """DNS component base."""

    __mock_component__ = "dns"


class ProdDNSProvider(DNSProvider):
    """Production DNS provider (dnspython)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_dns_resolver(self) -> DNSResolver:
        """Provide resolver using the system nameservers."""
        return DnspythonResolver()
