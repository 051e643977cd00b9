"""DNS resolvers for the A record check on added domains."""

import dns.asyncresolver
import dns.exception
import dns.resolver
import logfire

from ideabox.domain.service.domain_service import DNSResolver


class DnspythonResolver(DNSResolver):
    """Resolver using the system's configured nameservers."""

    async def resolve_a(self, host: str) -> list[str]:
        """Return the IPv4 addresses of a host, empty if the lookup failed."""
        try:
            answers = await dns.asyncresolver.resolve(host, "A")
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return []
        except dns.exception.DNSException as e:
            logfire.warn("DNS lookup failed", host=host, error=str(e))
            return []
        return [rdata.address for rdata in answers]


class StaticDNSResolver(DNSResolver):
    """Resolver for testing.

    Hosts listed in ``records`` resolve to their addresses; any other host
    resolves to ``default_address``, or to nothing when that is None.
    """

    def __init__(self, default_address: str | None = None) -> None:
        self.default_address = default_address
        self.records: dict[str, list[str]] = {}

    async def resolve_a(self, host: str) -> list[str]:
        """Return the configured addresses of a host."""
        if host in self.records:
            return self.records[host]
        return [self.default_address] if self.default_address else []
