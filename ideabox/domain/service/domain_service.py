"""Domain (website) domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
import pydantic
import tldextract

from ideabox.config import TraefikSettings
from ideabox.domain.error import ConflictError, NotFoundError, ValidationError
from ideabox.domain.event import DomainAdded, EventPublisher
from ideabox.domain.model import Domain, User
from ideabox.domain.model.common import utcnow
from ideabox.domain.repository import DomainRepository
from ideabox.domain.value import DomainId, DomainName, UserId

from .base import Service

# Offline extractor: uses the public suffix snapshot bundled with tldextract
_extract = tldextract.TLDExtract(suffix_list_urls=())


class DNSResolver:
    """Looks up DNS records for a host name."""

    async def resolve_a(self, host: str) -> list[str]:
        """Return the IPv4 addresses of a host.

        Args:
            host: Fully qualified host name

        Returns:
            Addresses from the A records, empty if the lookup failed
        """
        raise NotImplementedError


class RouteRegistry:
    """Reverse proxy routing table for added domains."""

    async def register(self, name: str) -> None:
        """Route ``name`` and ``www.name`` to the widget service.

        Raises:
            InternalFailureError: If the routing store could not be written
        """
        raise NotImplementedError


def parse_domain_name(name: str) -> DomainName:
    """Parse user input into a DomainName.

    Raises:
        ValidationError: If the input is not a fully qualified domain name
    """
    try:
        return DomainName(name)
    except pydantic.ValidationError:
        raise ValidationError("Not an FQDN")


def split_host(name: DomainName) -> tuple[str, str]:
    """Split a host into (subdomain, registered domain) per the public suffix list.

    Raises:
        ValidationError: If the host has no registered domain (e.g. a bare suffix)
    """
    parts = _extract(name.root)
    if not parts.domain or not parts.suffix:
        raise ValidationError("Not an FQDN")
    return parts.subdomain, f"{parts.domain}.{parts.suffix}"


class DomainService(Service):
    """Domain service for registered websites."""

    def __init__(
        self,
        domain_repository: DomainRepository,
        dns_resolver: DNSResolver,
        route_registry: RouteRegistry,
        event_publisher: EventPublisher,
        traefik_settings: TraefikSettings,
    ) -> None:
        """Initialize domain service.

        Args:
            domain_repository: Domain repository
            dns_resolver: DNS lookups for the A record check
            route_registry: Traefik routing store
            event_publisher: Outbound channel for DomainAdded events
            traefik_settings: Expected IP and service name
        """
        self.domain_repository = domain_repository
        self.dns_resolver = dns_resolver
        self.route_registry = route_registry
        self.event_publisher = event_publisher
        self.traefik_settings = traefik_settings

    async def verify_dns(self, name: DomainName) -> bool:
        """Check that the domain's first A record points at Traefik."""
        addresses = await self.dns_resolver.resolve_a(name.root)
        logfire.debug("Resolved A records", domain=name.root, addresses=addresses)
        return bool(addresses) and addresses[0] == self.traefik_settings.ip

    async def create_domain(self, user: User, name: str) -> Domain:
        """Register a second level domain for a user.

        The domain is only stored when its DNS already points at us. Once
        stored, Traefik routes are written and DomainAdded is published.

        Raises:
            ValidationError: If the name is not a second level domain or DNS
                is not configured
            ConflictError: If the domain is already registered
            InternalFailureError: If the routes could not be written
        """
        with logfire.span("domain_service.create_domain", user_id=str(user.id), name=name):
            domain_name = parse_domain_name(name)
            subdomain, registered = split_host(domain_name)
            if subdomain or registered != domain_name.root:
                raise ValidationError("Not a second level domain")

            if not await self.verify_dns(domain_name):
                logfire.warn("DNS not configured", domain=domain_name.root)
                raise ValidationError("DNS not configured")

            if await self.domain_repository.find_by_name(domain_name):
                raise ConflictError("name", domain_name.root)

            domain = Domain(
                id=DomainId(uuid4()),
                name=domain_name,
                user_id=user.id,
                has_verified_dns=True,
                last_verified_dns=utcnow(),
            )
            saved = await self.domain_repository.save(domain)
            await self.route_registry.register(saved.name.root)

            self.event_publisher.publish(DomainAdded(domain=saved))
            logfire.info("Domain created", domain_id=str(saved.id), name=saved.name.root)
            return saved

    async def get_domain(self, domain_id: DomainId) -> Domain:
        """Get an active domain.

        Raises:
            NotFoundError: If the domain doesn't exist
        """
        domain = await self.domain_repository.find_by_id(domain_id)
        if not domain:
            logfire.warn("Domain not found", domain_id=str(domain_id))
            raise NotFoundError("Domain", str(domain_id))
        return domain

    async def get_domain_by_name(self, name: str) -> Domain:
        """Look up a domain by host name.

        ``www.`` hosts resolve to their registered domain.

        Raises:
            ValidationError: If the host is not an FQDN or is another subdomain
            NotFoundError: If the domain isn't registered
        """
        with logfire.span("domain_service.get_domain_by_name", name=name):
            subdomain, registered = split_host(parse_domain_name(name))
            if subdomain not in ("", "www"):
                raise ValidationError("Only second level domains are valid")

            domain = await self.domain_repository.find_by_name(DomainName(registered))
            if not domain:
                raise NotFoundError("Domain", registered)
            return domain

    async def list_domains_of_user(self, user_id: UserId) -> list[Domain]:
        """Active domains registered by a user."""
        return await self.domain_repository.find_by_user(user_id, include_deleted=False)

    async def list_all(self, include_deleted: bool = False) -> list[Domain]:
        """All domains, optionally including soft-deleted ones."""
        return await self.domain_repository.find_all(include_deleted=include_deleted)

    async def list_deleted(self) -> list[Domain]:
        """Soft-deleted domains only."""
        return await self.domain_repository.find_deleted()

    async def update_domain(
        self,
        actor: User,
        domain_id: DomainId,
        name: str | None = None,
        has_verified_dns: bool | None = None,
        last_verified_dns: datetime | None = None,
    ) -> Domain:
        """Update a domain's fields; omitted fields are left unchanged.

        Raises:
            NotFoundError: If the domain doesn't exist
            NotAuthorizedError: If actor is neither owner nor admin
            ConflictError: If the new name is already registered
        """
        with logfire.span(
            "domain_service.update_domain",
            domain_id=str(domain_id),
            actor_id=str(actor.id),
        ):
            domain = await self.get_domain(domain_id)
            self.ensure_can_modify(actor, domain.user_id, "domain", str(domain_id))

            updates: dict = {}
            if name is not None:
                updates["name"] = parse_domain_name(name)
            if has_verified_dns is not None:
                updates["has_verified_dns"] = has_verified_dns
            if last_verified_dns is not None:
                updates["last_verified_dns"] = last_verified_dns

            if not updates:
                return domain

            updates["updated_at"] = utcnow()
            saved = await self.domain_repository.save(domain.model_copy(update=updates))
            logfire.info("Domain updated", domain_id=str(domain_id), fields=sorted(updates))
            return saved

    async def delete_domain(self, actor: User, domain_id: DomainId) -> None:
        """Soft-delete a domain.

        Raises:
            NotFoundError: If the domain doesn't exist
            NotAuthorizedError: If actor is neither owner nor admin
        """
        with logfire.span(
            "domain_service.delete_domain",
            domain_id=str(domain_id),
            actor_id=str(actor.id),
        ):
            domain = await self.get_domain(domain_id)
            self.ensure_can_modify(actor, domain.user_id, "domain", str(domain_id))

            affected = await self.domain_repository.soft_delete(domain_id)
            self.ensure_affected(affected, "domain", str(domain_id))
            logfire.info("Domain deleted", domain_id=str(domain_id))
