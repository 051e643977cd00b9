"""DNS resolution adapter."""

from .resolver import DnspythonResolver, StaticDNSResolver

__all__ = ["DnspythonResolver", "StaticDNSResolver"]
