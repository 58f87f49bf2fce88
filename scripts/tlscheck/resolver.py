"""Domain name resolution via dnspython."""

import logging
from typing import Optional

import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)


class LookupFailed(Exception):
    """DNS resolution of a domain failed."""


class DomainResolver:
    """Resolves a domain to its IPv4 and IPv6 addresses.

    Addresses are returned in answer order, A records first, then AAAA.
    A domain that exists but has neither record type yields an empty list.
    A nonexistent domain raises LookupFailed; other errors raise it only
    when no record type returned addresses.
    """

    RECORD_TYPES = ("A", "AAAA")

    def __init__(
        self, nameservers: Optional[list[str]] = None, lifetime: float = 5.0
    ) -> None:
        self.resolver = dns.resolver.Resolver(configure=not nameservers)
        if nameservers:
            self.resolver.nameservers = nameservers
        self.resolver.lifetime = lifetime

    def resolve(self, domain: str) -> list[str]:
        addresses: list[str] = []
        error: Optional[LookupFailed] = None
        for rdtype in self.RECORD_TYPES:
            try:
                answers = self.resolver.resolve(domain, rdtype)
            except dns.resolver.NoAnswer:
                continue
            except dns.resolver.NXDOMAIN as e:
                raise LookupFailed(f"no such host: {e}") from e
            except dns.resolver.NoNameservers as e:
                error = LookupFailed(f"no nameservers answered: {e}")
                logger.debug(f"{rdtype} lookup of {domain} failed: {e}")
                continue
            except dns.exception.Timeout as e:
                error = LookupFailed(f"timed out: {e}")
                logger.debug(f"{rdtype} lookup of {domain} timed out: {e}")
                continue
            except dns.exception.DNSException as e:
                error = LookupFailed(str(e))
                logger.debug(f"{rdtype} lookup of {domain} failed: {e}")
                continue

            for rdata in answers:
                address = rdata.to_text()
                if address not in addresses:
                    addresses.append(address)

        # A failed record type only matters when nothing else answered
        if not addresses and error is not None:
            raise error

        logger.debug(f"Resolved {domain}: {addresses}")
        return addresses
