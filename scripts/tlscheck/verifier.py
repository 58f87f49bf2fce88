"""Per-domain verification: resolve, filter and probe every address."""

import logging
import time
from typing import Optional, Protocol

from .allowlist import AllowList, permitted
from .config import CheckerConfig
from .models import AddressOutcome, DomainVerdict, OutcomeKind
from .prober import DomainProber
from .resolver import DomainResolver, LookupFailed


class Resolver(Protocol):
    """Anything that maps a domain to its addresses."""

    def resolve(self, domain: str) -> list[str]: ...


class Prober(Protocol):
    """Anything that probes one address before a deadline."""

    def probe(self, domain: str, address: str, deadline: float) -> AddressOutcome: ...


class DomainVerifier:
    """Checks whether a domain is reachable over TLS on any of its addresses."""

    def __init__(
        self,
        config: CheckerConfig,
        allow_list: Optional[AllowList] = None,
        resolver: Optional[Resolver] = None,
        prober: Optional[Prober] = None,
    ):
        self.config = config
        self.allow_list = allow_list
        self.resolver = resolver or DomainResolver(
            config.dns_servers, lifetime=config.dns_timeout
        )
        self.prober = prober or DomainProber(port=config.port)
        self.logger = logging.getLogger(__name__)

    def verify(self, domain: str) -> DomainVerdict:
        try:
            addresses = self.resolver.resolve(domain)
        except LookupFailed as e:
            self.logger.debug(f"Lookup of {domain} failed: {e}")
            return DomainVerdict(domain, error=f"lookup failed: {e}")

        if not addresses:
            return DomainVerdict(domain, error="no addresses resolved")

        # Every address is attempted, earlier failures do not stop later probes
        outcomes: list[AddressOutcome] = []
        for address in addresses:
            if not permitted(address, self.allow_list):
                outcomes.append(AddressOutcome(address, OutcomeKind.DENIED))
                continue

            # Fresh budget per address
            deadline = time.monotonic() + self.config.timeout
            outcomes.append(self.prober.probe(domain, address, deadline))

        return DomainVerdict(domain, outcomes)
