"""TLS reachability checker package.

Public API:
    - VerificationPipeline: Bounded worker pipeline over a domain stream
    - DomainVerifier: Resolve, filter and probe one domain
    - DomainProber: TCP connect + TLS handshake against one address
    - DomainResolver: DNS resolution (A and AAAA)
    - AllowList: Immutable network allow-list
    - CheckerConfig: Configuration dataclass
"""

from .allowlist import AllowList, AllowListError, load_allowlist, permitted
from .config import CheckerConfig, ConfigError
from .models import AddressOutcome, DomainVerdict, OutcomeKind, RunSummary
from .pipeline import VerificationPipeline
from .prober import DomainProber
from .reader import read_domains, split_domains
from .report import WebhookReporter
from .resolver import DomainResolver, LookupFailed
from .sink import ResultPrinter
from .verifier import DomainVerifier

__all__ = [
    # Main API
    "VerificationPipeline",
    "DomainVerifier",
    "DomainProber",
    "DomainResolver",
    "CheckerConfig",
    "ResultPrinter",
    "WebhookReporter",
    # Allow-list
    "AllowList",
    "AllowListError",
    "load_allowlist",
    "permitted",
    # Models
    "AddressOutcome",
    "DomainVerdict",
    "OutcomeKind",
    "RunSummary",
    # Input
    "read_domains",
    "split_domains",
    # Errors
    "ConfigError",
    "LookupFailed",
]
