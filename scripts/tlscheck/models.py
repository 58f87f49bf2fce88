"""Data models for TLS reachability checks."""

from dataclasses import dataclass, field
from enum import Enum, auto

RESULT_SEPARATOR = "; "


class OutcomeKind(Enum):
    """Outcome of a single address probe."""

    OK = auto()  # TCP connect and TLS handshake succeeded
    DENIED = auto()  # Address rejected by network filters, not probed
    CONNECT_FAILED = auto()  # TCP connect failed or timed out
    HANDSHAKE_FAILED = auto()  # TLS handshake failed or timed out


@dataclass(frozen=True)
class AddressOutcome:
    """Result of checking one resolved address of a domain."""

    address: str
    kind: OutcomeKind
    error: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @property
    def message(self) -> str:
        if self.kind is OutcomeKind.OK:
            return f"OK: {self.address}"
        if self.kind is OutcomeKind.DENIED:
            return f"denied by network filters: {self.address}"
        if self.kind is OutcomeKind.CONNECT_FAILED:
            return f"connect failed: {self.address} ({self.error})"
        return f"handshake failed: {self.address} ({self.error})"


@dataclass
class DomainVerdict:
    """Combined result of all address checks for one domain.

    Exactly one of ``error`` or ``outcomes`` carries the result: a lookup
    problem leaves ``outcomes`` empty and sets ``error``.
    """

    domain: str
    outcomes: list[AddressOutcome] = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        """True when at least one address completed the handshake."""
        return any(o.ok for o in self.outcomes)

    @property
    def text(self) -> str:
        if self.error:
            return self.error
        return RESULT_SEPARATOR.join(o.message for o in self.outcomes)

    def line(self) -> str:
        return f"{self.domain}: {self.text}"


@dataclass
class RunSummary:
    """Totals for a finished run."""

    total: int = 0
    reachable: int = 0
    unreachable: list[DomainVerdict] = field(default_factory=list)
    elapsed: float = 0.0

    def add(self, verdict: DomainVerdict) -> None:
        self.total += 1
        if verdict.ok:
            self.reachable += 1
        else:
            self.unreachable.append(verdict)
