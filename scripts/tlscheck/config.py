"""Configuration for TLS reachability checks."""

import os
from dataclasses import dataclass, field


class ConfigError(ValueError):
    """Raised when configuration values are out of range."""


@dataclass
class CheckerConfig:
    """Run-level configuration, fixed for the duration of a run."""

    timeout_ms: int = 1000  # Budget for one connect+handshake, per address
    parallel: int = 10  # Number of concurrent workers
    port: int = 443

    # Allow-list file with networks/addresses; empty means allow all
    networks_file: str = ""

    # Custom DNS servers (optional, system resolver otherwise)
    dns_servers: list[str] = field(default_factory=list)
    dns_timeout: float = 5.0

    # Webhook notification of the run summary
    webhook_url: str = ""
    webhook_timeout: int = 5

    @property
    def timeout(self) -> float:
        """Per-address timeout in seconds."""
        return self.timeout_ms / 1000.0

    def validate(self) -> None:
        if self.parallel < 1:
            raise ConfigError(f"parallel must be at least 1, got {self.parallel}")
        if self.timeout_ms <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout_ms}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"port must be in 1..65535, got {self.port}")
        if self.dns_timeout <= 0:
            raise ConfigError(f"dns timeout must be positive, got {self.dns_timeout}")

    @classmethod
    def from_env(cls) -> "CheckerConfig":
        """Create config from environment variables."""
        dns_env = os.environ.get("TLSCHECK_DNS_SERVER", "")
        dns_servers = (
            [x.strip() for x in dns_env.split(",") if x.strip()] if dns_env else []
        )

        try:
            return cls(
                timeout_ms=int(os.environ.get("TLSCHECK_TIMEOUT", "1000")),
                parallel=int(os.environ.get("TLSCHECK_PARALLEL", "10")),
                port=int(os.environ.get("TLSCHECK_PORT", "443")),
                networks_file=os.environ.get("TLSCHECK_NETWORKS", ""),
                dns_servers=dns_servers,
                dns_timeout=float(os.environ.get("TLSCHECK_DNS_TIMEOUT", "5")),
                webhook_url=os.environ.get("TLSCHECK_WEBHOOK_URL", ""),
                webhook_timeout=int(os.environ.get("TLSCHECK_WEBHOOK_TIMEOUT", "5")),
            )
        except ValueError as e:
            raise ConfigError(f"Invalid environment value: {e}") from e
