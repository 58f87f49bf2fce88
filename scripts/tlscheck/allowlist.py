"""Network allow-list for outbound probe addresses.

The allow-list is built once before any worker starts and is only read
afterwards. ``None`` stands for "no filter configured" and permits every
address; an empty ``AllowList`` permits nothing.
"""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AllowListError(Exception):
    """Allow-list source could not be read."""


def _unmap(address: Address) -> Address:
    """IPv4-mapped IPv6 addresses (::ffff:a.b.c.d) as plain IPv4."""
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


@dataclass(frozen=True)
class AllowList:
    """Immutable set of permitted network prefixes."""

    networks: tuple[Network, ...] = ()

    def __len__(self) -> int:
        return len(self.networks)

    def contains(self, address: Union[str, Address]) -> bool:
        """Check if the address falls inside any listed prefix."""
        ip = _unmap(ipaddress.ip_address(address))
        for network in self.networks:
            if network.version == ip.version and ip in network:
                return True
        return False


def permitted(address: Union[str, Address], allow_list: Optional[AllowList]) -> bool:
    """Decide whether a probe to ``address`` is allowed."""
    if allow_list is None:
        return True
    return allow_list.contains(address)


def parse_line(line: str) -> Optional[Network]:
    """Parse one allow-list line.

    Returns None for blank and comment-only lines. Raises ValueError for
    malformed entries.
    """
    if "#" in line:
        line = line[: line.index("#")]
    line = line.strip()
    if not line:
        return None

    if "/" in line:
        # Host bits are masked off, 10.1.2.3/8 means 10.0.0.0/8
        return ipaddress.ip_network(line, strict=False)

    # Bare address: host prefix of full width (/32 or /128)
    return ipaddress.ip_network(_unmap(ipaddress.ip_address(line)))


def parse_lines(lines: Iterable[str], source: str = "<input>") -> AllowList:
    """Build an allow-list, skipping and reporting malformed lines."""
    networks: list[Network] = []
    for line_num, line in enumerate(lines, start=1):
        try:
            network = parse_line(line)
        except ValueError as e:
            logger.warning(
                f"Skipping malformed line {line_num} in filters file '{source}' "
                f"({line.strip()}): {e}"
            )
            continue
        if network is not None:
            networks.append(network)
    return AllowList(tuple(networks))


def load_allowlist(path: Union[str, Path]) -> AllowList:
    """Read an allow-list file.

    Raises:
        AllowListError: The file cannot be opened or read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AllowListError(f"Can't read ip filters file '{path}': {e}") from e

    allow_list = parse_lines(text.splitlines(), source=str(path))
    logger.info(f"Loaded {len(allow_list)} network filter(s) from {path}")
    return allow_list
