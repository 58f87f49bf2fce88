"""TCP connect + TLS handshake probe for a single address."""

import logging
import socket
import ssl
import time
from typing import Optional

from .models import AddressOutcome, OutcomeKind

logger = logging.getLogger(__name__)


def _error_text(e: BaseException) -> str:
    text = str(e)
    return text if text else e.__class__.__name__


class DomainProber:
    """Probes one address of a domain over TLS.

    ``deadline`` is an absolute ``time.monotonic()`` value. Connect and
    handshake share it, so time spent connecting is not available to the
    handshake.
    """

    def __init__(self, port: int = 443, context: Optional[ssl.SSLContext] = None):
        self.port = port
        self.context = context or ssl.create_default_context()

    def probe(self, domain: str, address: str, deadline: float) -> AddressOutcome:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return AddressOutcome(
                address, OutcomeKind.CONNECT_FAILED, "timed out", timed_out=True
            )

        try:
            sock = socket.create_connection((address, self.port), timeout=remaining)
        except socket.timeout as e:
            return AddressOutcome(
                address, OutcomeKind.CONNECT_FAILED, _error_text(e), timed_out=True
            )
        except OSError as e:
            logger.debug(f"Connect to {address}:{self.port} failed: {e}")
            return AddressOutcome(address, OutcomeKind.CONNECT_FAILED, _error_text(e))

        with sock:
            return self._handshake(sock, domain, address, deadline)

    def _handshake(
        self, sock: socket.socket, domain: str, address: str, deadline: float
    ) -> AddressOutcome:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return AddressOutcome(
                address, OutcomeKind.HANDSHAKE_FAILED, "timed out", timed_out=True
            )

        sock.settimeout(remaining)
        try:
            with self.context.wrap_socket(
                sock, server_hostname=domain, do_handshake_on_connect=False
            ) as tls_sock:
                tls_sock.do_handshake()
                logger.debug(
                    f"Handshake with {domain} at {address}: {tls_sock.version()}"
                )
        except socket.timeout as e:
            return AddressOutcome(
                address, OutcomeKind.HANDSHAKE_FAILED, _error_text(e), timed_out=True
            )
        except (ssl.SSLError, ssl.CertificateError, OSError, ValueError) as e:
            logger.debug(f"Handshake with {domain} at {address} failed: {e}")
            return AddressOutcome(address, OutcomeKind.HANDSHAKE_FAILED, _error_text(e))

        return AddressOutcome(address, OutcomeKind.OK)
