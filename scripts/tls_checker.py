#!/usr/bin/env python3
"""
TLS Checker - Verifies that domains accept TLS connections.

For each domain, resolves its A/AAAA records and, for every address, opens a
TCP connection to the configured port and performs a TLS handshake with the
domain as server name. Prints one line per domain:

    example.com: OK: 93.184.216.34; connect failed: 2606:2800:220:1:: (...)

Domains are read from the files given on the command line, or from stdin.
One or several domains per line, separated by commas or whitespace:

    domain.ru
    domain2.ru,www.domain2.ru

Environment Variables:
    TLSCHECK_TIMEOUT            Timeout per address check in ms (default: 1000)
    TLSCHECK_PARALLEL           Parallel check count (default: 10)
    TLSCHECK_PORT               Port to check (default: 443)
    TLSCHECK_NETWORKS           Allow-list file of networks/IPs (default: allow all)
    TLSCHECK_DNS_SERVER         Comma-separated DNS servers (default: system)
    TLSCHECK_DNS_TIMEOUT        DNS lookup lifetime in seconds (default: 5)
    TLSCHECK_WEBHOOK_URL        Webhook endpoint for the run summary
    TLSCHECK_WEBHOOK_TIMEOUT    Webhook request timeout in seconds (default: 5)

Allow-list file format: one network (CIDR) or IP address per line,
#-styled comments allowed.

Usage:
    tls_checker.py [--timeout MS] [--parallel N] [--port PORT]
                   [--networks FILE] [file1 file2 ...]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add scripts directory to path
sys.path.insert(0, str(Path(__file__).parent))

from tlscheck import (
    AllowListError,
    CheckerConfig,
    ConfigError,
    DomainVerifier,
    ResultPrinter,
    VerificationPipeline,
    WebhookReporter,
    load_allowlist,
    read_domains,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser(config: CheckerConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that domains complete a TLS handshake on their IPs",
        epilog="If no files are given, domains are read from stdin.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Files with list of domains to check",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=config.timeout_ms,
        help="Timeout for every one check in milliseconds "
        f"(default: {config.timeout_ms})",
    )
    parser.add_argument(
        "--parallel",
        type=int,
        default=config.parallel,
        help=f"Parallel check count (default: {config.parallel})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Port to check (default: {config.port})",
    )
    parser.add_argument(
        "--networks",
        type=str,
        default=config.networks_file,
        help="File with allowable ip/networks to connect to, one per line. "
        "#-styled comments allowed. Allow all by default.",
    )
    parser.add_argument(
        "--dns-server",
        type=str,
        default="",
        help="Comma-separated DNS servers (default: system resolver)",
    )
    parser.add_argument(
        "--webhook-url",
        type=str,
        default=config.webhook_url,
        help="POST a JSON run summary to this URL",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main() -> None:
    try:
        config = CheckerConfig.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    args = build_parser(config).parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    # Apply command-line overrides
    config.timeout_ms = args.timeout
    config.parallel = args.parallel
    config.port = args.port
    config.networks_file = args.networks
    config.webhook_url = args.webhook_url
    if args.dns_server:
        config.dns_servers = [
            x.strip() for x in args.dns_server.split(",") if x.strip()
        ]

    try:
        config.validate()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(2)

    logger.info("=" * 50)
    logger.info("TLS Checker Starting")
    logger.info("=" * 50)
    logger.info(f"Timeout: {config.timeout_ms}ms per address")
    logger.info(f"Parallel: {config.parallel}")
    logger.info(f"Port: {config.port}")
    logger.info(f"Network filters: {config.networks_file or 'allow all'}")
    logger.info(f"DNS server: {', '.join(config.dns_servers) or 'system default'}")
    logger.info(f"Webhook: {config.webhook_url or 'disabled'}")

    # Allow-list must be loaded before any check starts
    allow_list = None
    if config.networks_file:
        try:
            allow_list = load_allowlist(config.networks_file)
        except AllowListError as e:
            logger.error(str(e))
            sys.exit(1)

    verifier = DomainVerifier(config, allow_list)
    pipeline = VerificationPipeline(verifier.verify, parallel=config.parallel)
    printer = ResultPrinter(sys.stdout)

    started = time.monotonic()
    summary = printer.drain(pipeline.run(read_domains(args.files)))
    summary.elapsed = time.monotonic() - started

    logger.info(
        f"Checked {summary.total} domain(s) in {summary.elapsed:.1f}s: "
        f"{summary.reachable} reachable, {len(summary.unreachable)} unreachable"
    )

    WebhookReporter(config).send(summary)


if __name__ == "__main__":
    main()
