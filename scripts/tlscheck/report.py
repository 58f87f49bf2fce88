"""Webhook notification with the run summary."""

import logging
from datetime import datetime, timezone
from typing import Any

import requests

from .config import CheckerConfig
from .models import RunSummary


class WebhookReporter:
    """Posts a JSON run summary to the configured webhook."""

    def __init__(self, config: CheckerConfig):
        self.config = config
        self.logger = logging.getLogger(__name__)

    @property
    def enabled(self) -> bool:
        return bool(self.config.webhook_url)

    def build_payload(self, summary: RunSummary) -> dict[str, Any]:
        return {
            "event": "tls_check_completed",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "port": self.config.port,
            "total": summary.total,
            "reachable": summary.reachable,
            "unreachable_count": len(summary.unreachable),
            "elapsed_seconds": round(summary.elapsed, 3),
            "unreachable": [
                {"domain": v.domain, "result": v.text} for v in summary.unreachable
            ],
        }

    def send(self, summary: RunSummary) -> bool:
        """Send the summary; failures are logged, never raised."""
        if not self.enabled:
            return False

        try:
            response = requests.post(
                self.config.webhook_url,
                json=self.build_payload(summary),
                timeout=self.config.webhook_timeout,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            self.logger.info(f"Sent run summary to {self.config.webhook_url}")
            return True
        except requests.RequestException as e:
            self.logger.error(f"Failed to send webhook report: {e}")
            return False
