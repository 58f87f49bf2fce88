"""Result output."""

import sys
from collections.abc import Iterable
from typing import Optional, TextIO

from .models import DomainVerdict, RunSummary


class ResultPrinter:
    """Writes one ``domain: verdict`` line per result and tallies the run."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.summary = RunSummary()

    def emit(self, verdict: DomainVerdict) -> None:
        self.stream.write(verdict.line() + "\n")
        self.stream.flush()
        self.summary.add(verdict)

    def drain(self, verdicts: Iterable[DomainVerdict]) -> RunSummary:
        for verdict in verdicts:
            self.emit(verdict)
        return self.summary
