from __future__ import annotations

import io

from tlscheck.models import AddressOutcome, DomainVerdict, OutcomeKind
from tlscheck.sink import ResultPrinter


def test_one_line_per_verdict_and_summary():
    out = io.StringIO()
    printer = ResultPrinter(out)

    summary = printer.drain(
        [
            DomainVerdict(
                "good.example",
                [
                    AddressOutcome("192.0.2.1", OutcomeKind.OK),
                    AddressOutcome("192.0.2.2", OutcomeKind.CONNECT_FAILED, "refused"),
                ],
            ),
            DomainVerdict("gone.example", error="lookup failed: no such host"),
        ]
    )

    assert out.getvalue().splitlines() == [
        "good.example: OK: 192.0.2.1; connect failed: 192.0.2.2 (refused)",
        "gone.example: lookup failed: no such host",
    ]
    assert summary.total == 2
    assert summary.reachable == 1
    assert [v.domain for v in summary.unreachable] == ["gone.example"]


def test_denied_only_domain_is_unreachable():
    verdict = DomainVerdict(
        "filtered.example", [AddressOutcome("203.0.113.9", OutcomeKind.DENIED)]
    )

    assert verdict.text == "denied by network filters: 203.0.113.9"
    assert not verdict.ok
