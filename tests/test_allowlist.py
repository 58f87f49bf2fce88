from __future__ import annotations

import ipaddress

import pytest

from tlscheck.allowlist import (
    AllowList,
    AllowListError,
    load_allowlist,
    parse_line,
    parse_lines,
    permitted,
)


def test_no_filter_permits_everything():
    assert permitted("93.184.216.34", None)
    assert permitted("2001:db8::1", None)


def test_empty_filter_permits_nothing():
    assert not permitted("10.0.0.1", AllowList())


def test_containment_in_any_prefix():
    allow = parse_lines(["192.168.0.0/16", "10.0.0.0/8"])
    assert permitted("10.1.2.3", allow)
    assert permitted("192.168.7.7", allow)
    assert not permitted("172.16.0.1", allow)


def test_bare_address_is_host_prefix():
    assert parse_line("10.0.0.5") == ipaddress.ip_network("10.0.0.5/32")
    assert parse_line("2001:db8::1") == ipaddress.ip_network("2001:db8::1/128")

    allow = parse_lines(["10.0.0.5"])
    assert permitted("10.0.0.5", allow)
    assert not permitted("10.0.0.6", allow)


def test_cidr_host_bits_are_masked():
    assert parse_line("10.1.2.3/8") == ipaddress.ip_network("10.0.0.0/8")


def test_ipv6_prefix_does_not_match_ipv4():
    allow = parse_lines(["::/0"])
    assert permitted("2001:db8::1", allow)
    assert not permitted("10.0.0.1", allow)


def test_ipv4_mapped_address_matches_ipv4_prefix():
    allow = parse_lines(["10.0.0.0/8"])
    assert permitted("::ffff:10.0.0.1", allow)


def test_ipv4_mapped_entry_is_ipv4_host():
    assert parse_line("::ffff:10.0.0.5") == ipaddress.ip_network("10.0.0.5/32")

    allow = parse_lines(["::ffff:10.0.0.5"])
    assert permitted("::ffff:10.0.0.5", allow)
    assert permitted("10.0.0.5", allow)
    assert not permitted("10.0.0.6", allow)


def test_comments_and_blank_lines_are_skipped():
    allow = parse_lines(
        [
            "# office networks",
            "",
            "   ",
            "10.0.0.0/8  # internal",
            "192.0.2.1#single host",
        ]
    )
    assert len(allow) == 2


def test_malformed_lines_are_skipped_and_reported(caplog):
    allow = parse_lines(["10.0.0.0/8", "not-an-ip", "10.0.0.0/33", "::1"], "nets.txt")

    assert len(allow) == 2
    warnings = [r for r in caplog.records if r.levelname == "WARNING"]
    assert len(warnings) == 2
    assert "line 2" in warnings[0].getMessage()
    assert "nets.txt" in warnings[0].getMessage()


def test_load_allowlist_from_file(tmp_path):
    path = tmp_path / "networks.txt"
    path.write_text("10.0.0.0/8\n# comment\n2001:db8::/32\n")

    allow = load_allowlist(path)

    assert len(allow) == 2
    assert permitted("2001:db8::5", allow)


def test_unreadable_file_is_fatal(tmp_path):
    with pytest.raises(AllowListError):
        load_allowlist(tmp_path / "missing.txt")


def test_allowlist_is_immutable():
    allow = parse_lines(["10.0.0.0/8"])
    with pytest.raises(AttributeError):
        allow.networks = ()  # type: ignore[misc]
