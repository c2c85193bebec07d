"""Tests for the IP literal validators."""

import pytest

from schema_formats.validation.ip import IPv4FormatValidator, IPv6FormatValidator


class TestIPv4FormatValidator:
    """Tests for IPv4FormatValidator."""

    @pytest.mark.parametrize(
        "subject", ["127.0.0.1", "0.0.0.0", "255.255.255.255", "192.168.1.10"]
    )
    def test_valid(self, subject):
        result = IPv4FormatValidator().validate(subject)

        assert result.success
        assert result.format_name == "ipv4"

    @pytest.mark.parametrize(
        "subject",
        [
            "256.0.0.1",
            "1.2.3",
            "1.2.3.4.5",
            "01.2.3.4",
            " 1.2.3.4",
            "1.2.3.4/24",
            "::1",
            "example.com",
            "",
            None,
        ],
    )
    def test_invalid(self, subject):
        assert IPv4FormatValidator().validate(subject).failed

    def test_failure_message(self):
        result = IPv4FormatValidator().validate("1.2.3")

        assert result.message == "[1.2.3] is not a valid ipv4 address"


class TestIPv6FormatValidator:
    """Tests for IPv6FormatValidator."""

    @pytest.mark.parametrize(
        "subject",
        [
            "::1",
            "::",
            "2001:db8::1",
            "2001:0db8:0000:0000:0000:ff00:0042:8329",
            "fe80::1",
            "64:ff9b::192.0.2.33",
        ],
    )
    def test_valid(self, subject):
        result = IPv6FormatValidator().validate(subject)

        assert result.success
        assert result.format_name == "ipv6"

    @pytest.mark.parametrize(
        "subject",
        [
            "::ffff:1.2.3.4",
            "fe80::1%eth0",
            "[::1]",
            "12345::",
            "1:2:3:4:5:6:7:8:9",
            "1.2.3.4",
            "example.com",
            "",
            None,
        ],
    )
    def test_invalid(self, subject):
        assert IPv6FormatValidator().validate(subject).failed

    def test_failure_message(self):
        result = IPv6FormatValidator().validate("[::1]")

        assert result.message == "[[::1]] is not a valid ipv6 address"
