"""Tests for sf_identity.resolver."""

import logging
import random
from unittest.mock import patch

import pytest

from src.sf_common.errors import NetworkIdentityError, NoEligibleInterfaceError
from src.sf_identity.resolver import derive_from_mac, resolve_datacenter_id

_MAC = bytes([0x02, 0x42, 0xAC, 0x11, 0x00, 0xAB])


class TestDeriveFromMac:
    def test_mixes_last_byte_with_random_byte(self) -> None:
        assert derive_from_mac(_MAC, 0xCD) == 0xCDAB >> 6

    def test_only_last_byte_used(self) -> None:
        assert derive_from_mac(bytes([0xFF, 0, 0, 0, 0, 0xFF]), 0) == 3

    def test_bounds(self) -> None:
        assert derive_from_mac(bytes([0]), 0) == 0
        assert derive_from_mac(bytes([0xFF]), 0xFF) == 1023


class TestResolveDatacenterId:
    @pytest.mark.parametrize("requested", [1, 42, 512, 1023])
    def test_valid_value_used_as_is(self, requested: int) -> None:
        assert resolve_datacenter_id(requested) == requested

    @pytest.mark.parametrize("requested", [-1, -1000, 1024, 1 << 40])
    def test_out_of_range_falls_back_to_random(
        self, requested: int, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            result = resolve_datacenter_id(requested, random.Random(3))
        assert 1 <= result <= 1023
        assert "outside" in caplog.text

    def test_auto_detect_uses_mac(self) -> None:
        expected_byte = random.Random(11).getrandbits(8)
        with patch("src.sf_identity.resolver.first_hardware_address", return_value=_MAC):
            result = resolve_datacenter_id(0, random.Random(11))
        assert result == derive_from_mac(_MAC, expected_byte)

    @pytest.mark.parametrize(
        "error", [NetworkIdentityError("no interfaces reported"), NoEligibleInterfaceError()]
    )
    def test_auto_detect_failure_falls_back_to_random(
        self, error: Exception, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch(
            "src.sf_identity.resolver.first_hardware_address", side_effect=error
        ), caplog.at_level(logging.WARNING):
            result = resolve_datacenter_id(0, random.Random(5))
        assert 1 <= result <= 1023
        assert "random datacenter ID" in caplog.text

    def test_logs_resolved_id(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            resolve_datacenter_id(77)
        assert "datacenter ID 77" in caplog.text

    def test_always_in_range(self) -> None:
        rng = random.Random(0)
        macs = [bytes([rng.getrandbits(8) for _ in range(6)]) for _ in range(50)]
        for mac in macs:
            with patch("src.sf_identity.resolver.first_hardware_address", return_value=mac):
                assert 0 <= resolve_datacenter_id(0, rng) <= 1023
        for requested in range(-50, 1100, 7):
            assert 0 <= resolve_datacenter_id(requested, rng) <= 1023
