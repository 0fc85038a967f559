"""Tests for Windows prefix parsing."""

from __future__ import annotations

import pytest

from lexpath.core.parser import NO_PREFIX, parse_windows_prefix
from lexpath.core.prefix import (
    DeviceNsPrefix,
    DiskPrefix,
    UncPrefix,
    VerbatimDiskPrefix,
    VerbatimGenericPrefix,
    VerbatimUncPrefix,
)
from lexpath.errors import InvalidPathError


class TestVerbatimUnc:
    def test_with_file(self):
        raw = "\\\\?\\UNC\\server\\share\\file"
        parsed = parse_windows_prefix(raw)
        assert parsed.prefix == VerbatimUncPrefix("server", "share")
        assert parsed.consumed == len("\\\\?\\UNC\\server\\share\\")
        assert parsed.separator_followed

    def test_share_only(self):
        raw = "\\\\?\\UNC\\server\\share"
        parsed = parse_windows_prefix(raw)
        assert parsed.prefix == VerbatimUncPrefix("server", "share")
        assert parsed.consumed == len(raw)
        assert not parsed.separator_followed

    def test_server_only_has_empty_share(self):
        raw = "\\\\?\\UNC\\server"
        parsed = parse_windows_prefix(raw)
        assert isinstance(parsed.prefix, VerbatimUncPrefix)
        assert parsed.prefix.server == "server"
        assert parsed.prefix.share == ""
        assert parsed.consumed == len(raw)

    def test_forward_slash_is_not_a_separator(self):
        parsed = parse_windows_prefix("\\\\?\\UNC\\server/share\\x")
        assert parsed.prefix == VerbatimUncPrefix("server/share", "x")


class TestVerbatimGeneric:
    def test_with_file(self):
        parsed = parse_windows_prefix("\\\\?\\path\\file")
        assert parsed.prefix == VerbatimGenericPrefix("path")
        assert parsed.consumed == len("\\\\?\\path\\")

    def test_alone(self):
        raw = "\\\\?\\path"
        parsed = parse_windows_prefix(raw)
        assert parsed.prefix == VerbatimGenericPrefix("path")
        assert parsed.consumed == len(raw)

    def test_letter_colon_followed_by_name_is_generic(self):
        parsed = parse_windows_prefix("\\\\?\\c:bar")
        assert parsed.prefix == VerbatimGenericPrefix("c:bar")


class TestVerbatimDisk:
    def test_lower_case_letter(self):
        parsed = parse_windows_prefix("\\\\?\\c:\\bar")
        assert isinstance(parsed.prefix, VerbatimDiskPrefix)
        assert parsed.consumed == len("\\\\?\\c:\\")
        assert parsed.prefix.get_disk() == "C"
        assert parsed.prefix.to_string() == "\\\\?\\c:"

    def test_drive_alone(self):
        parsed = parse_windows_prefix("\\\\?\\D:")
        assert parsed.prefix == VerbatimDiskPrefix("D")
        assert parsed.consumed == 6
        assert not parsed.separator_followed

    def test_compares_by_upper_case_drive(self):
        assert VerbatimDiskPrefix("c") == VerbatimDiskPrefix("C")
        assert hash(VerbatimDiskPrefix("c")) == hash(VerbatimDiskPrefix("C"))


class TestDeviceNamespace:
    def test_device(self):
        parsed = parse_windows_prefix("\\\\.\\COM42")
        assert parsed.prefix == DeviceNsPrefix("COM42")
        assert parsed.prefix.to_string() == "\\\\.\\COM42"

    def test_device_accepts_forward_slash(self):
        parsed = parse_windows_prefix("\\\\.\\PhysicalDrive0/x")
        assert parsed.prefix == DeviceNsPrefix("PhysicalDrive0")
        assert parsed.consumed == len("\\\\.\\PhysicalDrive0/")


class TestUnc:
    def test_server_share(self):
        parsed = parse_windows_prefix("\\\\server\\share\\dir")
        assert parsed.prefix == UncPrefix("server", "share")
        assert parsed.consumed == len("\\\\server\\share\\")
        assert parsed.prefix.to_string() == "\\\\server\\share"

    def test_mixed_separators(self):
        parsed = parse_windows_prefix("\\\\server/share/dir")
        assert parsed.prefix == UncPrefix("server", "share")

    def test_forward_slashes_only_is_not_unc(self):
        assert parse_windows_prefix("//server/share") == NO_PREFIX


class TestDisk:
    def test_bare_drive(self):
        parsed = parse_windows_prefix("C:")
        assert parsed.prefix == DiskPrefix("C")
        assert parsed.consumed == 2
        assert not parsed.separator_followed

    @pytest.mark.parametrize("raw", ["c:\\Windows", "c:/Windows"])
    def test_drive_with_separator(self, raw):
        parsed = parse_windows_prefix(raw)
        assert parsed.prefix == DiskPrefix("C")
        assert parsed.prefix.to_string() == "c:"
        assert parsed.consumed == 3
        assert parsed.separator_followed

    def test_drive_relative_name_is_rejected(self):
        with pytest.raises(InvalidPathError):
            parse_windows_prefix("C:foo")

    @pytest.mark.parametrize("raw", ["foo", "\\foo", "1:", ".", ""])
    def test_no_prefix(self, raw):
        assert parse_windows_prefix(raw) == NO_PREFIX
