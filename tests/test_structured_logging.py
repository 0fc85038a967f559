"""Tests for structured logging and path redaction."""

from __future__ import annotations

import io
import json
from pathlib import Path as FsPath

from lexpath.core.path import Path
from lexpath.core.platform import Platform
from lexpath.logging import DataRedactor, LogLevel, StructuredLogger, create_logger


class TestDataRedactor:
    """Test sensitive data redaction."""

    def test_redact_home_directories(self):
        redactor = DataRedactor()

        test_cases = [
            ("/home/user/project/model.py", "model.py"),
            ("/Users/john/Library/notes.txt", "notes.txt"),
            ("C:\\Users\\jane\\Documents\\secret.txt", "secret.txt"),
        ]
        for raw, filename in test_cases:
            result = redactor.redact_string(raw)
            assert result.startswith("[REDACTED]")
            assert result.endswith(filename)
            assert "user" not in result and "john" not in result and "jane" not in result

    def test_redact_unc_authority(self):
        redactor = DataRedactor()
        assert redactor.redact_string("\\\\fileserver\\payroll\\q3.xlsx") == "[REDACTED]\\q3.xlsx"
        assert "fileserver" not in redactor.redact_string("\\\\?\\UNC\\fileserver\\payroll\\q3")

    def test_redact_tokens_in_strings(self):
        redactor = DataRedactor()
        result = redactor.redact_string("open token=abcdef123456 failed")
        assert "abcdef123456" not in result

    def test_redact_path_keeps_file_name(self):
        redactor = DataRedactor()
        windows = Path("D:\\Projects\\acme\\build.log", Platform.WINDOWS)
        unix = Path("/srv/acme/build.log", Platform.UNIX)
        assert redactor.redact_path(windows) == "[REDACTED]/build.log"
        assert redactor.redact_path(unix) == "[REDACTED]/build.log"

    def test_redact_path_without_name(self):
        redactor = DataRedactor()
        assert redactor.redact_path(Path("/", Platform.UNIX)) == "[REDACTED]"
        assert redactor.redact_path(Path("C:\\", Platform.WINDOWS)) == "[REDACTED]"
        assert redactor.redact_path("") == "[REDACTED]"

    def test_redact_path_accepts_os_paths(self, tmp_path):
        assert DataRedactor().redact_path(tmp_path / "x.bin") == "[REDACTED]/x.bin"

    def test_redact_dict(self):
        redactor = DataRedactor()
        data = {
            "token": "abc123def456",
            "path": Path("/home/user/models/bert.bin", Platform.UNIX),
            "paths": [Path("a/b.txt", Platform.UNIX), "/home/user/c.txt", 3],
            "nested": {"api_key": "secret123", "where": "/home/user/x"},
            "count": 7,
        }

        result = redactor.redact_dict(data)

        assert result["token"] == "[REDACTED]"
        assert result["path"] == "[REDACTED]/bert.bin"
        assert result["paths"] == ["[REDACTED]/b.txt", "[REDACTED]/c.txt", 3]
        assert result["nested"]["api_key"] == "[REDACTED]"
        assert result["nested"]["where"] == "[REDACTED]/x"
        assert result["count"] == 7

    def test_custom_patterns_and_fields(self):
        redactor = DataRedactor()
        redactor.add_pattern(r"acme-\d+")
        redactor.add_sensitive_field("Owner")
        result = redactor.redact_dict({"owner": "bob", "note": "ticket acme-42"})
        assert result == {"owner": "[REDACTED]", "note": "ticket [REDACTED]"}


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_basic_logging(self, tmp_path):
        log_file = tmp_path / "test.jsonl"
        logger = StructuredLogger(
            component="test",
            session_id="test_session",
            output_file=str(log_file),
        )
        logger.info("Test message", test_field="test_value", count=42)
        logger.close()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["level"] == "info"
        assert entry["component"] == "test"
        assert entry["session_id"] == "test_session"
        assert entry["message"] == "Test message"
        assert entry["test_field"] == "test_value"
        assert entry["count"] == 42
        assert "timestamp" in entry
        assert entry["iso_timestamp"].endswith("Z")

    def test_levels(self):
        stream = io.StringIO()
        logger = StructuredLogger("test", output_file=stream)
        logger.debug("d")
        logger.warning("w")
        logger.error("e")
        logger.critical("c")
        logger.log(LogLevel.INFO, "i")
        levels = [json.loads(line)["level"] for line in stream.getvalue().splitlines()]
        assert levels == ["debug", "warning", "error", "critical", "info"]

    def test_console_output(self, capsys):
        logger = StructuredLogger("test", enable_console=True)
        logger.info("hello", path=Path("/etc/passwd", Platform.UNIX))
        out = capsys.readouterr().out
        entry = json.loads(out)
        assert entry["path"] == "[REDACTED]/passwd"

    def test_rotation(self, tmp_path):
        log_file = tmp_path / "fs.jsonl"
        logger = StructuredLogger("fs", output_file=log_file, max_log_files=2)
        logger.max_log_size_bytes = 200
        for i in range(20):
            logger.info("entry", index=i)
        logger.close()

        assert log_file.exists()
        assert (tmp_path / "fs.1.jsonl").exists()
        assert (tmp_path / "fs.2.jsonl").exists()
        assert not (tmp_path / "fs.3.jsonl").exists()


class TestCreateLogger:
    def test_explicit_log_dir(self, tmp_path):
        logger = create_logger(component="fs", session_id="s1", log_dir=tmp_path)
        logger.info("Factory test message")
        logger.close()
        assert (tmp_path / "fs_s1.jsonl").exists()

    def test_settings(self, tmp_path, use_settings):
        use_settings(log_dir=str(tmp_path / "logs"), log_max_size_mb=3, log_max_files=2)
        logger = create_logger("fs")
        logger.info("configured")
        logger.close()
        assert logger.max_log_size_bytes == 3 * 1024 * 1024
        assert logger.max_log_files == 2
        assert logger.console_enabled is False
        assert FsPath(tmp_path / "logs" / "fs_default.jsonl").exists()

    def test_no_destination_writes_nothing(self, capsys):
        logger = create_logger("fs")
        logger.info("dropped")
        assert logger.log_file is None
        assert capsys.readouterr().out == ""
