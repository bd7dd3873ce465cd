"""Unit tests for the activity log."""
import logging

from pipeline.activity_log import ActivityLog, INITIAL_MESSAGE, is_error_line


class TestActivityLog:

    def test_starts_with_initial_message(self):
        assert ActivityLog().lines() == [INITIAL_MESSAGE]

    def test_error_lines_are_prefixed(self):
        log = ActivityLog()
        line = log.error("Scouting failed.")

        assert line == "ERR: Scouting failed."
        assert is_error_line(line)
        assert log.errors() == ["ERR: Scouting failed."]

    def test_capped_to_most_recent_lines(self):
        log = ActivityLog(capacity=50)
        for i in range(60):
            log.info(f"line {i}")

        lines = log.lines()
        assert len(lines) == 50
        assert lines[0] == "line 10"
        assert lines[-1] == "line 59"

    def test_lines_are_mirrored_to_logger(self, caplog):
        log = ActivityLog(initial_message="")
        with caplog.at_level(logging.INFO, logger="pipeline.activity_log"):
            log.info("Discovery complete. Found 2 leads.")
            log.error("Deep scan failed.")

        levels = [record.levelno for record in caplog.records]
        assert levels == [logging.INFO, logging.ERROR]
        assert len(log) == 2
