"""Tests for structured logging."""

import logging

from route_planner.logging_utils import log_event


class TestLogEvent:
    """Tests for log_event."""

    def test_fields_become_record_attributes(self, log_records):
        log_event("route_generation_started", race_id=7, pool_size=5)

        record = log_records[-1]
        assert record.getMessage() == "route_generation_started"
        assert record.event == "route_generation_started"
        assert record.race_id == 7
        assert record.pool_size == 5

    def test_reserved_names_are_prefixed(self, log_records):
        """Fields named like LogRecord attributes do not clash with them."""
        log_event("app_started", name="Route Planner", created=6, message="hello")

        record = log_records[-1]
        assert record.field_name == "Route Planner"
        assert record.field_created == 6
        assert record.field_message == "hello"
        assert record.name == "route_planner"
        assert isinstance(record.created, float)

    def test_level(self, log_records):
        log_event("job_failed", level=logging.ERROR, job_id=1)

        assert log_records[-1].levelno == logging.ERROR
