"""Unit tests for structured logging configuration."""

import structlog

from acronym_service.logging_config import add_service_context, configure_logging


class TestServiceContext:
    def test_adds_service_and_version(self) -> None:
        processor = add_service_context("Acronym Service", "0.1.0")

        event = processor(None, "info", {"event": "acronyms.store.loaded"})

        assert event == {
            "event": "acronyms.store.loaded",
            "service": "Acronym Service",
            "version": "0.1.0",
        }

    def test_event_values_take_precedence(self) -> None:
        processor = add_service_context("Acronym Service", "0.1.0")

        event = processor(None, "info", {"event": "app.startup", "version": "9.9.9"})

        assert event["version"] == "9.9.9"
        assert event["service"] == "Acronym Service"


class TestConfigureLogging:
    def test_pipeline_includes_context_and_json_renderer(self) -> None:
        configure_logging(log_level="WARNING", json_logs=True, service="Acronym Service")
        try:
            processors = structlog.get_config()["processors"]

            assert processors[0] is structlog.contextvars.merge_contextvars
            assert isinstance(processors[-1], structlog.processors.JSONRenderer)
            assert any(
                getattr(p, "__qualname__", "").startswith("add_service_context")
                for p in processors
            )
        finally:
            configure_logging(log_level="WARNING")

    def test_service_context_omitted_without_service(self) -> None:
        configure_logging(log_level="WARNING")

        processors = structlog.get_config()["processors"]

        assert not any(
            getattr(p, "__qualname__", "").startswith("add_service_context")
            for p in processors
        )
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
