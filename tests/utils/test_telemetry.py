"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from funcmcp.server.config import TelemetrySettings
from funcmcp.utils.telemetry import (
    ATTR_TOOL_NAME,
    _INSTRUMENTATION_NAME,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        assert isinstance(get_tracer("test.module"), trace.Tracer)

    def test_default_name(self) -> None:
        assert isinstance(get_tracer(), trace.Tracer)

    def test_noop_span(self) -> None:
        """Without an SDK configured, spans accept attributes silently."""
        with get_tracer("test.noop").start_as_current_span("mcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, "calculator")


class TestConfigureTelemetry:
    def test_disabled_is_noop(self) -> None:
        with patch("funcmcp.utils.telemetry.trace.set_tracer_provider") as set_provider:
            assert configure_telemetry(TelemetrySettings(), service_name="svc") is False
        set_provider.assert_not_called()

    def test_raises_without_sdk(self) -> None:
        with (
            patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}),
            pytest.raises(ImportError, match="opentelemetry-sdk"),
        ):
            configure_telemetry(TelemetrySettings(enabled=True), service_name="svc")

    def test_otlp_raises_without_exporter(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")
        settings = TelemetrySettings(enabled=True, otlp_endpoint="http://localhost:4317")
        with (
            patch.dict(
                "sys.modules",
                {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
            ),
            patch("funcmcp.utils.telemetry.trace.set_tracer_provider") as set_provider,
            pytest.raises(ImportError, match="opentelemetry-exporter-otlp"),
        ):
            configure_telemetry(settings, service_name="svc")
        set_provider.assert_not_called()

    def test_console_exporter_installs_provider(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")
        from opentelemetry.sdk.trace import TracerProvider

        settings = TelemetrySettings(enabled=True, export_to_console=True)
        with patch("funcmcp.utils.telemetry.trace.set_tracer_provider") as set_provider:
            assert configure_telemetry(settings, service_name="svc") is True

        (provider,) = set_provider.call_args.args
        assert isinstance(provider, TracerProvider)
        assert provider.resource.attributes["service.name"] == "svc"


class TestConstants:
    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "funcmcp"

    def test_attribute_keys_are_namespaced(self) -> None:
        assert ATTR_TOOL_NAME.startswith("mcp.")
