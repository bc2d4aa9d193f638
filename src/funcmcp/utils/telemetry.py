"""OpenTelemetry tracing for funcmcp.

The dispatcher always traces through the OpenTelemetry API (``get_tracer``),
which is a no-op until :func:`configure_telemetry` installs an SDK provider.
The SDK and exporters live in the ``otel`` extra
(``pip install funcmcp[otel]``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from funcmcp.server.config import TelemetrySettings

ATTR_SERVER_NAME = "mcp.server.name"
ATTR_METHOD = "rpc.method"
ATTR_REQUEST_ID = "rpc.jsonrpc.request_id"
ATTR_ERROR_CODE = "rpc.jsonrpc.error_code"
ATTR_TOOL_NAME = "mcp.tool.name"

_INSTRUMENTATION_NAME = "funcmcp"
_OTEL_HINT = "Install it with: pip install funcmcp[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(settings: TelemetrySettings, *, service_name: str) -> bool:
    """Install a tracer provider for *settings*; return whether one was installed.

    Nothing happens when telemetry is disabled.  Console spans go to stderr so
    they never mix with responses on a stdio transport.

    Raises:
        ImportError: Telemetry is enabled but the ``otel`` extra is missing.
    """
    if not settings.enabled:
        return False

    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for telemetry. {_OTEL_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    for processor in _span_processors(settings):
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    return True


def _span_processors(settings: TelemetrySettings) -> list[Any]:
    import sys

    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    processors: list[Any] = []
    if settings.export_to_console:
        processors.append(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    if settings.otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
                OTLPSpanExporter,
            )
        except ImportError as exc:
            msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_OTEL_HINT}"
            raise ImportError(msg) from exc
        processors.append(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint)))
    return processors
