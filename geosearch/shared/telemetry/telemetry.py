"""OpenTelemetry setup for hosts that want search spans exported.

The library only talks to the OpenTelemetry API. Spans are dropped until a
host installs a tracer provider, which is what SearchTelemetry does from
the GEOSEARCH_TELEMETRY_* settings.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from geosearch.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class SearchTelemetry:
    """Tracer provider lifecycle for coordinator, resolver and provider spans.

    start() is a no-op when telemetry is disabled. When enabled it installs
    a global tracer provider and instruments httpx (Nominatim requests) and
    logging (trace ids on log records).
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SearchTelemetry":
        return cls(settings or get_settings())

    @property
    def enabled(self) -> bool:
        return self.settings.telemetry_enabled

    def _exporter(self) -> SpanExporter | None:
        kind = self.settings.telemetry_exporter.lower()
        endpoint = self.settings.telemetry_otlp_endpoint
        if kind == "none":
            return None
        if kind == "otlp":
            if endpoint:
                return OTLPSpanExporter(
                    endpoint=endpoint, insecure=endpoint.startswith("http://")
                )
            logger.warning("OTLP exporter selected without an endpoint, using console")
        elif kind != "console":
            logger.warning("Unknown telemetry exporter '%s', using console", kind)
        return ConsoleSpanExporter()

    def start(self) -> TracerProvider | None:
        """Install the tracer provider and instrumentation.

        Returns:
            The installed TracerProvider, or None when telemetry is disabled.
        """
        if not self.enabled:
            logger.debug("Telemetry disabled")
            return None
        if self.tracer_provider is not None:
            return self.tracer_provider

        resource = Resource(
            attributes={
                SERVICE_NAME: self.settings.app_name,
                SERVICE_VERSION: self.settings.app_version,
            }
        )
        provider = TracerProvider(
            resource=resource,
            sampler=TraceIdRatioBased(self.settings.telemetry_sample_rate),
        )
        exporter = self._exporter()
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider

        HTTPXClientInstrumentor().instrument(tracer_provider=provider)
        LoggingInstrumentor().instrument(tracer_provider=provider, set_logging_format=True)
        logger.info(
            "Telemetry started: service=%s exporter=%s sample_rate=%s",
            self.settings.app_name,
            self.settings.telemetry_exporter,
            self.settings.telemetry_sample_rate,
        )
        return provider

    def shutdown(self) -> None:
        """Flush pending spans and remove instrumentation."""
        if self.tracer_provider is None:
            return
        HTTPXClientInstrumentor().uninstrument()
        LoggingInstrumentor().uninstrument()
        self.tracer_provider.shutdown()
        self.tracer_provider = None
        logger.info("Telemetry shut down")
