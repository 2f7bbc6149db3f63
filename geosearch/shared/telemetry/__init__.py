"""Shared telemetry: logging setup and tracing helpers.

SearchTelemetry (telemetry.py) pulls in the OpenTelemetry SDK and
instrumentations; import it directly where tracing is set up.
"""

from geosearch.shared.telemetry.logging import get_logger, setup_logging
from geosearch.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "get_logger",
    "traced",
    "add_span_attributes",
]
