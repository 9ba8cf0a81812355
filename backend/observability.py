import base64
import logging
import os

from dotenv import load_dotenv
from opentelemetry import trace as trace_api
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logger = logging.getLogger(__name__)

SERVICE_NAME = "flight-price-calendar-api"


def setup_langfuse() -> bool:
    """Point the OTLP exporter at Langfuse if its credentials are configured."""
    load_dotenv()

    public_key = os.environ.get("LANGFUSE_PUBLIC_KEY")
    secret_key = os.environ.get("LANGFUSE_SECRET_KEY")
    host = os.environ.get("LANGFUSE_HOST")

    if not all([public_key, secret_key, host]):
        return False

    auth = base64.b64encode(f"{public_key}:{secret_key}".encode()).decode()

    os.environ["OTEL_EXPORTER_OTLP_ENDPOINT"] = host + "/api/public/otel"
    os.environ["OTEL_EXPORTER_OTLP_HEADERS"] = f"Authorization=Basic {auth}"

    logger.info("Langfuse OTLP export configured")
    return True


def setup_tracing() -> bool:
    """Set up OpenTelemetry tracing when an OTLP endpoint is available."""
    try:
        if not setup_langfuse() and not os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT"):
            logger.info("No OTLP endpoint configured, tracing disabled")
            return False

        tracer_provider = TracerProvider(
            resource=Resource.create({"service.name": SERVICE_NAME})
        )
        tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
        trace_api.set_tracer_provider(tracer_provider=tracer_provider)

        logger.info("OpenTelemetry tracing set up")
        return True

    except Exception as e:
        logger.error(f"Failed to set up tracing: {e}")
        return False


def get_tracer(name: str = __name__):
    """Get a tracer instance for manual instrumentation."""
    return trace_api.get_tracer(name)
