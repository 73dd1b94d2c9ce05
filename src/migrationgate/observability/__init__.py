"""
Observability utilities for migrationgate.

This module provides tracing and standard attribute definitions for the
migration gate.

Example:
    >>> from migrationgate.observability import OTEL_AVAILABLE, create_tracer
    >>>
    >>> tracer = create_tracer(__name__, enable_tracing=OTEL_AVAILABLE)
    >>> with tracer.span("migration_gate.migrate"):
    ...     pass

Note:
    OpenTelemetry is an optional dependency. All utilities in this module
    gracefully handle the case where OpenTelemetry is not installed.
"""

from migrationgate.observability.attributes import (
    ATTR_ACTION_COUNT,
    ATTR_BACKUP_REQUESTED,
    ATTR_CR_NAME,
    ATTR_CR_NAMESPACE,
    ATTR_MIGRATION_REQUIRED,
    ATTR_PROFILE,
    ATTR_RESULT_ACTION_COUNT,
    ATTR_WORKLOAD_KIND,
    ATTR_WORKLOAD_NAME,
)
from migrationgate.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
)
from migrationgate.observability.tracing import (
    OTEL_AVAILABLE,
    should_trace,
)

__all__ = [
    # Tracing utilities
    "OTEL_AVAILABLE",
    "should_trace",
    # Tracer (composition-based API)
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
    # Attributes
    "ATTR_ACTION_COUNT",
    "ATTR_BACKUP_REQUESTED",
    "ATTR_CR_NAME",
    "ATTR_CR_NAMESPACE",
    "ATTR_MIGRATION_REQUIRED",
    "ATTR_PROFILE",
    "ATTR_RESULT_ACTION_COUNT",
    "ATTR_WORKLOAD_KIND",
    "ATTR_WORKLOAD_NAME",
]
