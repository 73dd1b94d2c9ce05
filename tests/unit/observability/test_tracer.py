"""
Unit tests for tracer protocol and implementations.

Tests for:
- Tracer Protocol (runtime_checkable)
- NullTracer class
- OpenTelemetryTracer class
- MockTracer class
- create_tracer() factory function
- Gate tracing with a real OpenTelemetry span
"""

from __future__ import annotations

import pytest

from migrationgate import ClusterState, MigrationGate
from migrationgate.observability import (
    OTEL_AVAILABLE,
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
    should_trace,
)
from tests.fixtures import NEW_IMAGE, OLD_IMAGE, make_application, make_workload, update_of


class TestTracerProtocol:
    """Tests for Tracer protocol."""

    def test_null_tracer_implements_protocol(self):
        assert isinstance(NullTracer(), Tracer)

    def test_mock_tracer_implements_protocol(self):
        assert isinstance(MockTracer(), Tracer)

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_otel_tracer_implements_protocol(self):
        assert isinstance(OpenTelemetryTracer(__name__), Tracer)


class TestNullTracer:
    """Tests for NullTracer class."""

    def test_span_yields_none(self):
        tracer = NullTracer()
        with tracer.span("test.span", {"key": "value"}) as span:
            assert span is None

    def test_enabled_is_false(self):
        assert NullTracer().enabled is False

    def test_span_does_nothing_on_exception(self):
        """Exceptions propagate through the no-op span."""
        tracer = NullTracer()
        with pytest.raises(ValueError, match="boom"), tracer.span("test"):
            raise ValueError("boom")


class TestOpenTelemetryTracer:
    """Tests for OpenTelemetryTracer class."""

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_creates_real_spans(self):
        tracer = OpenTelemetryTracer(__name__)
        with tracer.span("test.span", {"key": "value"}) as span:
            assert span is not None
            assert hasattr(span, "set_attribute")

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_enabled_is_true(self):
        assert OpenTelemetryTracer(__name__).enabled is True

    @pytest.mark.skipif(OTEL_AVAILABLE, reason="OTEL is installed")
    def test_raises_without_otel(self):
        with pytest.raises(ImportError):
            OpenTelemetryTracer(__name__)


class TestMockTracer:
    """Tests for MockTracer class."""

    def test_records_spans(self):
        tracer = MockTracer()
        with tracer.span("first"):
            pass
        with tracer.span("second", {"attr": 123}):
            pass

        assert tracer.spans == [("first", None), ("second", {"attr": 123})]
        assert tracer.span_names == ["first", "second"]

    def test_enabled_is_true(self):
        assert MockTracer().enabled is True

    def test_clear_method(self):
        tracer = MockTracer()
        with tracer.span("test"):
            pass

        tracer.clear()

        assert tracer.spans == []

    def test_records_span_when_exception_occurs(self):
        tracer = MockTracer()
        with pytest.raises(ValueError), tracer.span("failing"):
            raise ValueError("error")

        assert tracer.span_names == ["failing"]


class TestCreateTracer:
    """Tests for create_tracer() factory function."""

    def test_returns_null_when_disabled(self):
        assert isinstance(create_tracer(__name__, enable_tracing=False), NullTracer)

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_returns_otel_when_enabled_and_available(self):
        assert isinstance(create_tracer(__name__, enable_tracing=True), OpenTelemetryTracer)

    @pytest.mark.skipif(OTEL_AVAILABLE, reason="OTEL is installed")
    def test_returns_null_when_otel_not_available(self):
        assert isinstance(create_tracer(__name__, enable_tracing=True), NullTracer)

    def test_should_trace(self):
        assert should_trace(False) is False
        assert should_trace(True) is OTEL_AVAILABLE


class TestGateTracing:
    """Tests for the gate running under each tracer."""

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_gate_with_opentelemetry_tracer(self):
        """The gate sets result attributes on a real span without failing."""
        gate = MigrationGate(tracer=OpenTelemetryTracer(__name__))
        state = ClusterState(workload_resource=make_workload(OLD_IMAGE))

        result = gate.migrate(
            make_application(backups=True),
            state,
            [update_of(make_workload(NEW_IMAGE))],
        )

        assert len(result) == 2

    def test_gate_with_null_tracer(self):
        gate = MigrationGate(tracer=NullTracer())
        state = ClusterState(workload_resource=make_workload(OLD_IMAGE))

        result = gate.migrate(make_application(), state, [update_of(make_workload(NEW_IMAGE))])

        assert result[0].ref.status.replicas == 0

    def test_gate_explicit_tracer_overrides_flag(self):
        tracer = MockTracer()
        gate = MigrationGate(tracer=tracer, enable_tracing=False)

        gate.migrate(make_application(), ClusterState(), [])

        assert tracer.span_names == ["migration_gate.migrate"]
