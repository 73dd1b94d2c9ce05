"""
Shared pytest fixtures for the migrationgate library tests.

This module provides:
- Custom resource fixtures (application, application_with_backups)
- Observed state fixtures (empty_state, running_state)
- Gate fixtures (gate, traced_gate, mock_tracer)

All fixtures are function scoped; the library keeps no state between calls.
"""

from __future__ import annotations

import pytest

from migrationgate.config import ManagedApplication
from migrationgate.migration import MigrationGate, create_migration_gate
from migrationgate.observability import MockTracer
from migrationgate.state import ClusterState
from tests.fixtures import OLD_IMAGE, make_application, make_workload

# =============================================================================
# Custom Resource Fixtures
# =============================================================================


@pytest.fixture
def application() -> ManagedApplication:
    """
    Provide a custom resource with migration backups disabled.

    Returns:
        A default-profile ManagedApplication.
    """
    return make_application()


@pytest.fixture
def application_with_backups() -> ManagedApplication:
    """
    Provide a custom resource with migration backups enabled.

    Returns:
        A default-profile ManagedApplication requesting backups.
    """
    return make_application(backups=True)


# =============================================================================
# Observed State Fixtures
# =============================================================================


@pytest.fixture
def empty_state() -> ClusterState:
    """Observed state before the first reconciliation."""
    return ClusterState()


@pytest.fixture
def running_state() -> ClusterState:
    """
    Provide an observed state with five replicas running the old image.

    Returns:
        ClusterState whose workload runs OLD_IMAGE.
    """
    return ClusterState(
        workload_resource=make_workload(OLD_IMAGE, replicas=5, status_replicas=5),
    )


# =============================================================================
# Gate Fixtures
# =============================================================================


@pytest.fixture
def gate() -> MigrationGate:
    """Provide a gate with the built-in profiles and tracing disabled."""
    return create_migration_gate(enable_tracing=False)


@pytest.fixture
def mock_tracer() -> MockTracer:
    return MockTracer()


@pytest.fixture
def traced_gate(mock_tracer: MockTracer) -> MigrationGate:
    """Provide a gate recording its spans on ``mock_tracer``."""
    return create_migration_gate(tracer=mock_tracer)
