"""
Shared test fixtures for the migrationgate library.

Usage:
    from tests.fixtures import (
        make_application,
        make_workload,
        make_service,
        update_of,
    )
"""

from tests.fixtures.workloads import (
    CR_NAME,
    NAMESPACE,
    NEW_IMAGE,
    OLD_IMAGE,
    action_kinds,
    create_of,
    make_application,
    make_service,
    make_workload,
    update_of,
)

__all__ = [
    "CR_NAME",
    "NAMESPACE",
    "NEW_IMAGE",
    "OLD_IMAGE",
    "action_kinds",
    "create_of",
    "make_application",
    "make_service",
    "make_workload",
    "update_of",
]
