"""Library exceptions for the migrationgate package."""

from __future__ import annotations

from collections.abc import Sequence


class MigrationGateError(Exception):
    """Base exception for migrationgate library."""

    pass


class UnknownProfileError(MigrationGateError):
    """Raised when a custom resource names a profile with no registered workload profile."""

    def __init__(self, profile: str, known_profiles: Sequence[str]) -> None:
        self.profile = profile
        self.known_profiles = list(known_profiles)
        known = ", ".join(repr(p) for p in self.known_profiles) if self.known_profiles else "none"
        super().__init__(f"No workload profile registered for profile {profile!r}. Known profiles: {known}")


class AmbiguousWorkloadActionError(MigrationGateError):
    """
    Raised when more than one update action targets the managed workload.

    The diff engine produces at most one update per resource in a single
    reconciliation pass. Several matches mean the desired action sequence
    is malformed and the gate cannot tell which body is the intended one.

    Attributes:
        kind: Resource kind of the workload controller
        name: Resource name of the workload controller
        indices: Positions of the matching actions in the sequence
    """

    def __init__(self, kind: str, name: str, indices: Sequence[int]) -> None:
        self.kind = kind
        self.name = name
        self.indices = list(indices)
        positions = ", ".join(str(i) for i in self.indices)
        super().__init__(
            f"Expected at most one update action for {kind} '{name}', "
            f"found {len(self.indices)} (positions: {positions})"
        )
