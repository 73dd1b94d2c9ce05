"""
Unit tests for migration detection.

Tests cover:
- primary_image container selection and malformed bodies
- detect_migration for missing inputs, equal and different images
- Logging of the detection result
"""

import logging

from migrationgate.migration import (
    DEFAULT_WORKLOAD_PROFILE,
    RHSSO_WORKLOAD_PROFILE,
    detect_migration,
    primary_image,
)
from migrationgate.resources import Container, Service
from tests.fixtures import NEW_IMAGE, OLD_IMAGE, make_service, make_workload, update_of


class TestPrimaryImage:
    """Tests for primary_image."""

    def test_single_container(self) -> None:
        assert primary_image(make_workload(OLD_IMAGE)) == OLD_IMAGE

    def test_named_container_preferred(self) -> None:
        body = make_workload(OLD_IMAGE, container_name="sso", sidecars=("proxy:1",))

        assert primary_image(body, "sso") == OLD_IMAGE

    def test_first_container_without_name(self) -> None:
        body = make_workload(OLD_IMAGE, container_name="sso", sidecars=("proxy:1",))

        assert primary_image(body) == "proxy:1"

    def test_falls_back_to_first_container(self) -> None:
        """An unknown container name falls back to the first container."""
        body = make_workload(OLD_IMAGE, container_name="keycloak", sidecars=("proxy:1",))

        assert primary_image(body, "sso") == "proxy:1"

    def test_missing_template(self) -> None:
        body = make_workload(OLD_IMAGE)
        body.spec.template = None

        assert primary_image(body) is None

    def test_no_containers(self) -> None:
        body = make_workload(OLD_IMAGE)
        body.spec.template.spec.containers = []

        assert primary_image(body) is None

    def test_empty_image(self) -> None:
        body = make_workload(OLD_IMAGE)
        body.spec.template.spec.containers = [Container(name="keycloak")]

        assert primary_image(body) is None

    def test_non_workload_body(self) -> None:
        assert primary_image(make_service()) is None
        assert primary_image(Service()) is None


class TestDetectMigration:
    """Tests for detect_migration."""

    def test_no_current_workload(self) -> None:
        assert detect_migration(None, update_of(make_workload(NEW_IMAGE))) is False

    def test_no_update_action(self) -> None:
        assert detect_migration(make_workload(OLD_IMAGE), None) is False

    def test_same_image(self) -> None:
        current = make_workload(OLD_IMAGE, replicas=5)
        desired = update_of(make_workload(OLD_IMAGE, replicas=1))

        assert detect_migration(current, desired, DEFAULT_WORKLOAD_PROFILE) is False

    def test_different_image(self) -> None:
        current = make_workload(OLD_IMAGE)
        desired = update_of(make_workload(NEW_IMAGE))

        assert detect_migration(current, desired, DEFAULT_WORKLOAD_PROFILE) is True

    def test_plain_string_comparison(self) -> None:
        """Tags are not parsed: any difference counts, even a registry alias."""
        current = make_workload("quay.io/keycloak/keycloak:9.0.2")
        desired = update_of(make_workload("docker.io/keycloak/keycloak:9.0.2"))

        assert detect_migration(current, desired) is True

    def test_profile_container(self) -> None:
        current = make_workload(OLD_IMAGE, sidecars=("proxy:1",))
        desired = update_of(make_workload(NEW_IMAGE, sidecars=("proxy:1",)))

        assert detect_migration(current, desired, RHSSO_WORKLOAD_PROFILE) is True
        # Without the profile only the first (sidecar) container is compared
        assert detect_migration(current, desired) is False

    def test_malformed_desired_body(self) -> None:
        current = make_workload(OLD_IMAGE)
        desired_body = make_workload(NEW_IMAGE)
        desired_body.spec.template.spec.containers = []

        assert detect_migration(current, update_of(desired_body)) is False

    def test_does_not_mutate_inputs(self) -> None:
        current = make_workload(OLD_IMAGE, status_replicas=3)
        desired = update_of(make_workload(NEW_IMAGE, status_replicas=3))
        current_before = current.model_copy(deep=True)
        desired_before = desired.model_copy(deep=True)

        detect_migration(current, desired)

        assert current == current_before
        assert desired == desired_before


class TestDetectionLogging:
    def test_migration_logged_at_info(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="migrationgate.migration.detector"):
            detect_migration(make_workload(OLD_IMAGE), update_of(make_workload(NEW_IMAGE)))

        assert "migration required" in caplog.text
        assert OLD_IMAGE in caplog.text
        assert NEW_IMAGE in caplog.text

    def test_malformed_body_logged_as_warning(self, caplog) -> None:
        current = make_workload(OLD_IMAGE)
        current.spec.template = None

        with caplog.at_level(logging.WARNING, logger="migrationgate.migration.detector"):
            detect_migration(current, update_of(make_workload(NEW_IMAGE)))

        assert any(r.levelno == logging.WARNING for r in caplog.records)
        assert "assuming no migration" in caplog.text
