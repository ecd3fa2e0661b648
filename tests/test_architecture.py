"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters reach use cases only through domain ports
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import ports, services or adapters."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("travel_schedules.domain.models*")
        .should_not_import("travel_schedules.adapters*")
        .should_not_import("travel_schedules.application*")
        .should_not_import("travel_schedules.domain.ports*")
        .may_import("travel_schedules.domain.models*")
        .check("travel_schedules")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("travel_schedules.domain.ports*")
        .should_not_import("travel_schedules.adapters*")
        .should_not_import("travel_schedules.application*")
        .may_import("travel_schedules.domain.ports*")
        .may_import("travel_schedules.domain.models*")
        .check("travel_schedules")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("travel_schedules.application*")
        .should_not_import("travel_schedules.adapters*")
        .may_import("travel_schedules.domain*")
        .may_import("travel_schedules.application*")
        .check("travel_schedules")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services; they receive them through ports."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("travel_schedules.adapters*")
        .should_not_import("travel_schedules.application*")
        .may_import("travel_schedules.domain*")
        .may_import("travel_schedules.adapters*")
        .check("travel_schedules", only_direct_imports=True)
    )


def test_domain_has_no_outward_dependencies() -> None:
    """Domain layer should not depend on outer layers or entry points."""
    (
        archrule("domain no cycles", comment="Domain layer should not depend on outer layers")
        .match("travel_schedules.domain*")
        .should_not_import("travel_schedules.adapters*")
        .should_not_import("travel_schedules.application*")
        .should_not_import("travel_schedules.cli")
        .should_not_import("travel_schedules.main")
        .may_import("travel_schedules.domain*")
        .check("travel_schedules", only_direct_imports=True)
    )


def test_cli_dont_import_web_adapters() -> None:
    """CLI should not import web adapters to allow running CLI without web server."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("travel_schedules.cli")
        .should_not_import("travel_schedules.adapters.web*")
        .check("travel_schedules")
    )
