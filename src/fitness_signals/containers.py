"""Dependency container wiring for the application."""

from dataclasses import dataclass

from fitness_signals.config import Settings
from fitness_signals.services.dashboard import DashboardService, RecordSource


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dashboard_service: DashboardService


def build_container(
    source: RecordSource, settings: Settings | None = None
) -> AppContainer:
    """Create the default dependency container around a record source."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        dashboard_service=DashboardService(source=source, settings=resolved_settings),
    )
