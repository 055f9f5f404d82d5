"""Domain layer for ecodamage application."""

# Services are resolved lazily: they import the database layer, which in turn
# imports domain entities.
_SERVICES = {
    "CategoryService": "ecodamage.domain.category",
    "ReportService": "ecodamage.domain.report",
    "DashboardService": "ecodamage.domain.dashboard",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
