"""
Application Factory
Single Responsibility: Create and configure the application instance.
"""
from functools import lru_cache
from typing import Optional

from injector import Injector

from class_stripper.app_factory_di import AppModule
from class_stripper.cleaner.application.services.clean_orchestrator import (
    CleanOrchestrator,
)
from class_stripper.cleaner.application.services.html_validator import (
    HtmlValidityChecker,
)
from class_stripper.settings import Settings, get_settings


def create_injector(settings: Optional[Settings] = None) -> Injector:
    """Build an injector wired with the application module."""
    return Injector(AppModule(settings or get_settings()))


def create_clean_orchestrator(settings: Optional[Settings] = None) -> CleanOrchestrator:
    """
    Creates a CleanOrchestrator with all of its collaborators.

    Args:
        settings: Settings to wire with; the cached settings when omitted

    Returns:
        Ready to use orchestrator
    """
    return create_injector(settings).get(CleanOrchestrator)


def create_validity_checker(settings: Optional[Settings] = None) -> HtmlValidityChecker:
    return create_injector(settings).get(HtmlValidityChecker)


@lru_cache()
def get_default_orchestrator() -> CleanOrchestrator:
    """
    Shared orchestrator used by the module-level API.

    The orchestrator keeps no per-call state, so one instance serves every
    caller.
    """
    return create_clean_orchestrator()


@lru_cache()
def get_default_validity_checker() -> HtmlValidityChecker:
    return create_validity_checker()


def reset_defaults() -> None:
    """Drop the cached default services, e.g. after reload_settings()."""
    get_default_orchestrator.cache_clear()
    get_default_validity_checker.cache_clear()
