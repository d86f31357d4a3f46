"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutricard.config import Settings
from nutricard.services.luhn import CardValidationService
from nutricard.services.nutriscore import NutriScoreService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    card_validation_service: CardValidationService
    nutri_score_service: NutriScoreService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        card_validation_service=CardValidationService(debug=resolved_settings.debug),
        nutri_score_service=NutriScoreService(debug=resolved_settings.debug),
    )
