"""
Domain errors raised by the density and income computations.
"""


class OrchardPlannerError(Exception):
    """Base class for all orchard planner errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(OrchardPlannerError, ValueError):
    """Unknown model, middle bed or bed archetype."""


class InvalidInputError(OrchardPlannerError, ValueError):
    """Numeric input outside its valid domain (acres, utilization)."""
