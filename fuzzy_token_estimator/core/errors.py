"""Exception hierarchy for the Fuzzy Token Estimator."""


class FuzzyTokenError(Exception):
    """Library base exception."""


class ConfigValidationError(FuzzyTokenError):
    """Model configuration violates its value constraints."""


class ProviderLoadError(FuzzyTokenError):
    """Provider source is missing or cannot be parsed."""
