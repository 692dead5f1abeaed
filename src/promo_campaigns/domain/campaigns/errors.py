class CatalogError(ValueError):
    """Raised when a campaign catalog is built from conflicting definitions."""


class InvalidActivationRule(ValueError):
    """Raised when an activation rule is built with an unusable time range."""
