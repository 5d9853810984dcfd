"""Custom service layer errors."""


class ServiceError(Exception):
    """Base error for service-layer failures."""


class ValidationError(ServiceError):
    """Raised when a business rule validation fails."""


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""


class RuleNotFoundError(NotFoundError):
    """Raised when no tax rule matches a customer's age."""


class RepositoryError(ServiceError):
    """Raised when a backing data file cannot be read."""
