"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ReferenceRateError(DomainException):
    """Reference rate API returned an error or is unavailable"""

    pass


class InvalidProjectionHorizonError(DomainException):
    """Requested projection horizon is outside the supported range"""

    pass
