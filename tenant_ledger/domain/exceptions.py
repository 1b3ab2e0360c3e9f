"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Lease terms are invalid and no schedule can be produced"""

    def __init__(self, message: str, reason: str = "invalid_input"):
        super().__init__(message)
        self.reason = reason
