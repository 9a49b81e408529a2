"""Domain-specific exceptions"""

from typing import List


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanInputError(DomainException):
    """Calculator input failed validation"""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class RateCardError(DomainException):
    """Rate card data is missing, malformed, or unusable"""

    pass
