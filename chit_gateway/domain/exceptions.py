"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidChitParametersError(DomainException):
    """Chit parameters violate a precondition of the payment formulas"""

    pass


class MonthOutOfRangeError(InvalidChitParametersError):
    """Month is not within the chit's 1..members_count cycle"""

    pass
