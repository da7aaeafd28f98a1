"""Domain errors."""


class InvalidPlanParameter(ValueError):
    """Raised when an investment plan field is outside its valid domain.

    Attributes:
        field: Name of the offending plan field.
        value: Value that failed validation.
    """

    def __init__(self, field: str, value, reason: str) -> None:
        super().__init__(f"Invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason


__all__ = ["InvalidPlanParameter"]
