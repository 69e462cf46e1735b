"""
Schedule exceptions.

The resolution core never raises these; missing references and degenerate
cycles degrade to fallbacks instead. They are raised at the edges: strict
validation for configuration editors, and configuration loading.
"""


class ScheduleValidationError(Exception):
    """Raised when a schedule is required to be free of violations and is not."""

    def __init__(self, message: str, violations: list[str] | None = None):
        """
        Initialize a schedule validation error.

        Args:
            message: Human-readable error message
            violations: List of specific violation descriptions
        """
        super().__init__(message)
        self.message = message
        self.violations = violations or []

    def __str__(self) -> str:
        """Return formatted error message with violations."""
        if self.violations:
            violations_text = "\n  - ".join(self.violations)
            return f"{self.message}\nViolations:\n  - {violations_text}"
        return self.message


class ConfigLoadError(Exception):
    """Raised when a schedule configuration file cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
