class SpreadsheetError(Exception):
    """Base class for other exceptions."""


class ValidationError(SpreadsheetError):
    """Raised when a document fails structural validation during a build."""

    def __init__(self, errors) -> None:
        self.errors = list(errors)
        super().__init__("validation failed: " + ", ".join(self.errors))


class UnsupportedWarning(Warning):
    """Raised for values that are stored with reduced fidelity."""
