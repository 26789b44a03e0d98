"""Exceptions raised by stock control operations.

Every error is raised before the ledger or the store is touched.
"""


class StockControlError(Exception):
    """Base class for all stock control errors."""


class PreconditionError(StockControlError):
    """The operation was refused; nothing was changed."""


class DuplicateTechnicianError(PreconditionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f'El técnico "{name}" ya existe en la lista.')


class FormatError(StockControlError):
    """An uploaded file did not match any known layout."""

    def __init__(self, message: str, warnings: list[str] | None = None):
        self.warnings = warnings or []
        super().__init__(message)


class RestoreError(StockControlError):
    """A backup document could not be restored."""


class ExtractionError(StockControlError):
    """The document extraction service failed or returned garbage."""
