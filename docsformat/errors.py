"""Domain exceptions for formatter and CLI diagnostics."""

from __future__ import annotations


class FormatterInputError(ValueError):
    """Raised when a formatter receives an argument outside its domain."""

    def __init__(
        self,
        *,
        operation: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an operation-scoped input error."""

        super().__init__(detail)
        self.operation = operation
        self.detail = detail
        self.hint = hint


class CommandStageError(RuntimeError):
    """Raised when a specific CLI stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
