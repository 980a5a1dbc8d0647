"""Validation errors surfaced to the agent as a rejected estimate."""

from __future__ import annotations

from first_debit.schemas.debit import DebitRejected, FailureReason


class DebitValidationError(ValueError):
    """Missing or contradictory inputs. The agent must fix the form."""

    def __init__(self, reason: FailureReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message

    def to_result(self) -> DebitRejected:
        """Build the failure variant shown to the agent."""
        return DebitRejected(reason=self.reason, message=self.message)
