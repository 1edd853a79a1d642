"""Root of the stickfx exception hierarchy.

Catch ``StickFxError`` to handle anything the library raises on purpose.
Each error carries a short ``user_message`` for the CLI and a
``technical_message`` with report ids and attempt counts for the log.

``recoverable`` separates two kinds of failure. A ``FeatureReportError``
is recoverable: USB contention outlasted the retry policy and the same
call may well succeed after reconnecting the stick. An
``LedOutOfRangeError`` is not: the caller asked for an LED the device
does not have, and repeating the call cannot help.
"""

from typing import Optional


class StickFxError(Exception):
    """
    Base exception for all stickfx errors.

    Attributes:
        user_message: One line suitable for the terminal
        technical_message: Detail for the log (report id, attempts, hidapi error)
        recoverable: True when retrying after a reconnect may succeed
        recovery_hint: What the user can try next
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        """
        Initialize the error.

        Args:
            user_message: Message to show to users
            technical_message: Message for the log (defaults to user_message)
            recoverable: True if the failure is transient, such as a USB transfer
            recovery_hint: Shown after the message by ``get_full_message``
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, as printed by the CLI."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
