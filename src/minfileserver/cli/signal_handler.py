"""Signal handling for the minfileserver CLI.

The development server run by Flask swallows KeyboardInterrupt and returns
normally, so the interrupt is recorded here and turned into exit code 130 by
the entry point once the server has stopped.
"""

import signal
from threading import Event
from types import FrameType
from typing import Optional


class SignalHandler:
    """Records SIGINT so the CLI can report an interrupted shutdown.

    Attributes:
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigint_handler: Original SIGINT signal handler.
    """

    def __init__(self) -> None:
        """Initialize signal handler with the original handler preserved."""
        self.sigint_received = Event()
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Handle SIGINT signal.

        Records the interrupt, restores the original handler so a second Ctrl+C
        behaves as usual, and raises KeyboardInterrupt to stop the server loop.

        Args:
            signum: The signal number.
            frame: The current stack frame.

        Raises:
            KeyboardInterrupt: Always.
        """
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)
        raise KeyboardInterrupt


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGINT handler."""
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)
