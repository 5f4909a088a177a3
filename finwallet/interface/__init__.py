"""Mini README: Interactive interfaces for finwallet.

Exports the console session that powers the line-based command loop and
the enum of command tokens it understands.
"""

from .commands import ConsoleCommand
from .console import ConsoleSession, parse_amount

__all__ = ["ConsoleCommand", "ConsoleSession", "parse_amount"]
