"""
Console printer adapter - Implements OutputSink protocol.

Demonstration lines go to stdout; diagnostics go through logging
(stderr), so stdout carries only the demonstration output.
"""


class ConsolePrinter:
    """
    Implements OutputSink protocol via print().

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def write(self, line: str) -> None:
        """
        Print one line to stdout.

        Args:
            line: Text without trailing newline
        """
        print(line)
