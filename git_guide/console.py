from typing import Protocol


class Console(Protocol):
    """Line-based terminal I/O used by the interactive session."""

    def read_line(self, prompt: str) -> str:
        """Show *prompt* and return the raw line typed by the user."""

    def echo(self, message: str = "") -> None:
        ...

    def echo_err(self, message: str) -> None:
        ...
