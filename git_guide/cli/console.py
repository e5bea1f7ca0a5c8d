from typing import Callable

import click


class ClickConsole:
    """Console backed by ``click.prompt`` and ``click.echo``."""

    def __init__(
        self,
        prompt: Callable[..., str] = click.prompt,
        echo: Callable[..., None] = click.echo,
    ) -> None:
        self._prompt = prompt
        self._echo = echo

    def read_line(self, prompt: str) -> str:
        # An empty default lets a bare Enter through instead of re-asking.
        return self._prompt(prompt, default="", show_default=False, prompt_suffix="")

    def echo(self, message: str = "") -> None:
        self._echo(message)

    def echo_err(self, message: str) -> None:
        self._echo(message, err=True)
