"""
Command context object for the CLI.

Bundles the shared resources (config, console, terminal) handed to the
session and the exit path.
"""

from dataclasses import dataclass
from typing import Optional, TextIO

from rich.console import Console

from cbct_preset_selector.cli.config import AppConfig
from cbct_preset_selector.cli.terminal import Terminal


@dataclass
class CommandContext:
    """Shared context for a CLI run"""

    console: Console
    config: AppConfig
    terminal: Terminal

    @property
    def pause_on_exit(self) -> bool:
        return self.config.pause_on_exit

    def print(self, *args, **kwargs):
        """Print to console"""
        self.console.print(*args, **kwargs)


def create_context(
    config: Optional[AppConfig] = None,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
) -> CommandContext:
    """Create a new context; console and input stream can be swapped for testing"""
    console = console or Console(highlight=False)
    return CommandContext(
        console=console,
        config=config or AppConfig(),
        terminal=Terminal(console=console, stream=stream),
    )
