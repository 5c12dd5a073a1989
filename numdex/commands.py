"""Manually invocable commands."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CommandResult:
    """Result from a command execution."""

    success: bool
    data: Any
    message: str


@dataclass
class Command:
    """A named action the user can run on demand."""

    id: str
    name: str
    callback: Callable[[], Any]


@dataclass
class CommandRegistry:
    """Registry of available commands."""

    commands: dict[str, Command] = field(default_factory=dict)

    def register(self, command: Command) -> None:
        """Register a command."""
        self.commands[command.id] = command

    def unregister(self, command_id: str) -> Command | None:
        return self.commands.pop(command_id, None)

    def get(self, command_id: str) -> Command | None:
        """Get a command by id."""
        return self.commands.get(command_id)

    def list(self) -> list[Command]:
        return sorted(self.commands.values(), key=lambda c: c.id)

    def execute(self, command_id: str) -> CommandResult:
        """Execute a command by id."""
        command = self.get(command_id)
        if not command:
            return CommandResult(
                success=False,
                data=None,
                message=f"Unknown command: {command_id}",
            )
        try:
            data = command.callback()
        except Exception as e:
            return CommandResult(
                success=False,
                data=None,
                message=f"Command error: {e}",
            )
        return CommandResult(
            success=True,
            data=data,
            message=f"{command.name} completed",
        )
