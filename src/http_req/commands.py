from abc import ABC, abstractmethod
from typing import Any

from .panel import PanelAdapter
from .prompt_flow import PromptAdapter
from .request import Method

COMMAND_PREFIX = "http-req"
OPEN_CLIENT_ID = f"{COMMAND_PREFIX}.openHttpClient"


def method_command_id(method: Method) -> str:
    """e.g. Method.GET -> 'http-req.httpGet'"""
    return f"{COMMAND_PREFIX}.http{method.value.capitalize()}"


class Command(ABC):
    """Abstract base class for all registered commands."""

    id: str
    title: str

    @abstractmethod
    async def run(self) -> Any:
        """Run the command. Commands take no arguments."""
        ...


class MethodCommand(Command):
    """Prompt for a request using a fixed HTTP method."""

    def __init__(self, method: Method, adapter: PromptAdapter) -> None:
        self.method = method
        self.adapter = adapter
        self.id = method_command_id(method)
        self.title = f"HTTP: Send {method.value} Request"

    async def run(self):
        return await self.adapter.run(self.method)


class OpenClientCommand(Command):
    """Open the HTTP Client form panel."""

    id = OPEN_CLIENT_ID
    title = "HTTP: Open HTTP Client"

    def __init__(self, adapter: PanelAdapter) -> None:
        self.adapter = adapter

    async def run(self):
        return self.adapter.open()


class CommandRegistry:
    """Registry that holds commands by id."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command by its id."""
        self._commands[command.id] = command

    def get(self, command_id: str) -> Command | None:
        """Look up a command by id."""
        return self._commands.get(command_id)

    def list_commands(self) -> list[Command]:
        """Return all registered commands."""
        return list(self._commands.values())

    async def execute(self, command_id: str) -> Any:
        """Run the command registered as ``command_id``.

        Raises KeyError for an unknown id.
        """
        command = self.get(command_id)
        if command is None:
            raise KeyError(command_id)
        return await command.run()


def default_registry(panel: PanelAdapter, prompts: PromptAdapter) -> CommandRegistry:
    """Create a CommandRegistry with the panel command and one command per method."""
    registry = CommandRegistry()
    registry.register(OpenClientCommand(panel))
    for method in Method:
        registry.register(MethodCommand(method, prompts))
    return registry
