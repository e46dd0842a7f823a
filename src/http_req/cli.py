import argparse
import asyncio

from .commands import OPEN_CLIENT_ID, CommandRegistry, method_command_id
from .config import Settings
from .extension import activate
from .host import PanelServer, TerminalHost
from .logs import setup_logging
from .request import Method, ResponseView

SHORTCUTS = {"open": OPEN_CLIENT_ID}
SHORTCUTS.update({m.value.lower(): method_command_id(m) for m in Method})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-req",
        description="Send one-off HTTP requests from prompts or a browser form",
    )
    parser.add_argument("command", help=f"One of: {', '.join(SHORTCUTS)}, list, or a full command id")
    parser.add_argument("--host", default=Settings.panel_host, help="Panel server address (default: %(default)s)")
    parser.add_argument("--port", type=int, default=Settings.panel_port, help="Panel server port (default: %(default)s)")
    parser.add_argument("--no-browser", action="store_true", help="Don't open a browser for the panel")
    parser.add_argument("--no-follow-redirects", action="store_true", help="Return redirect responses as-is")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log dispatches to stderr")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    options = {
        "follow_redirects": not args.no_follow_redirects,
        "panel_host": args.host,
        "panel_port": args.port,
        "open_browser": not args.no_browser,
    }
    if args.verbose:
        return Settings.verbose(**options)
    return Settings(**options)


async def run_command(
    registry: CommandRegistry,
    host: TerminalHost,
    command_id: str,
    settings: Settings,
) -> int:
    """Run one command; the panel command keeps serving until interrupted."""
    result = await registry.execute(command_id)
    if command_id == OPEN_CLIENT_ID:
        await host.server.serve(open_browser=settings.open_browser)
        return 0
    if isinstance(result, ResponseView) and result.success:
        return 0
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(args)
    setup_logging(settings.log_level)

    host = TerminalHost(PanelServer(settings.panel_host, settings.panel_port))
    registry = activate(host, settings=settings)

    if args.command == "list":
        for command in registry.list_commands():
            print(f"{command.id:<24} {command.title}")
        return 0

    command_id = SHORTCUTS.get(args.command.lower(), args.command)
    if registry.get(command_id) is None:
        parser.error(f"unknown command: {args.command}")

    try:
        return asyncio.run(run_command(registry, host, command_id, settings))
    except KeyboardInterrupt:
        print("\nShutting down")
        return 0
