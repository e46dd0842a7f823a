import pytest

from http_req.commands import (
    OPEN_CLIENT_ID,
    Command,
    CommandRegistry,
    MethodCommand,
    method_command_id,
)
from http_req.extension import activate
from http_req.request import Method
from http_req.transports import HttpxTransport


class DummyCommand(Command):
    id = "test.dummy"
    title = "A dummy command for testing"

    async def run(self):
        return "ran"


class AnotherCommand(Command):
    id = "test.another"
    title = "Another command"

    async def run(self):
        return "ok"


class TestMethodCommandId:
    @pytest.mark.parametrize("method, expected", [
        (Method.GET, "http-req.httpGet"),
        (Method.POST, "http-req.httpPost"),
        (Method.PUT, "http-req.httpPut"),
        (Method.DELETE, "http-req.httpDelete"),
        (Method.PATCH, "http-req.httpPatch"),
    ])
    def test_ids(self, method, expected):
        assert method_command_id(method) == expected


class TestCommandRegistry:
    def test_register_and_get(self):
        reg = CommandRegistry()
        cmd = DummyCommand()
        reg.register(cmd)
        assert reg.get("test.dummy") is cmd

    def test_get_unknown_returns_none(self):
        assert CommandRegistry().get("nonexistent") is None

    def test_list_commands(self):
        reg = CommandRegistry()
        reg.register(DummyCommand())
        reg.register(AnotherCommand())
        assert [c.id for c in reg.list_commands()] == ["test.dummy", "test.another"]

    def test_register_overwrites_same_id(self):
        reg = CommandRegistry()
        reg.register(DummyCommand())
        second = DummyCommand()
        reg.register(second)
        assert reg.get("test.dummy") is second
        assert len(reg.list_commands()) == 1

    @pytest.mark.asyncio
    async def test_execute(self):
        reg = CommandRegistry()
        reg.register(DummyCommand())
        assert await reg.execute("test.dummy") == "ran"

    @pytest.mark.asyncio
    async def test_execute_unknown_raises(self):
        with pytest.raises(KeyError):
            await CommandRegistry().execute("test.missing")


class TestActivate:
    def test_registers_all_commands(self, make_host, make_transport):
        registry = activate(make_host(), make_transport())
        assert [c.id for c in registry.list_commands()] == [
            "http-req.openHttpClient",
            "http-req.httpGet",
            "http-req.httpPost",
            "http-req.httpPut",
            "http-req.httpDelete",
            "http-req.httpPatch",
        ]

    def test_method_commands_bound_to_their_method(self, make_host, make_transport):
        registry = activate(make_host(), make_transport())
        command = registry.get("http-req.httpPatch")
        assert isinstance(command, MethodCommand)
        assert command.method is Method.PATCH

    def test_default_transport_is_httpx(self, make_host):
        registry = activate(make_host())
        command = registry.get("http-req.httpGet")
        assert isinstance(command.adapter.dispatcher.transport, HttpxTransport)

    @pytest.mark.asyncio
    async def test_method_command_runs_prompt_flow(self, make_host, make_transport):
        host = make_host(["https://api.example.com/data"])
        transport = make_transport(["hello"])
        registry = activate(host, transport)
        view = await registry.execute("http-req.httpGet")
        assert view.display_text == "hello"
        assert host.surfaces[0].lines == ["hello"]

    @pytest.mark.asyncio
    async def test_open_command_opens_panel(self, make_host, make_transport):
        host = make_host()
        registry = activate(host, make_transport())
        panel = await registry.execute(OPEN_CLIENT_ID)
        assert host.panels == [panel]
        assert "Send Request" in panel.markup
