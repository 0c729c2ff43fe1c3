"""MCP server exposing the repository command system as one tool over stdio.

Two argument shapes are supported, chosen at startup:
    "command": {"command": "Create a repository for ..."}
    "fields":  {"description": "...", "tags": "python cli", "website": "..."}

Parse failures become INVALID_PARAMS protocol errors before any API call.
API failures come back as a tool result with isError set.
"""

import asyncio

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from repotalk.commands import router
from repotalk.commands.parse import ParseError, InvalidParams

SERVER_NAME = "repotalk"
TOOL_NAME = "create_repo"

_COMMAND_TOOL = types.Tool(
    name=TOOL_NAME,
    description="Create or update GitHub repositories using natural language commands",
    inputSchema={
        "type": "object",
        "properties": {
            "command": {
                "type": "string",
                "description": (
                    'Natural language command like "Create a repository for my machine '
                    'learning project with tags python tensorflow" or "Update '
                    'owner/repository-name description to New description"'
                ),
            },
        },
        "required": ["command"],
    },
)

_FIELDS_TOOL = types.Tool(
    name=TOOL_NAME,
    description="Create a GitHub repository from a description, tags and an optional website",
    inputSchema={
        "type": "object",
        "properties": {
            "description": {
                "type": "string",
                "description": "Repository description; the repository name is derived from it",
            },
            "tags": {
                "type": "string",
                "description": "Space-separated topics, e.g. 'python machine-learning'",
            },
            "website": {
                "type": "string",
                "description": "Optional homepage URL",
            },
        },
        "required": ["description", "tags"],
    },
)

VARIANTS = {"command": _COMMAND_TOOL, "fields": _FIELDS_TOOL}


def _error(code, message):
    return McpError(types.ErrorData(code=code, message=message))


class RepoServer:
    def __init__(self, dispatcher, variant="command"):
        if variant not in VARIANTS:
            raise ValueError(f"Unknown tool variant: {variant!r}")
        self.dispatcher = dispatcher
        self.variant = variant
        self.server = Server(SERVER_NAME)
        self.server.list_tools()(self.list_tools)
        # Registered directly so McpError reaches the client as a protocol error
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def list_tools(self):
        return [VARIANTS[self.variant]]

    def parse_arguments(self, arguments):
        """Turn tool arguments into a parsed command. Raises ParseError."""
        if not isinstance(arguments, dict):
            raise InvalidParams()
        if self.variant == "fields":
            return router.parse_fields(
                arguments.get("description"), arguments.get("tags"), arguments.get("website"))
        command = arguments.get("command")
        if not isinstance(command, str):
            raise InvalidParams()
        return router.parse(command)

    async def call_tool(self, name, arguments):
        if name != TOOL_NAME:
            raise _error(types.METHOD_NOT_FOUND, f"Unknown tool: {name}")
        try:
            cmd = self.parse_arguments(arguments)
        except ParseError as e:
            raise _error(types.INVALID_PARAMS, str(e))

        result = await asyncio.to_thread(self.dispatcher.dispatch, cmd)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.to_text())],
            isError=result.is_error,
        )

    async def _handle_call_tool(self, req):
        result = await self.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream, write_stream, self.server.create_initialization_options())
