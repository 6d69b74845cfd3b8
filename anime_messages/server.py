# SPDX-License-Identifier: MIT
"""
anime-messages server entrypoint.

Wires FastMCP with the tool modules under anime_messages/tools/.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

# Import tool modules (each provides register_tools(mcp))
from .tools import lists, media, meta


def create_app() -> FastMCP:
    mcp = FastMCP("anime-messages")

    lists.register_tools(mcp)
    media.register_tools(mcp)
    meta.register_tools(mcp)

    return mcp


def main() -> None:
    create_app().run()


if __name__ == "__main__":
    main()
