"""MCP resource handlers — read-only data exposed to AI assistants."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastmcp import FastMCP


def register_resources(mcp: FastMCP) -> None:
    """Register all resource handlers on the given MCP server."""

    @mcp.resource(
        "config://user",
        name="User Configuration",
        description="Current user-level badge defaults.",
        mime_type="application/json",
    )
    def user_config() -> str:
        from badgegen.user_config import get_config_path, load_user_config

        config = load_user_config()
        return json.dumps(
            {
                "config_path": str(get_config_path()),
                "values": config,
            }
        )

    @mcp.resource(
        "endpoints://shields",
        name="Badge Endpoints",
        description="Base URLs of the dash-based and param-based shields.io APIs.",
        mime_type="application/json",
    )
    def endpoints() -> str:
        from badgegen.constants import SHIELDS_BADGE, SHIELDS_STATIC

        return json.dumps({"dash": SHIELDS_BADGE, "params": SHIELDS_STATIC})
