"""MCP server for badgegen — exposes badge generation via Model Context Protocol."""

from fastmcp import FastMCP


def create_server() -> FastMCP:
    """Create and configure the FastMCP server instance."""
    mcp = FastMCP(
        name="badgegen",
        instructions=(
            "MCP server for badgegen, which writes markdown badges for the shields.io "
            "badge service. Use tools to build badge markdown or image URLs and to escape "
            "text for the dash-based badge path."
        ),
    )

    from badgegen.mcp_server.resources import register_resources
    from badgegen.mcp_server.tools import register_tools

    register_tools(mcp)
    register_resources(mcp)

    return mcp


def main() -> None:
    """Entry point for the badgegen-mcp CLI command."""
    server = create_server()
    server.run()
