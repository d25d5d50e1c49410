"""MCP tool handlers — actions an AI assistant can invoke."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

if TYPE_CHECKING:
    from fastmcp import FastMCP

from badgegen.badges import image_url, render_badge
from badgegen.models import BadgeSpec
from badgegen.url_utils import encode_param as _encode_param
from badgegen.user_config import apply_user_defaults


def _spec_from_args(message: str, **options: Any) -> BadgeSpec:
    merged = apply_user_defaults(options)
    if not merged.get("color"):
        raise ValueError("A color is required, either as an argument or in the user config")

    return BadgeSpec(
        message=message,
        **{key: value for key, value in merged.items() if value is not None},
    )


def register_tools(mcp: FastMCP) -> None:
    """Register all tool handlers on the given MCP server."""

    # ------------------------------------------------------------------
    # generic_badge
    # ------------------------------------------------------------------
    @mcp.tool(
        name="generic_badge",
        description=(
            "Generate markdown for a shields.io badge. "
            "Returns the markdown and the image URL."
        ),
        tags={"badge", "markdown"},
    )
    def generic_badge(
        message: Annotated[str, Field(description="Right-hand text of the badge")],
        color: Annotated[
            str | None, Field(description="Message color, e.g. 'green' or 'ff69b4'")
        ] = None,
        label: Annotated[str, Field(description="Left-hand text, omitted when empty")] = "",
        is_large: Annotated[
            bool | None, Field(description="Use the 'for-the-badge' style")
        ] = None,
        target: Annotated[str, Field(description="Link to wrap the badge in")] = "",
        logo: Annotated[str, Field(description="Logo name, e.g. 'github'")] = "",
        logo_color: Annotated[
            str | None, Field(description="Logo color, ignored without a logo")
        ] = None,
        only_query_params: Annotated[
            bool | None,
            Field(description="Use the query-param API instead of the dash-based path"),
        ] = None,
    ) -> str:
        spec = _spec_from_args(
            message,
            color=color,
            label=label,
            is_large=is_large,
            target=target,
            logo=logo,
            logo_color=logo_color,
            only_query_params=only_query_params,
        )

        return json.dumps(
            {
                "markdown": render_badge(spec),
                "image_url": image_url(spec),
                "strategy": spec.strategy.value,
            }
        )

    # ------------------------------------------------------------------
    # encode_param
    # ------------------------------------------------------------------
    @mcp.tool(
        name="encode_param",
        description="Escape text for use in a dash-based shields.io badge path.",
        tags={"badge", "encode"},
    )
    def encode_param(
        value: Annotated[str, Field(description="Text to escape")],
        space_to_underscore: Annotated[
            bool, Field(description="Turn spaces into underscores instead of '%20'")
        ] = True,
    ) -> str:
        return _encode_param(value, space_to_underscore)
