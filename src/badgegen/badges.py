"""Generic shields.io badge generation."""

from __future__ import annotations

import logging

from badgegen.constants import LARGE_STYLE, SHIELDS_BADGE, SHIELDS_STATIC
from badgegen.markdown import format_title, markdown_image_with_link
from badgegen.models import BadgeSpec, BadgeUrlStrategy, GenericBadgeFields, StyleParams
from badgegen.url_utils import build_url, encode_param

logger = logging.getLogger(__name__)


def logo_params(is_large: bool = False, logo: str = "", logo_color: str = "") -> StyleParams:
    """Build the style params for badge size and an optional logo.

    The logo color is only set alongside a logo.
    """
    style = LARGE_STYLE if is_large else None

    if not logo:
        return StyleParams(style=style)

    return StyleParams(style=style, logo=logo, logo_color=logo_color or None)


def dash_shield_path(message: str, color: str, label: str = "") -> str:
    """Prepare the path for the shields.io dash-based API.

    The API requires MESSAGE-COLOR at least and also accepts
    LABEL-MESSAGE-COLOR. Label and message are escaped here so callers can
    pass readable values. Color is used as given.
    """
    pieces = [encode_param(message), color]
    if label:
        pieces.insert(0, encode_param(label))

    return "-".join(pieces)


def static_dash_url(fields: GenericBadgeFields) -> str:
    """Image URL for a dash-based static badge."""
    img_path = dash_shield_path(fields.message, fields.color, fields.label)

    return build_url(f"{SHIELDS_BADGE}/{img_path}", fields.style_params.as_query())


def static_params_url(fields: GenericBadgeFields) -> str:
    """Image URL for a param-based static badge."""
    params = {"label": fields.label, "message": fields.message, "color": fields.color}
    for key, value in fields.style_params.as_query().items():
        params.setdefault(key, value)

    return build_url(SHIELDS_STATIC, params)


_STRATEGIES = {
    BadgeUrlStrategy.DASH: static_dash_url,
    BadgeUrlStrategy.PARAMS: static_params_url,
}


def badge_url(fields: GenericBadgeFields, strategy: BadgeUrlStrategy) -> str:
    """Build the image URL for a badge with the given strategy."""
    logger.debug("Building %s badge URL for %r", strategy, fields.message)
    return _STRATEGIES[strategy](fields)


def image_url(spec: BadgeSpec) -> str:
    """Image URL for a badge spec, without the markdown around it."""
    fields = GenericBadgeFields(
        label=spec.label,
        message=spec.message,
        color=spec.color,
        style_params=logo_params(spec.is_large, spec.logo, spec.logo_color),
    )

    return badge_url(fields, spec.strategy)


def render_badge(spec: BadgeSpec) -> str:
    """Generate markdown for a generic badge.

    In the dash style the image URL ends in LABEL-MESSAGE-COLOR or
    MESSAGE-COLOR, e.g. https://img.shields.io/badge/Foo-Bar--Baz-green

    In the params style the URL is more verbose but needs no escaping, e.g.
    https://img.shields.io/static/v1?label=owner&message=repo&color=blue&logo=github

    Raises:
        InvalidUrlError: If the badge URL cannot be built.
    """
    img_url = image_url(spec)

    return markdown_image_with_link(format_title(spec.label, spec.message), img_url, spec.target)


def generic_badge(
    label: str,
    message: str,
    color: str,
    is_large: bool = False,
    target: str = "",
    logo: str = "",
    logo_color: str = "",
    only_query_params: bool = False,
) -> str:
    """Generate markdown for a generic badge from individual fields.

    ``label`` is optional in meaning but positional here so that message and
    color can follow it. Pass ``""`` to omit it, or use ``render_badge`` with a
    ``BadgeSpec``, where every optional field has a default.

    Args:
        label: Left-hand text. Pass an empty string to omit it.
        message: Right-hand text.
        color: Message background color.
        is_large: Use the 'for-the-badge' style.
        target: Optional link wrapped around the image.
        logo: Optional logo name.
        logo_color: Logo color, ignored without a logo.
        only_query_params: Use the query-param API instead of the dash path.

    Returns:
        Markdown image, or image wrapped in a link.
    """
    return render_badge(
        BadgeSpec(
            label=label,
            message=message,
            color=color,
            is_large=is_large,
            target=target,
            logo=logo,
            logo_color=logo_color,
            only_query_params=only_query_params,
        )
    )
