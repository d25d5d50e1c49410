"""Markdown badges for the shields.io badge service."""

from badgegen.badges import generic_badge, image_url, logo_params, render_badge
from badgegen.errors import BadgeError, InvalidUrlError
from badgegen.markdown import markdown_image, markdown_image_with_link, markdown_link
from badgegen.models import BadgeSpec, BadgeUrlStrategy, GenericBadgeFields, StyleParams
from badgegen.url_utils import build_url, encode_param

__all__ = [
    "BadgeError",
    "BadgeSpec",
    "BadgeUrlStrategy",
    "GenericBadgeFields",
    "InvalidUrlError",
    "StyleParams",
    "build_url",
    "encode_param",
    "generic_badge",
    "image_url",
    "logo_params",
    "markdown_image",
    "markdown_image_with_link",
    "markdown_link",
    "render_badge",
]
