"""Tests for generic badge generation."""

from badgegen.badges import (
    badge_url,
    dash_shield_path,
    generic_badge,
    image_url,
    logo_params,
    render_badge,
    static_dash_url,
    static_params_url,
)
from badgegen.models import BadgeSpec, BadgeUrlStrategy, GenericBadgeFields, StyleParams


class TestLogoParams:
    """Tests for logo_params()."""

    def test_no_inputs(self) -> None:
        assert logo_params().as_query() == {}

    def test_large_style(self) -> None:
        assert logo_params(is_large=True).as_query() == {"style": "for-the-badge"}

    def test_logo_and_color(self) -> None:
        assert logo_params(logo="github", logo_color="white").as_query() == {
            "logo": "github",
            "logoColor": "white",
        }

    def test_logo_color_needs_logo(self) -> None:
        """A logo color alone is ignored."""
        assert logo_params(logo_color="white").as_query() == {}

    def test_all_inputs(self) -> None:
        assert logo_params(True, "github", "white").as_query() == {
            "style": "for-the-badge",
            "logo": "github",
            "logoColor": "white",
        }


class TestDashShieldPath:
    """Tests for dash_shield_path()."""

    def test_message_and_color(self) -> None:
        assert dash_shield_path("passing", "green") == "passing-green"

    def test_label_escaped(self) -> None:
        assert dash_shield_path("Bar-Baz", "green", "Foo") == "Foo-Bar--Baz-green"

    def test_color_not_escaped(self) -> None:
        assert dash_shield_path("m", "light-green") == "m-light-green"


class TestStrategies:
    """Tests for the dash and param URL strategies."""

    def test_dash_url_with_style_params(self) -> None:
        fields = GenericBadgeFields(
            label="build",
            message="passing",
            color="green",
            style_params=StyleParams(style="for-the-badge", logo="github"),
        )

        assert static_dash_url(fields) == (
            "https://img.shields.io/badge/build-passing-green?style=for-the-badge&logo=github"
        )

    def test_dash_url_style_params_not_dash_escaped(self) -> None:
        fields = GenericBadgeFields(
            message="m", color="c", style_params=StyleParams(logo="some-logo")
        )

        assert static_dash_url(fields).endswith("?logo=some-logo")

    def test_params_url_order(self) -> None:
        fields = GenericBadgeFields(
            label="owner",
            message="repo",
            color="blue",
            style_params=StyleParams(logo="github"),
        )

        assert static_params_url(fields) == (
            "https://img.shields.io/static/v1?label=owner&message=repo&color=blue&logo=github"
        )

    def test_params_url_needs_no_dash_escaping(self) -> None:
        fields = GenericBadgeFields(label="a-b", message="c_d e", color="red")

        assert static_params_url(fields) == (
            "https://img.shields.io/static/v1?label=a-b&message=c_d+e&color=red"
        )

    def test_badge_url_dispatch(self) -> None:
        fields = GenericBadgeFields(message="passing", color="green")

        assert badge_url(fields, BadgeUrlStrategy.DASH) == static_dash_url(fields)
        assert badge_url(fields, BadgeUrlStrategy.PARAMS) == static_params_url(fields)


class TestGenericBadge:
    """Tests for generic_badge() and render_badge()."""

    def test_dash_without_label(self) -> None:
        result = generic_badge("", "passing", "green")

        assert result == "![passing](https://img.shields.io/badge/passing-green)"

    def test_dash_with_label(self) -> None:
        result = generic_badge("build", "passing", "green")

        assert result == "![build - passing](https://img.shields.io/badge/build-passing-green)"

    def test_dash_escapes_text(self) -> None:
        result = generic_badge("Foo", "Bar-Baz qux", "green")

        assert result == "![Foo - Bar-Baz qux](https://img.shields.io/badge/Foo-Bar--Baz_qux-green)"

    def test_query_params_mode(self) -> None:
        result = generic_badge("build", "passing", "green", False, "", "", "", True)

        assert "label=build&message=passing&color=green" in result
        assert result == (
            "![build - passing](https://img.shields.io/static/v1"
            "?label=build&message=passing&color=green)"
        )

    def test_query_params_mode_drops_empty_label(self) -> None:
        result = generic_badge("", "passing", "green", only_query_params=True)

        assert result == "![passing](https://img.shields.io/static/v1?message=passing&color=green)"

    def test_large_with_logo(self) -> None:
        result = generic_badge("build", "passing", "green", True, "", "github", "white")

        assert result == (
            "![build - passing](https://img.shields.io/badge/build-passing-green"
            "?style=for-the-badge&logo=github&logoColor=white)"
        )

    def test_with_target(self) -> None:
        result = generic_badge("", "passing", "green", target="https://example.com")

        assert result == (
            "[![passing](https://img.shields.io/badge/passing-green)](https://example.com)"
        )

    def test_deterministic(self) -> None:
        args = ("build", "passing", "green", True, "https://t", "github", "white", True)

        assert generic_badge(*args) == generic_badge(*args)

    def test_render_badge_matches_generic_badge(self) -> None:
        spec = BadgeSpec(label="build", message="passing", color="green", logo="github")

        assert render_badge(spec) == generic_badge("build", "passing", "green", logo="github")

    def test_image_url(self) -> None:
        spec = BadgeSpec(message="passing", color="green", target="https://example.com")

        assert image_url(spec) == "https://img.shields.io/badge/passing-green"
