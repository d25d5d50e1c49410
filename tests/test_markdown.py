"""Tests for markdown formatting."""

from badgegen.markdown import (
    format_title,
    markdown_image,
    markdown_image_with_link,
    markdown_link,
)


class TestMarkdownLink:
    """Tests for markdown_link()."""

    def test_link(self) -> None:
        assert markdown_link("Docs", "https://example.com") == "[Docs](https://example.com)"


class TestMarkdownImage:
    """Tests for markdown_image()."""

    def test_image_without_title(self) -> None:
        assert markdown_image("X", "img.png") == "![X](img.png)"

    def test_image_with_hover_title(self) -> None:
        assert markdown_image("X", "img.png", "hover") == '![X](img.png "hover")'


class TestMarkdownImageWithLink:
    """Tests for markdown_image_with_link()."""

    def test_bare_image_without_link(self) -> None:
        """No link target returns the image alone."""
        assert markdown_image_with_link("X", "img.png", "", "") == "![X](img.png)"

    def test_image_wrapped_in_link(self) -> None:
        """A link target wraps the image as link text."""
        result = markdown_image_with_link("X", "img.png", "http://t", "hover")

        assert result == '[![X](img.png "hover")](http://t)'

    def test_link_without_hover_title(self) -> None:
        assert markdown_image_with_link("X", "img.png", "http://t") == "[![X](img.png)](http://t)"

    def test_same_inputs_same_output(self) -> None:
        first = markdown_image_with_link("X", "img.png", "http://t", "hover")
        second = markdown_image_with_link("X", "img.png", "http://t", "hover")

        assert first == second


class TestFormatTitle:
    """Tests for format_title()."""

    def test_label_and_message(self) -> None:
        assert format_title("build", "passing") == "build - passing"

    def test_message_only(self) -> None:
        assert format_title("", "passing") == "passing"
