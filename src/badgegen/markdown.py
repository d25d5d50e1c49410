"""Markdown image and link formatting."""


def markdown_link(alt_text: str, link_target: str) -> str:
    return f"[{alt_text}]({link_target})"


def markdown_image(alt_text: str, image_target: str, hover_title: str = "") -> str:
    """Format an image, with an optional title shown on hover."""
    if hover_title:
        image_target = f'{image_target} "{hover_title}"'
    return f"![{alt_text}]({image_target})"


def markdown_image_with_link(
    alt_text: str,
    image_target: str,
    link_target: str = "",
    hover_title: str = "",
) -> str:
    """Format an image, wrapped in a link when a link target is given."""
    image = markdown_image(alt_text, image_target, hover_title)

    if link_target:
        return markdown_link(image, link_target)
    return image


def format_title(label: str, message: str) -> str:
    """Join label and message for use as alt text."""
    return f"{label} - {message}" if label else message
