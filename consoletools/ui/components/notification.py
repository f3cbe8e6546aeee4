"""
Notification component.

Renders a small bordered tag followed by a typed message, e.g.
"[!] INFO: Download finished".
"""

from ..colors import Colors


def notification(
    left_border: str,
    inside_char: str,
    right_border: str,
    type_text: str,
    text: str,
    border_color: str,
    inside_color: str,
    text_color: str,
) -> str:
    """
    Build a notification line.

    The tag is left_border + inside_char + right_border. The type label
    shares inside_color with the inside character.

    Args:
        left_border: Opening border glyph (e.g. "[")
        inside_char: Glyph between the borders (e.g. "!"), may be empty
        right_border: Closing border glyph (e.g. "]")
        type_text: Label such as "INFO" or "NOTICE"
        text: Notification message
        border_color: Style for both border glyphs
        inside_color: Style for the inside glyph and the type label
        text_color: Style for the message

    Returns:
        The styled notification, ending with a reset
    """
    return (
        f"{border_color}{left_border}"
        f"{inside_color}{inside_char}"
        f"{border_color}{right_border}"
        f"{inside_color} {type_text}: "
        f"{text_color}{text}"
        f"{Colors.RESET}"
    )
