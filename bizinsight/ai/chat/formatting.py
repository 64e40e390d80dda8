"""Lightweight formatting of chat text into display blocks.

Only two constructs are recognized: ``**bold**`` spans within a line, and
lines starting with ``-`` which are shown as list items.
"""

import re

from bizinsight.ai.chat.schemas import DisplayBlock, Message, TextSpan

BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
LINE_BREAK = re.compile(r"\r?\n")


def render_line(line: str) -> DisplayBlock:
    spans: list[TextSpan] = []
    position = 0
    for match in BOLD_PATTERN.finditer(line):
        if match.start() > position:
            spans.append(TextSpan(text=line[position : match.start()]))
        if match.group(1):
            spans.append(TextSpan(text=match.group(1), bold=True))
        position = match.end()
    if position < len(line):
        # Includes any unterminated "**", kept as literal text
        spans.append(TextSpan(text=line[position:]))

    return DisplayBlock(spans=spans, is_list_item=line.strip().startswith("-"))


def render(text: str) -> list[DisplayBlock]:
    """
    Split text into one display block per line.

    Empty lines are kept as blank blocks so paragraph spacing survives.

    Args:
        text: Raw message text

    Returns:
        list[DisplayBlock]: Blocks in original line order
    """
    return [render_line(line) for line in LINE_BREAK.split(text)]


def render_message(message: Message) -> list[DisplayBlock]:
    """Render a message; error messages are shown verbatim as one block."""
    if message.is_error:
        return [DisplayBlock(spans=[TextSpan(text=message.text)])]
    return render(message.text)
