"""Tests for chat text rendering."""

from datetime import datetime, timezone

from bizinsight.ai.chat.constants import Sender
from bizinsight.ai.chat.formatting import render, render_message
from bizinsight.ai.chat.schemas import Message


def spans_of(block):
    return [(span.text, span.bold) for span in block.spans]


def test_bold_then_plain():
    blocks = render("**bold** plain")

    assert len(blocks) == 1
    assert spans_of(blocks[0]) == [("bold", True), (" plain", False)]


def test_list_items_keep_order():
    blocks = render("- item one\n- item two")

    assert [b.is_list_item for b in blocks] == [True, True]
    assert [spans_of(b) for b in blocks] == [
        [("- item one", False)],
        [("- item two", False)],
    ]


def test_indented_dash_is_list_item():
    assert render("   - nested")[0].is_list_item is True
    assert render("plain - dash")[0].is_list_item is False


def test_empty_lines_become_blank_blocks():
    blocks = render("Hello!\n\nSecond paragraph")

    assert len(blocks) == 3
    assert blocks[1].is_blank
    assert not blocks[0].is_blank


def test_windows_line_endings():
    blocks = render("one\r\ntwo")

    assert [spans_of(b) for b in blocks] == [[("one", False)], [("two", False)]]


def test_unterminated_marker_is_literal():
    blocks = render("Revenue is **up this month")

    assert spans_of(blocks[0]) == [("Revenue is **up this month", False)]


def test_multiple_bold_spans_in_one_line():
    blocks = render("**Cost:** high, **Margin:** low")

    assert spans_of(blocks[0]) == [
        ("Cost:", True),
        (" high, ", False),
        ("Margin:", True),
        (" low", False),
    ]


def test_bold_does_not_span_lines():
    blocks = render("**start\nend**")

    assert spans_of(blocks[0]) == [("**start", False)]
    assert spans_of(blocks[1]) == [("end**", False)]


def test_concatenated_spans_drop_only_markers():
    text = "**Summary:** sales fell\n\n- **Price** cuts\n- rent is ** high"

    blocks = render(text)

    joined = "\n".join("".join(span.text for span in b.spans) for b in blocks)
    assert joined == "Summary: sales fell\n\n- Price cuts\n- rent is ** high"


def test_error_message_is_not_formatted():
    message = Message(
        id=3,
        text="**not bold**\nsecond line",
        sender=Sender.BOT,
        timestamp=datetime.now(timezone.utc),
        is_error=True,
    )

    blocks = render_message(message)

    assert len(blocks) == 1
    assert spans_of(blocks[0]) == [("**not bold**\nsecond line", False)]
