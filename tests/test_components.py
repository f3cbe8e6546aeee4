"""
Formatter tests.

Tests that headers, progress bars, labels and notifications compose their
parts in the documented order.
Run with: pytest tests/test_components.py -v
"""

import math

import pytest

from consoletools.core.segments import strip_styles
from consoletools.ui.colors import Colors
from consoletools.ui.components import (
    header,
    advanced_header,
    progress_fraction,
    progress_bar,
    advanced_progress_bar,
    error,
    warning,
    notification,
)

C1, C2, C3, C4 = "<c1>", "<c2>", "<c3>", "<c4>"


class TestHeader:
    """Tests for header()."""

    def test_exact_composition(self):
        result = header("=", 3, "X", " ", C1, C2, C3)
        assert result == f"{C1}==={C3} {C2}X{C3} {C1}==={Colors.RESET}"

    def test_two_line_segments_around_text(self):
        result = header("=", 3, "X", " ", Colors.CYAN, Colors.YELLOW, Colors.GREEN)
        assert result.count("===") == 2
        assert result.count("X") == 1
        first, second = result.index("==="), result.rindex("===")
        assert first < result.index("X") < second

    def test_negative_count_gives_empty_segments(self):
        result = header("=", -2, "T", "|", C1, C2, C3)
        assert strip_styles(result, C1, C2, C3) == "|T|"

    def test_round_trip(self):
        result = header("*", 4, "Title", " ", C1, C2, C3)
        assert strip_styles(result, C1, C2, C3) == "**** Title ****"


class TestAdvancedHeader:
    """Tests for advanced_header()."""

    def test_independent_sides(self):
        result = advanced_header("=", 2, "-", 4, "MID", " ", C1, C2, C3, C4)
        assert result == f"{C1}=={C4} {C3}MID{C4} {C2}----{Colors.RESET}"

    def test_without_reset(self):
        """Omitting the reset leaves the right color active."""
        result = advanced_header("=", 1, "-", 1, "T", " ", C1, C2, C3, C4, reset_on_end=False)
        assert not result.endswith(Colors.RESET)
        assert result.endswith(f"{C2}-")

    def test_negative_counts(self):
        result = advanced_header("=", -1, "-", 0, "T", "", C1, C2, C3, C4)
        assert strip_styles(result, C1, C2, C3, C4) == "T"


class TestProgressFraction:
    """Tests for progress_fraction() clamping."""

    def test_clamps_below_zero(self):
        assert progress_fraction(-5, 10) == 0.0

    def test_clamps_above_max(self):
        assert progress_fraction(15, 10) == 1.0

    def test_zero_max(self):
        assert progress_fraction(0, 0) == 0.0
        assert progress_fraction(5, 0) == 0.0

    def test_negative_max(self):
        assert progress_fraction(3, -4) == 0.0


def _glyph_counts(bar: str) -> tuple[int, int]:
    body = strip_styles(bar, C1, C2).split(" ")[0]
    return body.count("#"), body.count("-")


class TestProgressBar:
    """Tests for progress_bar()."""

    @pytest.mark.parametrize("current,maximum,width", [
        (0, 10, 20),
        (3, 10, 20),
        (7, 9, 13),
        (10, 10, 20),
        (1, 3, 7),
        (5, 10, 0),
        (2, 7, 1),
    ])
    def test_fill_counts(self, current, maximum, width):
        filled, unfilled = _glyph_counts(progress_bar(current, maximum, width, C1, False, C2))
        assert filled == math.floor((current / maximum) * width)
        assert filled + unfilled == width

    def test_exact_output_with_percentage(self):
        result = progress_bar(5, 10, 10, C1, True, C2)
        assert result == f"{C1}#####-----{Colors.RESET} {C2}50%{Colors.RESET}"

    def test_without_percentage(self):
        result = progress_bar(10, 10, 4, C1, False, C2)
        assert result == f"{C1}####{Colors.RESET}"

    def test_negative_current_clamped(self):
        assert progress_bar(-5, 10, 20, C1, True, C2) == progress_bar(0, 10, 20, C1, True, C2)

    def test_overfull_current_clamped(self):
        assert progress_bar(15, 10, 20, C1, True, C2) == progress_bar(10, 10, 20, C1, True, C2)

    def test_zero_max_does_not_divide(self):
        result = progress_bar(0, 0, 5, C1, True, C2)
        assert result == f"{C1}-----{Colors.RESET} {C2}0%{Colors.RESET}"

    def test_percentage_is_floored(self):
        result = progress_bar(2, 3, 10, C1, True, C2)
        assert "66%" in result

    def test_negative_width(self):
        result = progress_bar(5, 10, -3, C1, False, C2)
        assert result == f"{C1}{Colors.RESET}"


class TestAdvancedProgressBar:
    """Tests for advanced_progress_bar()."""

    def _bar(self, current, maximum=10, width=10, **kwargs):
        params = dict(
            prefix_text="Loading",
            suffix_text="Complete",
            fill_char="=",
            unfilled_char=".",
            fill_color="<fill>",
            unfilled_color="<empty>",
            text_color="<text>",
            prefix_color="<pre>",
            suffix_color="<suf>",
            bracket_color="<br>",
        )
        params.update(kwargs)
        return advanced_progress_bar(current, maximum, width, **params)

    def test_full_layout(self):
        assert self._bar(3) == (
            "<pre>Loading"
            "<br>["
            "<fill>==="
            "<empty>......."
            "<br>]"
            "<text> 30%"
            " <suf>Complete"
            f"{Colors.RESET}"
        )

    def test_zero_max_renders_empty_bar(self):
        result = self._bar(0, maximum=0, width=4)
        assert "<fill><empty>...." in result
        assert "<text> 0%" in result

    def test_prefix_and_suffix_omitted_when_empty(self):
        result = self._bar(5, prefix_text="", suffix_text="")
        assert "<pre>" not in result
        assert "<suf>" not in result
        assert result.startswith("<br>[")

    def test_no_brackets_no_percentage(self):
        result = self._bar(10, show_brackets=False, show_percentage=False, suffix_text="")
        assert result == f"<pre>Loading<fill>==========<empty>{Colors.RESET}"

    def test_without_reset(self):
        result = self._bar(10, reset_on_completion=False)
        assert not result.endswith(Colors.RESET)

    def test_multichar_glyphs(self):
        result = self._bar(1, maximum=2, width=4, fill_char="[]", unfilled_char="__",
                           prefix_text="", suffix_text="", show_brackets=False)
        assert "<fill>[][]<empty>____" in result

    def test_clamped_like_simple_bar(self):
        assert self._bar(-5) == self._bar(0)
        assert self._bar(15) == self._bar(10)

    def test_defaults(self):
        result = advanced_progress_bar(1, 2, 4)
        assert result == f"[##--] 50%{Colors.RESET}"


class TestLabels:
    """Tests for error() and warning()."""

    def test_error(self):
        assert error("boom") == f"{Colors.LIGHT_RED}[ERROR]: boom"

    def test_warning(self):
        assert warning("careful") == f"{Colors.LIGHT_YELLOW}[WARNING]: careful"

    def test_no_trailing_reset(self):
        assert not error("x").endswith(Colors.RESET)
        assert not warning("x").endswith(Colors.RESET)


class TestNotification:
    """Tests for notification()."""

    def test_exact_composition(self):
        result = notification("[", "!", "]", "INFO", "Done", C1, C2, C3)
        assert result == f"{C1}[{C2}!{C1}]{C2} INFO: {C3}Done{Colors.RESET}"

    def test_empty_inside_char(self):
        """Without an inside glyph the right border follows the left one."""
        result = notification("<", "", ">", "NOTE", "hi", C1, C2, C3)
        assert strip_styles(result, C1, C2, C3) == "<> NOTE: hi"

    def test_round_trip(self):
        result = notification("(", "*", ")", "TIP", "Save often", C1, C2, C3)
        assert strip_styles(result, C1, C2, C3) == "(*) TIP: Save often"
