"""End-to-end tests for the textdelta pipeline.

These tests go from two input texts to the final rendered string through
the public API, the way callers and the command line use it.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textdelta import diff, diff_with
from textdelta.render import visible_width

lines_strategy = st.lists(st.text(alphabet=["a", "b", " ", "-", "+", "世", "é"], max_size=12), max_size=10)
texts = lines_strategy.map("\n".join)


def _rows(output):
    rows = output.split("\n")
    assert rows[-1] == ""
    return rows[:-1]


def _reconstruct(output):
    """Rebuild both texts from an inline rendering with full context."""
    old_lines = []
    new_lines = []
    for row in _rows(output):
        _, body = row.split(" │ ", 1)
        marker, content = body[:2], body[2:]
        if marker == "  ":
            old_lines.append(content)
            new_lines.append(content)
        elif marker == "- ":
            old_lines.append(content)
        else:
            assert marker == "+ "
            new_lines.append(content)
    return "\n".join(old_lines), "\n".join(new_lines)


@pytest.mark.e2e
class TestScenarios:
    """Representative end-to-end scenarios."""

    def test_single_line_change(self):
        """Test a changed middle line shows as removed and added."""
        output = diff_with("a\nb\nc", "a\nB\nc", color=False)
        assert output == "1 1 │   a\n2   │ - b\n  2 │ + B\n3 3 │   c\n"

    def test_from_empty(self):
        """Test diffing from an empty text gives only added lines."""
        output = diff_with("", "a\nb\nc", color=False)
        assert output == "  1 │ + a\n  2 │ + b\n  3 │ + c\n"
        assert "- " not in output

    def test_to_empty(self):
        """Test diffing to an empty text gives only removed lines."""
        output = diff_with("a\nb", "", color=False)
        assert output == "1   │ - a\n2   │ - b\n"

    def test_trailing_newline(self):
        """Test a trailing newline difference is reported."""
        output = diff_with("hello\n", "hello", color=False)
        assert output == "1 1 │   hello\n2   │ - \n"

    def test_side_by_side_single_row(self):
        """Test a one-word change is one side-by-side row."""
        output = diff_with("the quick fox", "the slow fox", layout="side-by-side", width=80, color=False)
        assert output == "1 - the quick fox │ 1 + the slow fox\n"
        assert output.count(" │ ") == 1

    def test_long_line(self):
        """Test a very long line changed at the end."""
        old = " ".join(["word"] * 120) + "."
        new = " ".join(["word"] * 120) + "!"
        output = diff_with(old, new, color=False)
        rows = _rows(output)
        assert len(rows) == 2
        assert rows[0].endswith(old)
        assert rows[1].endswith(new)

    def test_long_line_emphasizes_only_change(self):
        """Test word emphasis survives on long paired lines."""
        old = " ".join(["word"] * 120) + "."
        new = " ".join(["word"] * 120) + "!"
        output = diff_with(old, new, color=True)
        assert "\x1b[7;31m.\x1b[0m" in output or "\x1b[31;7m.\x1b[0m" in output

    def test_json_record_side_by_side(self, json_record_old, json_record_new):
        """Test the JSON record renders in two aligned panels."""
        output = diff_with(json_record_old, json_record_new, layout="side-by-side", width=0, color=False)
        rows = _rows(output)
        assert rows[1] == '2 -   "name": "Alice",             │ 2 +   "name": "Bob",'
        assert rows[3] == '4 -   "email": "alice@example.com" │ 4 +   "email": "bob@example.com"'

    def test_separated_hunks(self):
        """Test distant changes produce two hunks with a skip annotation."""
        old = "\n".join(f"line {i}" for i in range(1, 21))
        new = old.replace("line 2\n", "line two\n").replace("line 19", "line nineteen")
        output = diff_with(old, new, context_lines=1, color=False)
        assert "~~~ 14 lines skipped ~~~" in output
        assert "line two" in output
        assert "line nineteen" in output


@pytest.mark.e2e
@pytest.mark.fuzzing
class TestPipelineProperties:
    """Property-based tests of the whole pipeline."""

    @given(texts)
    def test_self_diff_is_empty(self, text):
        """Property: a text diffed with itself renders nothing."""
        assert diff(text, text) == ""

    @given(texts, texts)
    def test_different_texts_render_something(self, old, new):
        """Property: output is empty exactly when the texts are equal."""
        output = diff_with(old, new, color=False)
        assert (output == "") == (old == new)

    @given(texts, texts)
    def test_inline_is_lossless_with_full_context(self, old, new):
        """Property: the inline rows with full context contain both texts."""
        if old == new:
            return
        output = diff_with(old, new, context_lines=100_000, color=False)
        assert _reconstruct(output) == (old, new)

    @given(texts, texts)
    def test_deterministic(self, old, new):
        """Property: rendering is a pure function of its inputs."""
        first = diff_with(old, new, layout="side-by-side", width=60, color=True)
        second = diff_with(old, new, layout="side-by-side", width=60, color=True)
        assert first == second

    @given(texts, texts, st.integers(min_value=23, max_value=100))
    def test_colored_side_by_side_fits(self, old, new, width):
        """Property: colored side-by-side rows never exceed the width."""
        output = diff_with(old, new, layout="side-by-side", width=width, color=True)
        for row in output.split("\n"):
            assert visible_width(row) <= width
