"""Tests for checkbox markup detection."""

import pytest

from casillas.detector import CHECKBOX_MARKUP_LENGTH, CheckboxMatch, detect


class TestValidMarkup:
    """The three accepted markers, each followed by a literal space."""

    def test_unchecked(self) -> None:
        assert detect("[ ] Todo") == CheckboxMatch(checked=False, markup_length=4)

    def test_checked_lowercase(self) -> None:
        assert detect("[x] Done") == CheckboxMatch(checked=True, markup_length=4)

    def test_checked_uppercase(self) -> None:
        assert detect("[X] Done") == CheckboxMatch(checked=True, markup_length=4)

    def test_markup_only_with_trailing_space(self) -> None:
        """Markup followed by nothing but its mandatory space still matches."""
        match = detect("[x] ")
        assert match is not None
        assert match.checked is True

    def test_markup_length_constant(self) -> None:
        assert CHECKBOX_MARKUP_LENGTH == 4
        assert detect("[ ] a").markup_length == len("[ ] ")

    def test_rest_of_line_is_not_examined(self) -> None:
        """Anything may follow, including more bracket sequences."""
        match = detect("[ ] [x] also text")
        assert match is not None
        assert match.checked is False


class TestRejectedMarkup:
    """Padding variants and near misses are plain list text."""

    @pytest.mark.parametrize(
        "content",
        [
            "[  ] two spaces inside",
            "[ ]",
            "[x]",
            "[x ] space after x",
            "[ x] space before x",
            "[ x ] spaces around x",
            "[] no interior",
            "[]",
            "[y] wrong interior",
            "[-] wrong interior",
            "[x]\ttab instead of space",
            "[x]no space",
            "(x) wrong brackets",
            " [x] leading space",
            "",
            "[",
        ],
    )
    def test_not_a_checkbox(self, content: str) -> None:
        assert detect(content) is None

    def test_markup_later_in_line(self) -> None:
        """Only the very start of the content counts."""
        assert detect("Done [x] later") is None

    def test_emphasis_before_bracket(self) -> None:
        assert detect("*[x]* emphasized") is None


class TestCheckboxMatch:
    """CheckboxMatch is an immutable value."""

    def test_frozen(self) -> None:
        match = CheckboxMatch(checked=True)
        with pytest.raises(AttributeError):
            match.checked = False  # type: ignore[misc]

    def test_equality(self) -> None:
        assert detect("[x] a") == detect("[X] b")
        assert detect("[x] a") != detect("[ ] a")
