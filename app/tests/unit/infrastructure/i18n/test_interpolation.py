"""Tests for infrastructure.i18n.interpolation module."""

from infrastructure.i18n.interpolation import substitute_args


class TestSubstituteArgs:
    """Tests for positional placeholder substitution."""

    def test_all_placeholders_supplied(self):
        """Each {i} is replaced by args[i]."""
        result = substitute_args("Hello {0}, you have {1} items", ["Ann", "3"])
        assert result == "Hello Ann, you have 3 items"

    def test_missing_argument_leaves_placeholder(self):
        """Placeholders beyond the argument count stay untouched."""
        result = substitute_args("Hello {0}, you have {1} items", ["Ann"])
        assert result == "Hello Ann, you have {1} items"

    def test_extra_arguments_ignored(self):
        """Surplus arguments are ignored."""
        assert substitute_args("Hi {0}", ["Ann", "extra", "more"]) == "Hi Ann"

    def test_repeated_placeholder(self):
        """Every occurrence of a placeholder is replaced."""
        assert substitute_args("{0} and {0}", ["x"]) == "x and x"

    def test_out_of_order_placeholders(self):
        """Placeholders are matched by index, not position."""
        assert substitute_args("{1} of {0}", ["10", "3"]) == "3 of 10"

    def test_no_arguments(self):
        """Without arguments the template is returned unchanged."""
        assert substitute_args("Hello {0}", []) == "Hello {0}"

    def test_named_and_nested_braces_untouched(self):
        """Only literal {index} text is replaced."""
        assert substitute_args("{name} {{0}}", ["x"]) == "{name} {x}"

    def test_non_string_arguments_converted(self):
        """Arguments are converted with str()."""
        assert substitute_args("Count: {0}", [42]) == "Count: 42"
