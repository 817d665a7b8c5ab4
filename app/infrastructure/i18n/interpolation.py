"""Positional placeholder substitution."""

from typing import Any, Sequence


def substitute_args(template: str, args: Sequence[Any]) -> str:
    """Replace {0}, {1}, ... in template with the matching argument.

    Plain text replacement: placeholders without a matching argument are
    left untouched and surplus arguments are ignored. There is no escaping.

    Args:
        template: Text containing positional placeholders.
        args: Ordered replacement values, converted with str().

    Returns:
        Template with placeholders replaced.
    """
    result = template
    for index, arg in enumerate(args):
        result = result.replace(f"{{{index}}}", str(arg))
    return result
