from __future__ import annotations


class ConfigError(Exception):
    """Exception raised for errors with the bar config."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(msg)


class MarkupParseError(Exception):
    """Raised when a status string cannot be parsed as markup.

    Never escapes :func:`~barparse.parse_markup`, which substitutes a diagnostic
    segment for the whole input.
    """

    def __init__(self, text: str, pos: int, msg: str) -> None:
        self.text = text
        self.pos = pos
        self.msg = msg
        super().__init__(f"{msg} at position {pos} of {text!r}")


class MarkupEncodeError(ValueError):
    """Raised when a segment cannot be written back out as markup."""

    def __init__(self, msg: str, *args: object) -> None:
        super().__init__(msg, *args)
        self.msg = msg


class TemplateParseError(Exception):
    """Raised when a template does not split into separator-delimited groups."""

    def __init__(self, template: str, pos: int, sep_char: str) -> None:
        self.template = template
        self.pos = pos
        self.sep_char = sep_char
        super().__init__(
            f"Unbalanced separator {sep_char!r} at position {pos} of {template!r}"
        )
