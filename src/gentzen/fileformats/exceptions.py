from typing import Optional


class SequentSyntaxError(ValueError):
    """Input text is not a well-formed claim."""

    def __init__(self, message, position):
        super().__init__(message)
        self.position = position


class LexicalError(SequentSyntaxError):
    def __init__(self, text, position):
        self.remainder = text[position:]
        super().__init__(f"Failed to tokenize at: {self.remainder!r}", position)


class StructuralError(SequentSyntaxError):
    def __init__(self, token: Optional[str], position, expected=()):
        if token is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token {token!r} at position {position}"
        if expected:
            message += f", expected one of: {', '.join(sorted(expected))}"
        super().__init__(message, position)
        self.token = token
        self.expected = set(expected)
