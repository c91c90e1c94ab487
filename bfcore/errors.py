class ParseError(SyntaxError):
    """Raised before execution when the program's brackets do not match."""

    reason = "Syntax error"

    def __init__(self, position: int):
        super().__init__(f"{self.reason} (position {position})")
        self.position = position


class UnmatchedCloseError(ParseError):
    reason = "Syntax error - Closing bracket without opening bracket"


class UnmatchedOpenError(ParseError):
    reason = "Syntax error - Opening bracket without closing bracket"


class InvalidConfigError(ValueError):
    pass
