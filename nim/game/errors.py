"""User-facing error taxonomy for console commands."""

ERR_GENERIC = "Error"
ERR_SYNTAX = "SyntaxError"
ERR_ARGUMENT = "ArgumentError"
ERR_RANGE = "RangeError"


def format_error(kind: str, message: str) -> str:
    return f"> {kind}: {message}"


class CommandError(Exception):
    """Recoverable input error. The command is abandoned with no state change."""

    kind = ERR_GENERIC

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def render(self) -> str:
        return format_error(self.kind, self.message)


class CommandSyntaxError(CommandError):
    kind = ERR_SYNTAX


class ArgumentError(CommandError):
    kind = ERR_ARGUMENT


class RangeError(CommandError):
    kind = ERR_RANGE
