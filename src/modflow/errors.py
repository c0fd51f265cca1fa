"""modflow exceptions."""

from .models import ModFailure

NO_MATCH = "NO_MATCH"
DEBUG = "DEBUG"
UNKNOWN_MOD = "UNKNOWN_MOD"
INTERNAL_ERROR = "INTERNAL_ERROR"
BAD_REQUEST = "BAD_REQUEST"


class ModFlowError(Exception):
    """Error raised by a mod; carries the wire error code."""

    code = INTERNAL_ERROR

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_failure(self) -> ModFailure:
        return ModFailure(code=self.code, message=self.message)


class NoMatchError(ModFlowError):
    """Nothing at the anchor satisfies the mod's selection policy."""

    code = NO_MATCH

    def __init__(self, what: str, detail: str | None = None):
        message = f"No {what} found at cursor"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
        self.what = what


class DebugError(ModFlowError):
    """Diagnostic text, surfaced through the error path on purpose."""

    code = DEBUG


class UnknownModError(ModFlowError):
    code = UNKNOWN_MOD

    def __init__(self, name: str):
        super().__init__(f"Unknown mod '{name}'")
        self.name = name
