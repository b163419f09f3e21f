"""Exception hierarchy shared by the package."""


class ClabError(Exception):
    """Base class for all lab tooling errors."""


class LabFileNotFoundError(ClabError, FileNotFoundError):
    """A file the lab needs does not exist."""

    def __init__(self, message: str = "file not found") -> None:
        super().__init__(message)


class IncorrectInputError(ClabError, ValueError):
    """User input could not be accepted."""

    def __init__(self, message: str = "incorrect input") -> None:
        super().__init__(message)


class DuplicatedValueError(ClabError, ValueError):
    """The same key was given more than once."""

    def __init__(self, message: str = "duplicated value definition") -> None:
        super().__init__(message)


class GenerateSyntaxError(ClabError, ValueError):
    """A topology generation flag is malformed."""

    def __init__(self, message: str = "syntax error") -> None:
        super().__init__(message)