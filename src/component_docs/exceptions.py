from typing import override


class ComponentDocsError(Exception):
    """Base exception for component-docs errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)

    def get_suggestion(self) -> str | None:
        """Return actionable suggestion for resolving the error."""
        return None


class SourceError(ComponentDocsError):
    """Base class for errors tied to one specification source."""

    _verb: str = "processing"

    source: str
    cause: BaseException | str

    def __init__(self, source: str, cause: BaseException | str) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"Error {self._verb} {source}: {cause}")

    @override
    def __reduce__(self) -> tuple[type, tuple[str, BaseException | str]]:
        return (self.__class__, (self.source, self.cause))


class ReadError(SourceError):
    """Raised when a specification document cannot be read."""

    _verb = "reading"


class ParseError(SourceError):
    """Raised when a specification document is not well-formed YAML."""

    _verb = "parsing"

    @override
    def get_suggestion(self) -> str:
        return "Check the file's YAML syntax; only the header document before '---' is read"


class TemplateError(ComponentDocsError):
    """Raised when the documentation template cannot be loaded or rendered."""

    pass


class OutputError(ComponentDocsError):
    """Raised when the generated document cannot be written."""

    pass


class InitError(ComponentDocsError):
    """Base class for template initialization errors."""

    pass


class TemplateExistsError(InitError):
    """Raised when the template file already exists."""

    @override
    def get_suggestion(self) -> str:
        return "Use --force to overwrite it"
