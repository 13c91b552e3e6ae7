"""Exception hierarchy for documentation lookups."""


class DocsLookupError(Exception):
    """Base class for all typedoc-lookup errors."""


class ModelLoadError(DocsLookupError):
    """The API model could not be loaded or indexed. Fatal at startup."""


class UnresolvedSymbol(DocsLookupError):
    """No declaration matches a dotted identifier."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Symbol does not exist: {identifier}")
        self.identifier = identifier


class SourceLocationError(DocsLookupError):
    """A source reference could not be mapped to its original location."""

    def __init__(self, message: str, file_name: str) -> None:
        super().__init__(f"{message}: {file_name}")
        self.file_name = file_name


class MissingSourceMap(SourceLocationError):
    """The companion source map of a vendored declaration file does not exist."""

    def __init__(self, file_name: str) -> None:
        super().__init__("No source map for declaration file", file_name)


class NoMappingInSourceMap(SourceLocationError):
    """The source map has no original position for the requested coordinate."""

    def __init__(self, file_name: str) -> None:
        super().__init__("No original file equivalent of symbol source in declaration file", file_name)


class StructuralDecodeError(SourceLocationError):
    """A vendored path was matched, but it is not a declaration file."""

    def __init__(self, file_name: str) -> None:
        super().__init__("Source file name was not a declaration file", file_name)


class UnknownSession(DocsLookupError):
    """A navigation action referenced a session that no longer exists."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Unknown or expired docs session: {session_id}")
        self.session_id = session_id
