"""Exceptions raised by swagger-hateoas."""


class HateoasError(Exception):
    """Base class for all swagger-hateoas errors."""


class DocumentLoadError(HateoasError):
    """The Swagger document could not be loaded."""


class SourceUnavailableError(DocumentLoadError):
    """The document source could not be read (network, HTTP status, file)."""


class MalformedSourceError(DocumentLoadError):
    """The document was read but is not a usable Swagger document."""


class ParameterCountError(HateoasError, ValueError):
    """Supplied parameter values do not match the path's placeholders."""

    def __init__(self, path: str, expected: int, got: int):
        self.path = path
        self.expected = expected
        self.got = got
        super().__init__(f"{path} has {expected} placeholder(s) but {got} value(s) were supplied")
