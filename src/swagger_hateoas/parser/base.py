"""Data models for a loaded Swagger document and the links built from it.

Only the parts of the document the link engine reads are modelled:
the `info` block and, per path, the GET operation's summary.
Everything else in the document is ignored on load.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Operation(BaseModel):
    """A single HTTP operation on a path."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    summary: str = ""  # becomes the link's rel

    @field_validator("summary", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value


class PathItem(BaseModel):
    """Operations defined for one catalog path. Only GET is read."""

    get: Operation | None = None


class Info(BaseModel):
    """Top-level descriptive metadata of the API."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str = ""
    description: str = ""
    version: str = ""

    @field_validator("title", "description", "version", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value


class Swagger(BaseModel):
    """A loaded Swagger/OpenAPI document."""

    info: Info = Field(default_factory=Info)
    paths: dict[str, PathItem] = {}  # /users/{id} -> PathItem


class Link(BaseModel):
    """A HATEOAS navigation link."""

    model_config = ConfigDict(frozen=True)

    rel: str
    href: str


class Root(BaseModel):
    """API metadata plus the links reachable from the requested path."""

    title: str
    description: str
    version: str
    links: list[Link] = []


class ChildPath(BaseModel):
    """A catalog path one segment below the requested path."""

    model_config = ConfigDict(frozen=True)

    path: str
    fragments: list[str]  # literal text around each {placeholder}
    operation: Operation
