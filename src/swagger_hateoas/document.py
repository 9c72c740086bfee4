"""Holder for the currently loaded Swagger document."""

from typing import Mapping, Sequence

from swagger_hateoas.links.synthesizer import add_links
from swagger_hateoas.parser.base import Info, Link, PathItem, Root, Swagger
from swagger_hateoas.parser.swagger import DEFAULT_TIMEOUT, load_document


class SwaggerDocument:
    """Owns one Swagger snapshot and answers link queries against it.

    A reload parses the new document completely before replacing the
    snapshot, so concurrent readers always see a whole document. If the
    load fails the previous snapshot stays in place.
    """

    def __init__(self, swagger: Swagger | None = None, location: str | None = None,
                 timeout: float = DEFAULT_TIMEOUT):
        self.location = location
        self.timeout = timeout
        self._swagger = swagger or Swagger()

    @property
    def swagger(self) -> Swagger:
        return self._swagger

    def load(self, location: str | None = None) -> Swagger:
        """Load the document from a URL or file and make it current."""
        location = location or self.location
        if not location:
            raise ValueError("No Swagger document location given")

        swagger = load_document(location, timeout=self.timeout)
        self._swagger = swagger
        self.location = location
        return swagger

    def info(self) -> Info:
        """General information about the API (mainly for the root path)."""
        return self._swagger.info.model_copy()

    def paths(self) -> Mapping[str, PathItem]:
        return self._swagger.paths

    def links(self, request_path: str, parameters: Sequence[str] = (), strict: bool = False) -> list[Link]:
        """Links to the GET-able endpoints one segment below `request_path`."""
        return add_links(self._swagger.paths, request_path, parameters, strict)

    def root(self, request_path: str = "/", parameters: Sequence[str] = (), strict: bool = False) -> Root:
        """Build the HATEOAS payload for `request_path`."""
        swagger = self._swagger
        return build_root(swagger.info, add_links(swagger.paths, request_path, parameters, strict))


def build_root(info: Info, links: Sequence[Link]) -> Root:
    """Combine API metadata and a link list into a Root payload."""
    return Root(
        title=info.title,
        description=info.description,
        version=info.version,
        links=list(links),
    )
