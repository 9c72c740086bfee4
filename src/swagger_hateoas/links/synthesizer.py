"""Build HATEOAS links for the children of a request path."""

from typing import Mapping, Sequence

from swagger_hateoas.errors import ParameterCountError
from swagger_hateoas.links.matcher import match_children
from swagger_hateoas.links.paths import echo_to_swagger, interleave
from swagger_hateoas.parser.base import ChildPath, Link, PathItem


def build_link(child: ChildPath, parameters: Sequence[str] = (), strict: bool = False) -> Link:
    """Turn a matched child path into a Link.

    Parameter values replace the path's placeholders in order. Unless
    `strict` is set, missing values leave the remaining literal fragments
    in place and surplus values are ignored.
    """
    placeholders = len(child.fragments) - 1
    if strict and len(parameters) != placeholders:
        raise ParameterCountError(child.path, placeholders, len(parameters))

    return Link(
        rel=child.operation.summary,
        href=interleave(child.fragments, list(parameters)),
    )


def add_links(
    paths: Mapping[str, PathItem],
    request_path: str,
    parameters: Sequence[str] = (),
    strict: bool = False,
) -> list[Link]:
    """Return links to every GET-able endpoint one segment below `request_path`.

    `request_path` is in router (Echo) syntax, e.g. /users/:id.
    An empty list means the path has no children.
    """
    context_path = echo_to_swagger(request_path)
    return [build_link(child, parameters, strict) for child in match_children(paths, context_path)]
