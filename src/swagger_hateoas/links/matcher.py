"""Find the catalog paths sitting one segment below a given path."""

import re
from typing import Mapping

from swagger_hateoas.links.paths import split_placeholders
from swagger_hateoas.parser.base import ChildPath, PathItem

ROOT_PATH = "/"

# A single child segment: a literal name or a {placeholder}
CHILD_SEGMENT = r"[a-zA-Z{}]*"


def child_pattern(path: str) -> re.Pattern:
    """Build a regex matching paths exactly one segment deeper than `path`."""
    if path == ROOT_PATH:
        return re.compile(r"^/" + CHILD_SEGMENT + r"$")
    return re.compile(r"^" + re.escape(path) + r"/" + CHILD_SEGMENT + r"$")


def match_children(paths: Mapping[str, PathItem], path: str) -> list[ChildPath]:
    """Return the GET-able catalog paths directly below `path`, sorted by path.

    `path` must already be in Swagger syntax. Paths without a GET
    operation are skipped, as is `path` itself.
    """
    pattern = child_pattern(path)

    children = []
    for catalog_path in sorted(paths):
        if catalog_path == path or not pattern.fullmatch(catalog_path):
            continue
        item = paths[catalog_path]
        if item.get is None:
            continue
        children.append(
            ChildPath(
                path=catalog_path,
                fragments=split_placeholders(catalog_path),
                operation=item.get,
            )
        )
    return children
