"""Path string helpers: router syntax translation and fragment interleaving."""

import re
from typing import Sequence

# Echo-style parameter token, e.g. ":id" in /users/:id
ECHO_PARAM_RE = re.compile(r":\w+", re.ASCII)

# Swagger-style placeholder, e.g. "{id}" in /users/{id}
SWAGGER_PARAM_RE = re.compile(r"\{.*?\}")


def interleave(first: Sequence[str], second: Sequence[str]) -> str:
    """Join two fragment lists as first[0], second[0], first[1], ...

    `first` is expected to hold one more element than `second` (a path
    starts and ends with a literal fragment, possibly empty). Leftover
    elements of `first` are appended as-is; extra elements of `second`
    are dropped.
    """
    parts = []
    for i, fragment in enumerate(first):
        parts.append(fragment)
        if i < len(second):
            parts.append(second[i])
    return "".join(parts)


def echo_to_swagger(path: str) -> str:
    """Convert a path from Echo syntax (/users/:id) to Swagger syntax (/users/{id})."""
    literals = ECHO_PARAM_RE.split(path)
    params = ["{" + token[1:] + "}" for token in ECHO_PARAM_RE.findall(path)]
    return interleave(literals, params)


def split_placeholders(path: str) -> list[str]:
    """Return the literal fragments around each {placeholder} of a Swagger path."""
    return SWAGGER_PARAM_RE.split(path)
