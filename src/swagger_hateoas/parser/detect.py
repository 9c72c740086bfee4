"""Auto-detect where a Swagger document should be read from."""


def detect_source(location: str) -> str:
    """Detect whether a document location is a URL or a local file.

    Returns: 'url' or 'file'.
    """
    if location.lower().startswith(("http://", "https://")):
        return "url"
    return "file"
