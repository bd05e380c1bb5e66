def block(document: str, header: str) -> str:
    """Return the body of the declaration that starts with ``header``."""
    start = document.index(header)
    end = document.index("\n}", start)
    return document[start:end]
