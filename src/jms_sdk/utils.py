"""
Utility helpers shared by resource wrappers
"""


def combine_url(base_url: str, path: str) -> str:
    """
    Join a base URL and a path with exactly one ``/`` between them.

    Args:
        base_url: Base URL, with or without a trailing slash
        path: Path, with or without a leading slash

    Returns:
        str: Combined URL
    """
    if base_url.endswith('/'):
        if path.startswith('/'):
            return base_url[:-1] + path
        return base_url + path

    if path.startswith('/'):
        return base_url + path
    return base_url + '/' + path
