from lexpath import platforms
from lexpath.base import Path


def with_trailing_separator(p):
    """Returns a path with a trailing separator or None if not a path"""
    if p is None:
        return p
    return p._replace(has_trailing_separator=True)


def has_trailing_separator(p):
    """Checks if a path has a trailing separator"""
    if p is None:
        return False
    return p.has_trailing_separator


def remove_trailing_separator(p):
    """Returns a path without a trailing separator or None if not a path"""
    if p is None:
        return p
    return p._replace(has_trailing_separator=False)


def split_search_path(value, platform=None):
    """Splits a path list such as ``$PATH`` into paths.

    Entries are separated by the platform's path-list separator (``:`` on
    posix, ``;`` on windows). Empty entries are skipped.

    Args:
        value (str): The path list.
        platform (Platform, optional): Defaults to the configured platform.

    Returns:
        List[Path]: The parsed entries, or ``None`` if any entry is not a
            valid path.
    """
    pathsep = platforms.resolve(platform).pathsep
    paths = []
    for entry in value.split(pathsep):
        if not entry:
            continue
        p = Path.parse(entry)
        if p is None:
            return None
        paths.append(p)
    return paths


def join_search_path(paths, platform=None):
    """Renders ``paths`` and joins them into a path list."""
    platform = platforms.resolve(platform)
    return platform.pathsep.join(p.render(platform) for p in paths)
