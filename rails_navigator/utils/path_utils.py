from pathlib import Path

from ..core import constants as cs


def normalize_path(path: Path | str) -> str:
    return str(path).replace(cs.WINDOWS_SEPARATOR, cs.PATH_SEPARATOR)


def relative_to_root(path: str, root: str) -> str | None:
    """Returns `path` relative to `root` with forward slashes, or None if outside."""
    norm_path = normalize_path(path)
    norm_root = normalize_path(root).rstrip(cs.PATH_SEPARATOR)
    prefix = f"{norm_root}{cs.PATH_SEPARATOR}"
    if not norm_path.startswith(prefix):
        return None
    return norm_path[len(prefix) :]


def deepest_containing_root(path: str, roots: list[str]) -> str | None:
    containing = [root for root in roots if relative_to_root(path, root) is not None]
    if not containing:
        return None
    return max(containing, key=lambda root: len(normalize_path(root)))
