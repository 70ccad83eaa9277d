from .dispatcher import Navigator, classify
from .method_locator import find_enclosing_method, find_method_offset
from .path_resolver import PathResolver, probe_path

__all__ = [
    "Navigator",
    "PathResolver",
    "classify",
    "find_enclosing_method",
    "find_method_offset",
    "probe_path",
]
