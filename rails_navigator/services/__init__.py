from .local_host import LocalEditorHost
from .protocols import EditorHostProtocol

__all__ = [
    "EditorHostProtocol",
    "LocalEditorHost",
]
