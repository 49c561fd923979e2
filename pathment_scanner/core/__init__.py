"""Core value types – Pathment, WebUrl, FilePath – and converters."""

from pathment_scanner.core.web_url import WebUrl
from pathment_scanner.core.file_path import FilePath
from pathment_scanner.core.pathment import Pathment, Type, default_sort_key, sort_pathments
from pathment_scanner.core.convert import from_path, from_uri, switch_protocol

__all__ = [
    "WebUrl",
    "FilePath",
    "Pathment",
    "Type",
    "default_sort_key",
    "sort_pathments",
    "from_path",
    "from_uri",
    "switch_protocol",
]
