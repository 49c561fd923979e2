"""Decomposed local, UNC or ``file:`` path."""

from __future__ import annotations

from dataclasses import dataclass

from pathment_scanner.protocol import TransferProtocol

WINDOWS_SEP = "\\"


@dataclass(frozen=True)
class FilePath:
    """Immutable decomposition of a file path.

    ``directories`` keeps its trailing separator (``/home/user/``); drive
    paths use Windows separators (``\\Users\\a\\``).  ``extension`` is stored
    without the dot.  A drive with no directories and no file name gets the
    root directory marker, so ``C:`` is held as ``C:`` + ``\\``.
    """

    scheme_found: bool = False
    drive: str = ""
    directories: str = ""
    file_name: str = ""
    extension: str = ""

    def __post_init__(self) -> None:
        for name in ("drive", "directories", "file_name", "extension"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value or "").strip())
        if self.drive and not (self.directories or self.file_name or self.extension):
            object.__setattr__(self, "directories", WINDOWS_SEP)

    @property
    def has_scheme(self) -> bool:
        return self.scheme_found

    @property
    def has_drive(self) -> bool:
        return bool(self.drive)

    @property
    def full_name(self) -> str:
        """File name with its extension, ``""`` when there is no file name."""
        if not self.file_name:
            return ""
        return f"{self.file_name}.{self.extension}" if self.extension else self.file_name

    @property
    def full_path(self) -> str:
        """The path with ``file://`` in front when a scheme was found."""
        if not self.scheme_found:
            return self.path_without_protocol
        notation = TransferProtocol.FILE_URL.notation
        if self.drive:
            return f"{notation}/{self.path_without_protocol.replace(WINDOWS_SEP, '/')}"
        return notation + self.path_without_protocol

    @property
    def path_without_protocol(self) -> str:
        return f"{self.drive}{self.directories}{self.full_name}"

    def is_structurally_complete(self) -> bool:
        """A drive plus directories or a file name; a debugging aid, not a
        validity check."""
        return self.has_drive and bool(self.directories or self.file_name)
