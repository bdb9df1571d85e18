"""
The report record built for every analyzed file.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SectionHeader:
    """One entry of the PE section table."""

    name: str
    virtual_size: int
    virtual_address: int
    size_of_raw_data: int
    pointer_to_raw_data: int
    pointer_to_relocations: int
    pointer_to_line_numbers: int
    number_of_relocations: int
    number_of_line_numbers: int
    characteristics: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Report:
    """Metadata for a single PE file.

    Built in one go once every extraction step has finished, then only
    read. `classifier_result` is None when the classifier was not run or
    gave no usable answer.
    """

    name: str
    md5: str
    sha1: str
    sha256: str
    file_type: str
    magic: str
    file_size: str
    libraries: tuple[str, ...] = ()
    symbols: tuple[str, ...] = ()
    sections: tuple[SectionHeader, ...] = ()
    classifier_result: Optional[bool] = None
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'md5': self.md5,
            'sha1': self.sha1,
            'sha256': self.sha256,
            'file_type': self.file_type,
            'magic': self.magic,
            'file_size': self.file_size,
            'libraries': list(self.libraries),
            'symbols': list(self.symbols),
            'sections': [section.to_dict() for section in self.sections],
            'classifier_result': self.classifier_result,
            'warnings': list(self.warnings)
        }
