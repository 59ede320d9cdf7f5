"""Ordered, read-only collections of output formats and their lookups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, overload

from siteformats.output.exceptions import FormatNotFoundError
from siteformats.output.format import BUILTIN_FORMATS, OutputFormat

logger = logging.getLogger(__name__)

# Segments of "base.FORMAT.ext" after splitting on "."
FILENAME_PARTS_WITH_FORMAT = 3
FILENAME_PARTS_WITH_EXTENSION = 2


class OutputFormats(Sequence[OutputFormat]):
    """Immutable collection of output formats.

    The formats are always ordered by name (case sensitive), sorting is done
    when the collection is built.
    """

    __slots__ = ("_formats",)

    def __init__(self, formats: Iterable[OutputFormat] = ()) -> None:
        self._formats: tuple[OutputFormat, ...] = tuple(sorted(formats, key=lambda f: f.name))

    @overload
    def __getitem__(self, index: int) -> OutputFormat: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[OutputFormat, ...]: ...

    def __getitem__(self, index: int | slice) -> OutputFormat | tuple[OutputFormat, ...]:
        return self._formats[index]

    def __len__(self) -> int:
        return len(self._formats)

    def __iter__(self) -> Iterator[OutputFormat]:
        return iter(self._formats)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OutputFormats):
            return self._formats == other._formats
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._formats)

    def __repr__(self) -> str:
        return f"OutputFormats([{', '.join(self.names())}])"

    def names(self) -> list[str]:
        return [f.name for f in self._formats]

    def with_suffix(self, suffix: str) -> tuple[OutputFormat, ...]:
        """Return every format whose media type uses ``suffix`` (case insensitive)."""
        wanted = suffix.casefold()
        return tuple(f for f in self._formats if f.media_type.suffix.casefold() == wanted)

    def get_by_suffix(self, suffix: str) -> OutputFormat | None:
        """Get an output format given a suffix, e.g. "html".

        Returns None if no format matches, or if the suffix is ambiguous
        because more than one format uses it. The lookup is case insensitive.
        """
        matches = self.with_suffix(suffix)
        if len(matches) > 1:
            logger.debug(
                "Suffix %r is ambiguous between output formats: %s",
                suffix,
                ", ".join(f.name for f in matches),
            )
            return None
        return matches[0] if matches else None

    def get_by_name(self, name: str) -> OutputFormat | None:
        """Get an output format by its identifier name (case insensitive)."""
        wanted = name.casefold()
        for candidate in self._formats:
            if candidate.name.casefold() == wanted:
                return candidate
        return None

    def get_by_names(self, *names: str) -> list[OutputFormat]:
        """Get output formats for a list of names, in the order given.

        Raises:
            FormatNotFoundError: For the first name that does not match a format.
        """
        resolved: list[OutputFormat] = []
        for name in names:
            output_format = self.get_by_name(name)
            if output_format is None:
                raise FormatNotFoundError(name)
            resolved.append(output_format)
        return resolved

    def from_filename(self, filename: str) -> OutputFormat | None:
        """Get the output format for a template file name.

        ``mytemplate.amp.html`` resolves by format name (``amp``),
        ``mytemplate.html`` by suffix and ``mytemplate`` resolves to nothing.
        """
        out_format = ext = ""
        parts = filename.split(".")
        if len(parts) >= FILENAME_PARTS_WITH_FORMAT:
            out_format, ext = parts[1], parts[2]
        elif len(parts) == FILENAME_PARTS_WITH_EXTENSION:
            ext = parts[1]

        if out_format:
            return self.get_by_name(out_format)
        if ext:
            return self.get_by_suffix(ext)
        return None

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize the formats, media types rendered as their type string."""
        return [f.model_dump(mode="json") for f in self._formats]


DEFAULT_FORMATS = OutputFormats(BUILTIN_FORMATS)
