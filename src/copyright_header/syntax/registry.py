# Copyright Header - Insert, update or remove license headers in source files
# Copyright (C) 2025 The Copyright Header authors
# SPDX-License-Identifier: MIT

"""Registry mapping file names and extensions to comment syntax descriptors.

Lookup order for a path:
    1. exact extension (``Path.suffix``, case-sensitive),
    2. exact basename (``Makefile``, ``.bashrc``),
    3. a caller-supplied fallback extension (e.g. guessed from a shebang).

The registry is immutable once built. When two descriptors claim the same
extension or filename, the first one registered wins and a warning is logged.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from copyright_header.config.logging import get_logger
from copyright_header.errors import UnknownSyntaxError
from copyright_header.syntax.builtins import SYNTAXES
from copyright_header.syntax.io import descriptors_from_mapping

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping
    from typing import Any

    from copyright_header.config.logging import CopyrightHeaderLogger
    from copyright_header.syntax.base import SyntaxDescriptor

logger: CopyrightHeaderLogger = get_logger(__name__)


class SyntaxRegistry:
    """Immutable lookup table of `SyntaxDescriptor` instances."""

    __slots__ = ("_by_extension", "_by_filename", "_by_name")

    def __init__(self, descriptors: Iterable[SyntaxDescriptor]) -> None:
        by_name: dict[str, SyntaxDescriptor] = {}
        by_extension: dict[str, SyntaxDescriptor] = {}
        by_filename: dict[str, SyntaxDescriptor] = {}

        for descriptor in descriptors:
            if descriptor.name in by_name:
                logger.warning("Duplicate syntax name '%s' ignored", descriptor.name)
                continue
            by_name[descriptor.name] = descriptor
            for ext in sorted(descriptor.extensions):
                owner: SyntaxDescriptor | None = by_extension.get(ext)
                if owner is not None:
                    logger.warning(
                        "Extension '%s' of syntax '%s' already claimed by '%s'",
                        ext,
                        descriptor.name,
                        owner.name,
                    )
                    continue
                by_extension[ext] = descriptor
            for filename in sorted(descriptor.filenames):
                owner = by_filename.get(filename)
                if owner is not None:
                    logger.warning(
                        "Filename '%s' of syntax '%s' already claimed by '%s'",
                        filename,
                        descriptor.name,
                        owner.name,
                    )
                    continue
                by_filename[filename] = descriptor

        self._by_name: dict[str, SyntaxDescriptor] = by_name
        self._by_extension: dict[str, SyntaxDescriptor] = by_extension
        self._by_filename: dict[str, SyntaxDescriptor] = by_filename
        logger.debug(
            "Syntax registry: %d syntaxes, %d extensions, %d filenames",
            len(by_name),
            len(by_extension),
            len(by_filename),
        )

    @classmethod
    def default(cls) -> SyntaxRegistry:
        """Return a registry holding the bundled descriptors."""
        return cls(SYNTAXES)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Mapping[str, Any]],
        *,
        include_builtins: bool = True,
    ) -> SyntaxRegistry:
        """Build a registry from a parsed syntax table.

        Entries of ``mapping`` are registered before the bundled descriptors, so
        they override bundled claims on the same extensions or filenames.

        Args:
            mapping (Mapping[str, Mapping[str, Any]]): ``name -> entry`` table.
            include_builtins (bool): Also register the bundled descriptors.

        Returns:
            SyntaxRegistry: The new registry.

        Raises:
            ConfigurationError: If an entry is malformed.
        """
        descriptors: list[SyntaxDescriptor] = descriptors_from_mapping(mapping)
        if include_builtins:
            descriptors.extend(d for d in SYNTAXES if d.name not in mapping)
        return cls(descriptors)

    def lookup(
        self,
        filename: str | Path,
        fallback_extension: str | None = None,
    ) -> SyntaxDescriptor:
        """Return the descriptor for a file.

        Args:
            filename (str | Path): File name or path.
            fallback_extension (str | None): Extension to try when neither the
                file's own extension nor its name is known (with or without dot).

        Returns:
            SyntaxDescriptor: The matching descriptor.

        Raises:
            UnknownSyntaxError: If nothing matches.
        """
        path = Path(filename)
        if path.suffix and path.suffix in self._by_extension:
            return self._by_extension[path.suffix]
        if path.name in self._by_filename:
            return self._by_filename[path.name]
        if fallback_extension:
            ext: str = fallback_extension
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext in self._by_extension:
                logger.debug("Using fallback extension %s for %s", ext, path)
                return self._by_extension[ext]
        raise UnknownSyntaxError(path.name)

    def get(self, name: str) -> SyntaxDescriptor | None:
        """Return the descriptor registered under ``name``, if any."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        """Return the registered syntax names, sorted."""
        return sorted(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[SyntaxDescriptor]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
