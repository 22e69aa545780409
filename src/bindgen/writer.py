"""Sinks for generated source files."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Set, Union

from bindgen.errors import ProcessingError

logger = logging.getLogger(__name__)


class SourceWriter(ABC):
    """Destination for generated classes, keyed by fully qualified name."""

    @abstractmethod
    def write_to_file(self, qualified_name: str, contents: str) -> None:
        """Emit `contents` as the source of class `qualified_name`.

        Raises:
            ProcessingError: If `qualified_name` was already written.
        """


class InMemorySourceWriter(SourceWriter):
    """Collect generated sources in a dictionary."""

    def __init__(self) -> None:
        self.files: Dict[str, str] = {}

    def write_to_file(self, qualified_name: str, contents: str) -> None:
        if qualified_name in self.files:
            raise ProcessingError(f"Source for {qualified_name} was already written")
        logger.debug("Collected source for %s", qualified_name)
        self.files[qualified_name] = contents


class FileSourceWriter(SourceWriter):
    """Write generated sources below `root`, one directory per package segment."""

    def __init__(self, root: Union[str, Path], extension: str = ".java") -> None:
        self.root = Path(root)
        self.extension = extension
        self._written: Set[str] = set()

    def path_for(self, qualified_name: str) -> Path:
        *package, class_name = qualified_name.split(".")
        return self.root.joinpath(*package, class_name + self.extension)

    def write_to_file(self, qualified_name: str, contents: str) -> None:
        if qualified_name in self._written:
            raise ProcessingError(f"Source for {qualified_name} was already written")
        path = self.path_for(qualified_name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise ProcessingError(f"Could not write {path}: {e}") from e
        self._written.add(qualified_name)
        logger.debug("Wrote %s", path)


__all__ = ["FileSourceWriter", "InMemorySourceWriter", "SourceWriter"]
