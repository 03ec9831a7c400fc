"""
Mask library loader

Picture masks are written once and reused by many fields, so they can be
kept in a YAML file under a name:

    masks:
      date:
        picture: "##/##/##[##]"
        description: Date with or without century

Every picture is syntax-checked when the library is loaded; a library with
a malformed mask is rejected as a whole.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..config import appsettings
from .log import LOG
from .syntax import syntax_diagnose


class MaskLibraryError(Exception):
    """Raised when a mask library cannot be loaded or a mask is unknown"""
    pass


@dataclass(frozen=True)
class NamedMask:
    """
    Picture mask registered under a name

    Attributes:
        name: Library key (e.g., "date")
        picture: The picture mask
        description: Human-readable description
    """
    name: str
    picture: str
    description: str = ""


class MaskLibrary:
    """
    Named picture masks loaded from a YAML file
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Load a mask library.

        Args:
            path: YAML file to load; defaults to the configured library
                  (the built-in one unless PICMASK_LIBRARY_FILE is set)

        Raises:
            MaskLibraryError: If the file is missing, unreadable, malformed,
                              or contains a mask with a syntax error
        """
        if path is None:
            path = appsettings.libraryPath_resolve()

        self.path = Path(path)
        if not self.path.exists():
            raise MaskLibraryError(f"Mask library not found: {self.path}")

        self.masks: Dict[str, NamedMask] = self._masks_load()
        LOG(f"Loaded {len(self.masks)} masks from {self.path}", level=2)

    def _masks_load(self) -> Dict[str, NamedMask]:
        """Load, shape-check and syntax-check all entries"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MaskLibraryError(f"Failed to parse {self.path}: {e}")
        except OSError as e:
            raise MaskLibraryError(f"Failed to load {self.path}: {e}")

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise MaskLibraryError(f"{self.path}: expected a mapping at top level")

        entries = config.get('masks') or {}
        if not isinstance(entries, dict):
            raise MaskLibraryError(f"{self.path}: 'masks' must be a mapping")

        masks: Dict[str, NamedMask] = {}
        for name, entry in entries.items():
            masks[str(name)] = self._entry_parse(str(name), entry)

        return masks

    def _entry_parse(self, name: str, entry: Any) -> NamedMask:
        """Turn one YAML entry into a NamedMask"""
        if isinstance(entry, str):
            picture, description = entry, ""
        elif isinstance(entry, dict) and isinstance(entry.get('picture'), str):
            picture = entry['picture']
            description = str(entry.get('description', ""))
        else:
            raise MaskLibraryError(f"{self.path}: mask '{name}' has no picture")

        issue = syntax_diagnose(picture)
        if issue is not None:
            raise MaskLibraryError(
                f"{self.path}: mask '{name}' ({picture}): {issue.reason} at position {issue.position}"
            )

        return NamedMask(name=name, picture=picture, description=description)

    def mask_get(self, name: str) -> NamedMask:
        """
        Get a mask by name

        Raises:
            MaskLibraryError: If no mask has this name
        """
        try:
            return self.masks[name]
        except KeyError:
            known = ", ".join(sorted(self.masks)) or "none"
            raise MaskLibraryError(f"Unknown mask '{name}' (known: {known})") from None

    def picture_get(self, name: str) -> str:
        """Get the picture of a mask by name"""
        return self.mask_get(name).picture

    def names_list(self) -> List[str]:
        """Sorted list of mask names"""
        return sorted(self.masks)

    def __contains__(self, name: str) -> bool:
        return name in self.masks

    def __len__(self) -> int:
        return len(self.masks)
