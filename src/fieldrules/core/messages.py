"""
Message catalog for validation messages.

Messages live in YAML files. Each top-level key maps either to a dictionary
of language/text pairs or to another key, which makes it an alias:

```yaml
required_field_missing:
  en: "Required field '{0}' is missing."
field_is_missing: required_field_missing
```

Positional arguments passed to `get()` are substituted with `str.format`.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from fieldrules.core.exceptions import MessageCatalogError
from fieldrules.observability.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("messages.yaml")
DEFAULT_LANGUAGE = "en"


class MessageCatalog:
    """
    Resolves message keys to localized text.

    Files are loaded lazily on first lookup. Later files override earlier
    ones key by key, and within a key language by language.
    """

    def __init__(self, paths: list[str | Path] | None = None, language: str | None = None):
        """
        Initialize the catalog.

        Args:
            paths: Catalog files to load, in override order
            language: Language code (defaults to FIELDRULES_LANGUAGE or "en")
        """
        self.paths = [Path(p) for p in (paths or [DEFAULT_CATALOG_PATH])]
        self.language = language or os.getenv("FIELDRULES_LANGUAGE", DEFAULT_LANGUAGE)
        self._translations: dict[str, dict[str, str] | str] | None = None

    def get(self, key: str, *args: Any) -> str:
        """
        Look up a message and substitute positional arguments.

        Args:
            key: Message key
            *args: Values for the {0}, {1}, ... placeholders

        Returns:
            The formatted message

        Raises:
            MessageCatalogError: If the key or language cannot be resolved
        """
        return self._resolve(key, args, [])

    def has(self, key: str) -> bool:
        return key in self.translations()

    def translations(self) -> dict[str, dict[str, str] | str]:
        if self._translations is None:
            merged: dict[str, dict[str, str] | str] = {}
            for path in self.paths:
                for key, unit in self._load_file(path).items():
                    existing = merged.get(key)
                    if isinstance(unit, dict) and isinstance(existing, dict):
                        merged[key] = {**existing, **unit}
                    else:
                        merged[key] = unit
            self._translations = merged
            logger.debug(
                "Loaded message catalog",
                extra={"paths": [str(p) for p in self.paths], "keys": len(merged)},
            )
        return self._translations

    def _resolve(self, key: str, args: tuple, visited: list[str]) -> str:
        if key in visited:
            raise MessageCatalogError(f"Alias cycle detected with message '{key}'")

        translations = self.translations()
        if key not in translations:
            raise MessageCatalogError(f"Message '{key}' not found")

        unit = translations[key]
        if isinstance(unit, str):
            return self._resolve(unit, args, visited + [key])

        if self.language not in unit:
            raise MessageCatalogError(
                f"Language '{self.language}' not found for message '{key}'"
            )

        text = unit[self.language]
        if args:
            text = text.format(*args)
        return text

    @staticmethod
    def _load_file(path: Path) -> dict[str, dict[str, str] | str]:
        """
        Load and check the structure of a single catalog file.

        Raises:
            MessageCatalogError: If the file is missing or malformed
        """
        if not path.exists():
            raise MessageCatalogError(f"Message catalog file not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                root = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise MessageCatalogError(f"Message catalog contains invalid YAML: {e}")

        if not isinstance(root, dict):
            raise MessageCatalogError("Message catalog must contain a mapping at the root")

        for key, unit in root.items():
            if not isinstance(key, str) or key == "":
                raise MessageCatalogError("Message key must be a non-empty string")
            if isinstance(unit, dict):
                for language, text in unit.items():
                    if not isinstance(language, str) or language == "":
                        raise MessageCatalogError(
                            f"Language code for message '{key}' must be a non-empty string"
                        )
                    if not isinstance(text, str):
                        raise MessageCatalogError(f"Text for message '{key}' must be a string")
            elif not isinstance(unit, str):
                raise MessageCatalogError(
                    f"Message '{key}' must map languages to text or alias another key"
                )

        return root


_default_catalog: MessageCatalog | None = None


def get_messages() -> MessageCatalog:
    """
    Get the process-wide message catalog.

    The bundled catalog is loaded first; a file named by FIELDRULES_MESSAGES
    is merged over it.
    """
    global _default_catalog
    if _default_catalog is None:
        paths: list[str | Path] = [DEFAULT_CATALOG_PATH]
        extra = os.getenv("FIELDRULES_MESSAGES")
        if extra:
            paths.append(extra)
        _default_catalog = MessageCatalog(paths)
    return _default_catalog


def set_messages(catalog: MessageCatalog | None) -> None:
    """Replace the process-wide catalog (None resets to the default)."""
    global _default_catalog
    _default_catalog = catalog
