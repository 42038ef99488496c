"""Localization tree loading interface and implementations.

Defines the contract the translator uses to read locale files from disk and
provides the JSON/YAML file loader. A translator built without a loader works
from in-memory localizations only.

Directory layouts understood by `FileTreeLoader.load_namespace`:

    <locales_dir>/<locale>/<namespace>.json
    <features_dir>/<feature>/locales/<locale>.json

`.yml` and `.yaml` documents are accepted wherever `.json` is.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from localekit.logging import get_module_logger

logger = get_module_logger()

TREE_SUFFIXES = (".json", ".yml", ".yaml")

PathLike = Union[str, Path]


class TreeLoader(ABC):
    """Abstract base for localization tree loaders.

    Implementations never raise for missing or malformed documents; they
    report them as absent so lookups can fall through to the next tier.
    """

    @abstractmethod
    def load_tree(self, path: PathLike) -> Optional[Dict[str, Any]]:
        """Load and parse one localization document.

        Args:
            path: Path of the document.

        Returns:
            The parsed tree, or None if the document is absent or unusable.
        """

    @abstractmethod
    def list_entries(self, path: PathLike) -> List[str]:
        """List entry names in a directory.

        Args:
            path: Directory path.

        Returns:
            Sorted entry names; empty if the directory does not exist.
        """

    def find_document(self, directory: PathLike, stem: str) -> Optional[Path]:
        """Return the first existing `<directory>/<stem><suffix>` document."""
        entries = set(self.list_entries(directory))
        for suffix in TREE_SUFFIXES:
            name = f"{stem}{suffix}"
            if name in entries:
                return Path(directory) / name
        return None

    def load_namespace(
        self,
        locale: str,
        namespace: str,
        locales_dir: Optional[PathLike] = None,
        features_dir: Optional[PathLike] = None,
    ) -> Optional[Dict[str, Any]]:
        """Load the tree for a (locale, namespace) pair.

        The locales directory is consulted first; the features directory is
        only probed when the locales directory has no document for the
        namespace. Namespaces are matched against directory listings, so a
        name holding a path separator never reaches outside either root.

        Args:
            locale: Locale code (e.g. "en").
            namespace: Namespace or feature name (e.g. "general").
            locales_dir: Root of <locale>/<namespace>.json files.
            features_dir: Root of <feature>/locales/<locale>.json files.

        Returns:
            The parsed tree, or None if no readable document exists.
        """
        if locales_dir:
            document = self.find_document(Path(locales_dir) / locale, namespace)
            if document is not None:
                return self.load_tree(document)

        # Only direct children of features_dir name a feature
        if features_dir and namespace in self.list_entries(features_dir):
            document = self.find_document(
                Path(features_dir) / namespace / "locales", locale
            )
            if document is not None:
                return self.load_tree(document)

        return None

    def list_namespaces(
        self,
        locale: str,
        locales_dir: Optional[PathLike] = None,
        features_dir: Optional[PathLike] = None,
    ) -> List[str]:
        """List namespaces available on disk for a locale.

        Returns:
            Namespace names, locales directory entries first, without
            duplicates.
        """
        namespaces: List[str] = []

        if locales_dir:
            for entry in self.list_entries(Path(locales_dir) / locale):
                path = Path(entry)
                if path.suffix in TREE_SUFFIXES and path.stem not in namespaces:
                    namespaces.append(path.stem)

        if features_dir:
            for feature in self.list_entries(features_dir):
                if feature in namespaces:
                    continue
                feature_locales = Path(features_dir) / feature / "locales"
                if self.find_document(feature_locales, locale) is not None:
                    namespaces.append(feature)

        return namespaces


class FileTreeLoader(TreeLoader):
    """Loader for JSON and YAML localization files on the local file system.

    Attributes:
        encoding: Text encoding of the documents.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load_tree(self, path: PathLike) -> Optional[Dict[str, Any]]:
        path = Path(path)
        try:
            with open(path, "r", encoding=self.encoding) as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            logger.error(
                "translation_file_unreadable",
                file=str(path),
                error=str(e),
            )
            return None

        if not isinstance(data, dict):
            logger.warning(
                "invalid_translation_format",
                file=str(path),
                expected="dict",
            )
            return None

        logger.debug("loaded_translation_file", file=str(path), key_count=len(data))
        return data

    def list_entries(self, path: PathLike) -> List[str]:
        directory = Path(path)
        if not directory.is_dir():
            return []
        try:
            return sorted(entry.name for entry in directory.iterdir())
        except OSError as e:
            logger.error(
                "translation_directory_unreadable",
                directory=str(directory),
                error=str(e),
            )
            return []
