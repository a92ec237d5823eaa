"""
Autoloader

Locates and loads source files from the namespaced name of the class,
interface or trait they define.

Naming convention (the first segment is always the top-level namespace and
is skipped; middle segments are directories):

- ``Common.Dry.ComponentDatabase``  -> ``dry/class-component-database.py``
- ``Common.Interfaces.Database``    -> ``interfaces/interface-database.py``
- ``Common.Database_Interface``     -> ``interface-database.py``
- ``Common.Traits.SharedQueries``   -> ``traits/trait-shared-queries.py``

Segments may be separated by ``.`` or ``\\``. Files are executed once and
cached per loader.
"""
from __future__ import annotations
import importlib.util
import logging
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional

from common_lib.errors import AutoloadError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\.]")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_IDENTIFIER = re.compile(r"\W")


def split_name(name: str) -> List[str]:
    return [part for part in _SEPARATORS.split(name) if part]


def file_words(segment: str) -> List[str]:
    """Split a class name into lowercase words: `Interface_Database` -> ['interface', 'database']."""
    hyphenated = _CAMEL_BOUNDARY.sub("-", segment).replace("_", "-").lower()
    return [w for w in hyphenated.split("-") if w]


def file_name_for(segments: List[str]) -> str:
    words = file_words(segments[-1])
    parents = [s.lower() for s in segments[:-1]]
    for kind, folder in (("interface", "interfaces"), ("trait", "traits")):
        if kind in words or folder in parents:
            # Only drop the kind word if it's part of the name itself.
            if kind in words:
                words.remove(kind)
            return f"{kind}-{'-'.join(words)}.py"
    return f"class-{'-'.join(words)}.py"


class Autoloader:
    def __init__(self, base_dir: str | Path, namespace: Optional[str] = None) -> None:
        self.base_dir = Path(base_dir)
        self.namespace = namespace
        self._modules: Dict[str, ModuleType] = {}

    def handles(self, name: str) -> bool:
        segments = split_name(name)
        if len(segments) < 2:
            return False
        return self.namespace is None or segments[0] == self.namespace

    def resolve(self, name: str) -> Path:
        """Return the file path `name` maps to. The file need not exist."""
        segments = split_name(name)
        if len(segments) < 2:
            raise ValueError(f"Expected a namespaced name, got {name!r}")
        path = self.base_dir
        for directory in segments[1:-1]:
            path = path / directory.lower()
        return path / file_name_for(segments)

    def load(self, name: str, reload: bool = False) -> Optional[ModuleType]:
        """Execute the file for `name` once and return its module.

        Returns None if `name` is outside this loader's namespace or its
        file does not exist.

        Raises:
            AutoloadError: If the file exists but can't be executed
        """
        if not self.handles(name):
            return None
        path = self.resolve(name)
        key = str(path.absolute())

        if not reload and key in self._modules:
            return self._modules[key]

        if not path.is_file():
            logger.debug("No file for %s at %s", name, path)
            return None

        relative = path.relative_to(self.base_dir).with_suffix("")
        module_name = "autoload_" + _NON_IDENTIFIER.sub("_", "_".join(relative.parts))
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise AutoloadError(f"Could not create module spec for: {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise AutoloadError(f"Failed to load {name} from {path}: {e}") from e

        self._modules[key] = module
        logger.debug("Autoloaded %s from %s", name, path)
        return module

    def find(self, name: str) -> Any:
        """Load `name` and return the object it names, or None."""
        module = self.load(name)
        if module is None:
            return None
        return getattr(module, split_name(name)[-1], None)


_loaders: List[Autoloader] = []


def register(loader: Autoloader) -> Autoloader:
    if loader not in _loaders:
        _loaders.append(loader)
    return loader


def unregister(loader: Autoloader) -> None:
    if loader in _loaders:
        _loaders.remove(loader)


def autoload(name: str) -> Any:
    """Return the object for `name` from the first registered loader that has it."""
    for loader in _loaders:
        found = loader.find(name)
        if found is not None:
            return found
    return None
