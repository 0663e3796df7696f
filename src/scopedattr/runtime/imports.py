"""
Import Handling

Maps bare names used in expressions to classes made visible by import
declarations:
- import_class("pkg.mod.Name")        → Name
- import_package("pkg.mod")           → any class in pkg.mod by simple name
- import_static("pkg.mod.Cls.MEMBER") → MEMBER resolves to a static member of Cls

Loading goes through importlib. Every load attempt is counted and logged, and
misses are cached, because resolution can be asked about the same name once
per expression evaluation.
"""

import importlib
import logging
from typing import Dict, List, Optional, Set, Tuple

from ..shared.errors import AmbiguousImportError, ImportConflictError, ImportResolutionError
from ..utils.config import DEFAULT_IMPORT_PACKAGES, NAME_SEPARATOR

logger = logging.getLogger(__name__)


def _split_qualified(qualified: str) -> Tuple[str, str]:
    """'pkg.mod.Name' → ('pkg.mod', 'Name')"""
    module_name, sep, simple = qualified.rpartition(NAME_SEPARATOR)
    if not sep or not module_name or not simple:
        raise ImportResolutionError(f"Import '{qualified}' must be a qualified name (module{NAME_SEPARATOR}Name)")
    return module_name, simple


class ImportHandler:
    """
    Import service for one evaluation environment.

    Not thread-safe: caches are plain dicts, one handler per page/template.
    """

    def __init__(self, packages: Tuple[str, ...] = DEFAULT_IMPORT_PACKAGES):
        self._class_imports: Dict[str, str] = {}   # simple name → qualified class name
        self._static_imports: Dict[str, str] = {}  # member name → qualified class name
        self._static_classes: Dict[str, type] = {}  # member name → class, loaded on import
        self._packages: List[str] = list(packages)
        self._resolved: Dict[str, type] = {}       # simple name → class
        self._not_a_class: Set[str] = set()
        self.load_attempts = 0

    # -- declarations ----------------------------------------------------------

    def import_class(self, qualified: str) -> None:
        _, simple = _split_qualified(qualified)
        existing = self._class_imports.get(simple)
        if existing is not None and existing != qualified:
            raise ImportConflictError(simple, existing, qualified)
        self._class_imports[simple] = qualified
        self._resolved.pop(simple, None)
        self._not_a_class.discard(simple)

    def import_package(self, module_name: str) -> None:
        if not module_name:
            raise ImportResolutionError("Package import must name a module")
        if module_name not in self._packages:
            self._packages.append(module_name)
            # package search results may change; only explicit class imports stay pinned
            self._not_a_class.clear()
            self._resolved = {
                name: klass for name, klass in self._resolved.items()
                if name in self._class_imports
            }

    def import_static(self, qualified_member: str) -> None:
        class_name, member = _split_qualified(qualified_member)
        _split_qualified(class_name)
        existing = self._static_imports.get(member)
        if existing is not None and existing != class_name:
            raise ImportConflictError(member, f"{existing}.{member}", qualified_member)
        if existing is None:
            klass = self._load_class(class_name)
            if klass is None:
                raise ImportResolutionError(f"Unable to find class '{class_name}' for static import of '{member}'")
            self._static_classes[member] = klass
        self._static_imports[member] = class_name

    @property
    def packages(self) -> Tuple[str, ...]:
        return tuple(self._packages)

    # -- resolution ------------------------------------------------------------

    def resolve_class(self, name: str) -> Optional[type]:
        """Class visible under the simple name, or None."""
        cached = self._resolved.get(name)
        if cached is not None:
            return cached
        if name in self._not_a_class:
            return None

        qualified = self._class_imports.get(name)
        if qualified is not None:
            klass = self._load_class(qualified)
            if klass is None:
                raise ImportResolutionError(f"Unable to find class '{qualified}'")
            self._resolved[name] = klass
            return klass

        # distinct classes only; a re-export of the same class is not ambiguous
        found: Dict[type, str] = {}
        for package in self._packages:
            qualified = f"{package}{NAME_SEPARATOR}{name}"
            klass = self._load_class(qualified)
            if klass is not None:
                found.setdefault(klass, qualified)
        if len(found) > 1:
            raise AmbiguousImportError(name, sorted(found.values()))
        if not found:
            self._not_a_class.add(name)
            return None
        klass = next(iter(found))
        self._resolved[name] = klass
        return klass

    def resolve_static(self, name: str) -> Optional[type]:
        """Class that was statically imported for member `name`, or None."""
        return self._static_classes.get(name)

    def _load_class(self, qualified: str) -> Optional[type]:
        """importlib lookup of 'pkg.mod.Name'; nested classes ('pkg.mod.Outer.Inner') supported."""
        self.load_attempts += 1
        logger.debug(f"Loading class {qualified}")
        parts = qualified.split(NAME_SEPARATOR)
        for split in range(len(parts) - 1, 0, -1):
            module_name = NAME_SEPARATOR.join(parts[:split])
            try:
                obj = importlib.import_module(module_name)
            except ImportError:
                continue
            for attr in parts[split:]:
                obj = getattr(obj, attr, None)
                if obj is None:
                    break
            return obj if isinstance(obj, type) else None
        return None
