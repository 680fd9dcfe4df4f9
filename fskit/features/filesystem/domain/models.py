import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Union

from .errors import InvalidPathError

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class ScanRequest:
    """
    Intent to collect every file under root_path whose suffix is in extensions.
    Extensions keep their leading dot (".json") and match case-sensitively.
    """
    root_path: Path
    extensions: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def create(cls, root: PathLike, extensions: Iterable[str]) -> "ScanRequest":
        if not os.fspath(root):
            raise InvalidPathError("Empty root passed to scan")
        if isinstance(extensions, str):
            # A bare ".txt" would otherwise be split into characters
            extensions = [extensions]
        return cls(root_path=Path(root), extensions=frozenset(extensions))

    def __post_init__(self):
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidPathError(f"Extension must start with '.': {ext!r}")

    def matches(self, name: str) -> bool:
        return os.path.splitext(name)[1] in self.extensions
