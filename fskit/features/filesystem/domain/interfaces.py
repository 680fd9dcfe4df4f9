from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from .models import PathLike, ScanRequest

class IFileSystem(ABC):
    """
    Contract for single-path filesystem operations.
    Read-side methods return None/False on failure, write-side methods raise.
    """
    @abstractmethod
    async def ensure_directory(self, path: PathLike) -> None:
        """Creates the directory (or the file's parent directory) like mkdir -p."""
        pass

    @abstractmethod
    async def exists(self, path: PathLike) -> bool:
        pass

    @abstractmethod
    async def write_text(self, path: PathLike, content: str) -> None:
        pass

    @abstractmethod
    async def read_text(self, path: PathLike) -> Optional[str]:
        """Returns the file content, or None if missing or unreadable."""
        pass

    @abstractmethod
    async def copy(self, source: PathLike, destination: PathLike) -> None:
        pass

class IFileWalker(ABC):
    """
    Contract for traversing a directory tree.
    """
    @abstractmethod
    async def collect(self, request: ScanRequest) -> List[Path]:
        """
        Returns every file under request.root_path matching request.extensions,
        in discovery order.
        """
        pass
