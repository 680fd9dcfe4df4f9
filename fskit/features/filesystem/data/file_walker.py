import asyncio
import logging
import os
import stat
from pathlib import Path
from typing import List, Tuple

import aiofiles.os

from ..domain.interfaces import IFileWalker
from ..domain.models import ScanRequest

logger = logging.getLogger(__name__)

class LocalFileWalker(IFileWalker):
    """
    Iterative depth-first walk over an explicit frontier (no recursion), so
    tree depth never grows the call stack.

    Symlinked directories are followed and there is no cycle detection:
    a symlink loop makes the walk run forever.
    """

    async def collect(self, request: ScanRequest) -> List[Path]:
        root = request.root_path

        # Fails fast on a missing root (FileNotFoundError)
        root_stat = await aiofiles.os.stat(root)
        if not stat.S_ISDIR(root_stat.st_mode):
            raise NotADirectoryError(f"Scan root is not a directory: {root}")

        if not request.extensions:
            return []

        matches: List[Path] = []
        frontier: List[str] = [os.fspath(root)]

        while frontier:
            directory = frontier.pop()

            # Any listing error aborts the whole scan
            for entry_path, is_dir in await asyncio.to_thread(self._list_entries, directory):
                if is_dir:
                    frontier.append(entry_path)
                elif request.matches(entry_path):
                    matches.append(Path(entry_path))

        logger.debug(f"Scan of {root} matched {len(matches)} files")
        return matches

    @staticmethod
    def _list_entries(directory: str) -> List[Tuple[str, bool]]:
        # os.scandir reuses the d_type from readdir, so is_dir() rarely needs a stat
        with os.scandir(directory) as entries:
            return [(entry.path, entry.is_dir()) for entry in entries]
