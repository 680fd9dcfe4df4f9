import asyncio
import logging
import os
import shutil
from typing import Optional

import aiofiles
import aiofiles.os

from fskit.core.config.settings import settings
from ..domain.errors import InvalidPathError
from ..domain.interfaces import IFileSystem
from ..domain.models import PathLike

logger = logging.getLogger(__name__)

class LocalFileSystem(IFileSystem):
    """
    IFileSystem backed by the host OS. File handles go through aiofiles,
    so every call suspends the calling task instead of blocking the loop.
    """

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or settings.FILE_ENCODING

    async def ensure_directory(self, path: PathLike) -> None:
        raw = os.fspath(path)
        if not raw:
            raise InvalidPathError("Empty path passed to ensure_directory")

        # "a/b/c.txt" -> "a/b", "a/b/c" -> "a/b/c"
        _, extension = os.path.splitext(raw)
        directory = raw if extension == "" else os.path.dirname(raw)

        # Bare file name: its directory is the cwd
        if not directory:
            return

        if await self.exists(directory):
            return

        logger.debug(f"Creating directory: {directory}")
        # exist_ok covers another actor creating it between the check and here
        await aiofiles.os.makedirs(directory, exist_ok=True)

    async def exists(self, path: PathLike) -> bool:
        try:
            return await aiofiles.os.path.exists(path)
        except (OSError, ValueError) as e:
            logger.debug(f"Existence check failed for {path}: {e}")
            return False

    async def write_text(self, path: PathLike, content: str) -> None:
        await self.ensure_directory(path)

        # newline="" writes the string verbatim, no \n -> os.linesep translation
        async with aiofiles.open(path, "w", encoding=self.encoding, newline="") as f:
            await f.write(content)

    async def read_text(self, path: PathLike) -> Optional[str]:
        try:
            if not await self.exists(path):
                return None

            async with aiofiles.open(path, "r", encoding=self.encoding, newline="") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {path}: {e}")
            return None

    async def copy(self, source: PathLike, destination: PathLike) -> None:
        await self.ensure_directory(destination)

        # aiofiles has no copy; run the blocking copy off the event loop
        await asyncio.to_thread(shutil.copyfile, source, destination)
