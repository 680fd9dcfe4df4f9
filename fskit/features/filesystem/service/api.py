import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

from fskit.core.config.settings import settings
from ..domain.models import PathLike, ScanRequest
from ..data.local_fs import LocalFileSystem
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)

class FileSystemService:
    """
    Facade for the Filesystem Feature.

    Two error policies:
    - exists / read_text_file / read_json_file never raise; failure is False or None.
    - everything that writes, copies or scans lets the OS error reach the caller.
    """
    def __init__(self):
        self.fs = LocalFileSystem()
        self.walker = LocalFileWalker()

    async def ensure_directory(self, path: PathLike) -> None:
        await self.fs.ensure_directory(path)

    async def path_exists(self, path: PathLike) -> bool:
        return await self.fs.exists(path)

    async def write_text_file(self, path: PathLike, content: str) -> None:
        try:
            await self.fs.write_text(path, content)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise

    async def read_text_file(self, path: PathLike) -> Optional[str]:
        return await self.fs.read_text(path)

    async def read_json_file(self, path: PathLike) -> Optional[Any]:
        """
        Parses the file as JSON. The shape is whatever the file holds;
        nothing is validated against what the caller expects.
        """
        text = await self.fs.read_text(path)
        if not text:
            return None

        try:
            return json.loads(text)
        except (ValueError, RecursionError) as e:
            # RecursionError: nesting deeper than the decoder can follow
            logger.debug(f"Invalid JSON in {path}: {e}")
            return None

    async def write_json_file(self, path: PathLike, data: Any, indent: Optional[int] = None) -> None:
        if indent is None:
            indent = settings.JSON_INDENT
        content = json.dumps(data, ensure_ascii=False, indent=indent)
        await self.write_text_file(path, content)

    async def copy_file(self, source: PathLike, destination: PathLike) -> None:
        try:
            await self.fs.copy(source, destination)
        except OSError as e:
            logger.error(f"Failed to copy {source} -> {destination}: {e}")
            raise

    async def scan_files_by_extension(self, root: PathLike, extensions: Iterable[str]) -> List[Path]:
        """
        Collects every file under root whose suffix is in extensions.
        Order is discovery order and not stable across siblings; sort before comparing.
        """
        request = ScanRequest.create(root, extensions)
        logger.info(f"Starting scan of: {request.root_path}")

        try:
            matches = await self.walker.collect(request)
        except OSError as e:
            logger.error(f"Scan of {request.root_path} failed: {e}")
            raise

        logger.info(f"Scan complete. Matched: {len(matches)}")
        return matches


# Singleton Instance for easy import
filesystem = FileSystemService()


async def ensure_directory(path: PathLike) -> None:
    await filesystem.ensure_directory(path)


async def path_exists(path: PathLike) -> bool:
    return await filesystem.path_exists(path)


async def write_text_file(path: PathLike, content: str) -> None:
    await filesystem.write_text_file(path, content)


async def read_text_file(path: PathLike) -> Optional[str]:
    return await filesystem.read_text_file(path)


async def read_json_file(path: PathLike) -> Optional[Any]:
    return await filesystem.read_json_file(path)


async def write_json_file(path: PathLike, data: Any, indent: Optional[int] = None) -> None:
    await filesystem.write_json_file(path, data, indent)


async def copy_file(source: PathLike, destination: PathLike) -> None:
    await filesystem.copy_file(source, destination)


async def scan_files_by_extension(root: PathLike, extensions: Iterable[str]) -> List[Path]:
    return await filesystem.scan_files_by_extension(root, extensions)
