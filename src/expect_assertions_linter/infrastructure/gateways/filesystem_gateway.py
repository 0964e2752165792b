"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import shutil
from pathlib import Path

from expect_assertions_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def discover(
        self,
        paths: list[str],
        include: tuple[str, ...],
        exclude: tuple[str, ...],
    ) -> list[str]:
        """Explicit files are always kept; directories are globbed with ``include``."""
        found: set[str] = set()
        for raw in paths:
            path_obj = Path(raw)
            if path_obj.is_file():
                found.add(str(path_obj))
                continue
            if not path_obj.is_dir():
                continue
            for pattern in include:
                for match in path_obj.glob(pattern):
                    if match.is_file() and not self._is_excluded(match, exclude):
                        found.add(str(match))
        return sorted(found)

    @staticmethod
    def _is_excluded(path: Path, exclude: tuple[str, ...]) -> bool:
        return any(fragment in path.parts for fragment in exclude)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def backup(self, path: str) -> str:
        """Copy a file to ``<path>.bak``; return the backup path."""
        backup_path = f"{path}.bak"
        shutil.copy2(path, backup_path)
        return backup_path
