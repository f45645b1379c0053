"""
File-system side of a generation run.

Writes are whole-buffer overwrites in place; there is no staging or
rollback, so an interrupted run can leave old and new artifacts mixed.
"""

from pathlib import Path

from ..logging_config import get_logger
from .core.generator import DirectoryCreationError

logger = get_logger(__name__)


class ArtifactWriter:
    """Creates package directories and writes rendered artifacts."""

    def __init__(self, package_dir: Path, encoding: str = "utf-8"):
        """
        Args:
            package_dir: Directory of the generated package; written paths
                are reported relative to it
            encoding: Encoding of written files
        """
        self.package_dir = Path(package_dir)
        self.encoding = encoding

    def prepare_directory(self, path: Path):
        """
        Create ``path`` (and parents) if absent.

        Raises:
            DirectoryCreationError: If the directory cannot be created
        """
        path = Path(path)
        if path.is_dir():
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(path, e.strerror or str(e)) from e
        logger.debug("Created directory %s", path)

    def write(self, path: Path, content: str) -> str:
        """
        Overwrite ``path`` with ``content``.

        Returns:
            The written path relative to the package directory, '/'-separated
        """
        path = Path(path)
        with open(path, "w", encoding=self.encoding, newline="\n") as f:
            f.write(content)

        try:
            relative = path.relative_to(self.package_dir).as_posix()
        except ValueError:
            relative = path.as_posix()

        logger.debug("Wrote %s (%d bytes)", relative, len(content))
        return relative
