"""
Filesystem artifact host.

Used by the CLI: a "download" is an atomic write into an output directory.
"""

import os
import tempfile
from pathlib import Path

from src.observability.logger import get_logger
from src.utils.validation import validate_artifact_name

logger = get_logger(__name__)


class DirectoryArtifactHost:
    """
    Materializes artifacts as files in ``output_dir``.

    Content is first written to a hidden temp file in the same directory;
    ``trigger_download`` renames it into place, so readers never observe a
    partially written file. ``release_artifact`` removes the temp file if it
    is still there.
    """

    def __init__(self, output_dir: str | Path, overwrite: bool = True):
        self.output_dir = Path(output_dir)
        self.overwrite = overwrite
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def create_artifact(self, content: bytes, mime_type: str) -> Path:
        fd, temp_name = tempfile.mkstemp(prefix=".artifact-", suffix=".part", dir=self.output_dir)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

        logger.debug(
            "Created artifact",
            extra={"temp_path": temp_name, "mime_type": mime_type, "size_bytes": len(content)},
        )
        return Path(temp_name)

    def trigger_download(self, handle: Path, filename: str) -> None:
        """
        Raises:
            ArtifactNameError: If filename is not a plain file name
            FileExistsError: If the target exists and overwrite is disabled
        """
        filename = validate_artifact_name(filename)
        target = self.output_dir / filename
        if target.exists() and not self.overwrite:
            raise FileExistsError(f"Export target already exists: {target}")

        os.replace(handle, target)
        logger.info("Wrote export", extra={"path": str(target)})

    def release_artifact(self, handle: Path) -> None:
        Path(handle).unlink(missing_ok=True)
