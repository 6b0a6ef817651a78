"""
Local disk repository for uploaded invoice files.
"""
import logging
from pathlib import Path
from src.core import config
from src.core.exceptions import StorageException
from src.repositories.file_storage import FileStorage

logger = logging.getLogger(__name__)


class LocalFileRepository(FileStorage):
    """Writes uploads into a directory on the local filesystem."""
    
    def __init__(self, upload_dir: str = None):
        self.upload_dir = Path(upload_dir or config.settings.upload_dir)
    
    def save(self, content: bytes, filename: str) -> str:
        """
        Write file content to the upload directory.
        
        Raises:
            StorageException: If the directory or file cannot be written
        """
        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            # Only the final path component of the client-supplied name is kept
            target = self.upload_dir / self.unique_name(Path(filename).name)
            target.write_bytes(content)
            logger.debug("Stored %d bytes at %s", len(content), target)
            return str(target)
        except OSError as e:
            raise StorageException(f"Failed to write file to disk: {str(e)}") from e
