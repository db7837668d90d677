"""
Copies user-selected files into the vault directory.
"""

import os
import time
import logging
from typing import BinaryIO, Tuple

from .exceptions import SourceUnreadableError, StorageWriteError
from .utils import set_owner_only_permissions
from . import config

logger = logging.getLogger(__name__)


class AttachmentImporter:
    """Imports photo and document files for file-backed items."""

    def __init__(self, storage_dir: str):
        """
        Args:
            storage_dir: Directory that receives the copies
        """
        self.storage_dir = storage_dir

    def import_file(self, source_path: str, suggested_name: str = "") -> str:
        """
        Copy source_path into the storage directory.

        The copy is named "{millis}_{name}" so importing two files with the
        same name never collides; an existing name moves millis forward.

        Args:
            source_path: File picked by the user
            suggested_name: Display name of the picked file

        Returns:
            Absolute path of the copy

        Raises:
            SourceUnreadableError: if the source cannot be opened or read
            StorageWriteError: if the copy cannot be completed
        """
        name = os.path.basename(suggested_name or "") or os.path.basename(source_path)

        try:
            src = open(source_path, 'rb')
        except OSError as e:
            logger.warning(f"Cannot open attachment source {source_path}: {e}")
            raise SourceUnreadableError(f"Cannot read {source_path}: {e}", path=source_path) from e

        with src:
            try:
                os.makedirs(self.storage_dir, exist_ok=True)
                dst, target = self._create_target(name)
            except OSError as e:
                logger.error(f"Cannot create attachment in {self.storage_dir}: {e}", exc_info=True)
                raise StorageWriteError(f"Could not store attachment: {e}", path=self.storage_dir) from e

            try:
                with dst:
                    self._copy(src, dst, source_path)
                if not set_owner_only_permissions(target):
                    logger.warning(f"Failed to set secure file permissions for attachment: {target}")
            except SourceUnreadableError:
                self._discard(target)
                raise
            except OSError as e:
                logger.error(f"Error copying {source_path} to {target}: {e}", exc_info=True)
                self._discard(target)
                raise StorageWriteError(f"Could not store attachment: {e}", path=target) from e

        logger.info(f"Imported attachment {name}")
        return target

    def _create_target(self, name: str) -> Tuple[BinaryIO, str]:
        """Open a new "{millis}_{name}" file, never an existing one."""
        millis = time.time_ns() // 1_000_000
        while True:
            target = os.path.abspath(os.path.join(self.storage_dir, f"{millis}_{name}"))
            try:
                return open(target, 'xb'), target
            except FileExistsError:
                millis += 1

    def _copy(self, src: BinaryIO, dst: BinaryIO, source_path: str) -> None:
        while True:
            try:
                chunk = src.read(config.COPY_CHUNK_SIZE)
            except OSError as e:
                logger.warning(f"Error reading attachment source {source_path}: {e}")
                raise SourceUnreadableError(f"Cannot read {source_path}: {e}", path=source_path) from e
            if not chunk:
                return
            dst.write(chunk)

    def _discard(self, target: str) -> None:
        """Remove a partial copy; a failure here must not hide the original error."""
        try:
            if os.path.exists(target):
                os.remove(target)
        except OSError as e:
            logger.warning(f"Could not remove partial attachment {target}: {e}")
