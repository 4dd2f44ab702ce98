"""
Local Database Module - Inventory of installed packages
"""

import logging
from pathlib import Path

from ..common.errors import ConfigMissingError
from .desc_parser import parse_record
from .models import PackageMap

logger = logging.getLogger(__name__)


class LocalDatabase:
    """Reads installed packages from the pacman local database directory"""

    def __init__(self, db_dir):
        """
        Args:
            db_dir: Local database directory, one subdirectory per package
        """
        self.db_dir = Path(db_dir)

    def get_packages(self) -> PackageMap:
        """
        Collect every installed package that has a readable desc file.

        Unreadable or incomplete records are skipped so that one damaged
        entry does not hide the rest of the system.

        Returns:
            Package name -> PackageRecord

        Raises:
            ConfigMissingError: the database directory itself does not exist
        """
        if not self.db_dir.is_dir():
            raise ConfigMissingError(f"local package database does not exist: {self.db_dir}")

        packages: PackageMap = {}
        skipped = 0

        for entry in sorted(self.db_dir.iterdir()):
            desc_path = entry / 'desc'
            try:
                if not desc_path.is_file():
                    continue
                record = parse_record(desc_path.read_text(encoding='utf-8'))
            except (OSError, UnicodeDecodeError) as e:
                logger.debug(f"Skipping unreadable {desc_path}: {e}")
                skipped += 1
                continue

            if record is None:
                logger.debug(f"Skipping incomplete record {desc_path}")
                skipped += 1
                continue

            packages[record.name] = record

        if skipped:
            logger.warning(f"⚠️ Skipped {skipped} unreadable local package records")
        logger.info(f"Found {len(packages)} installed packages in {self.db_dir}")
        return packages
