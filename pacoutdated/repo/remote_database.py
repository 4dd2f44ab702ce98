"""
Remote Database Module - Downloads repository databases and reads their desc records
"""

import gzip
import io
import logging
import tarfile
import zlib
from pathlib import PurePosixPath
from typing import Iterator, Tuple

import requests
from urllib3.exceptions import HTTPError as TransportError

from ..common.errors import DecodeFailedError, FetchFailedError, RecordMalformedError
from .desc_parser import parse_record
from .models import PackageMap, PackageRecord, RepositoryConfig
from .pacman_conf import database_url

logger = logging.getLogger(__name__)

DESC_MEMBER = 'desc'


class RemoteDatabase:
    """Fetches <repo>.db archives from repository mirrors"""

    def __init__(self, arch: str, timeout: int = 30):
        """
        Args:
            arch: Value substituted for $arch in server URLs
            timeout: Seconds allowed for each server attempt
        """
        self.arch = arch
        self.timeout = timeout

    def download(self, repo: RepositoryConfig) -> Tuple[bytes, str]:
        """
        Download the database of a repository from the first server that answers

        Servers are tried strictly in configuration order.

        Args:
            repo: Repository with its servers in priority order

        Returns:
            (archive bytes, URL that served them)

        Raises:
            FetchFailedError: every server failed
        """
        for server in repo.servers:
            url = database_url(server, repo.name, self.arch)
            logger.debug(f"Trying {url}")

            try:
                with requests.get(url, timeout=self.timeout, stream=True) as response:
                    response.raise_for_status()
                    # .db files are gzip archives; keep any Content-Encoding undone
                    content = response.raw.read(decode_content=False)
            except (requests.exceptions.RequestException, TransportError) as e:
                logger.warning(f"⚠️ {repo.name}: {url} failed: {e}")
                continue

            if not content:
                logger.warning(f"⚠️ {repo.name}: {url} returned an empty body")
                continue

            logger.info(f"✅ {repo.name}: downloaded {len(content)} bytes from {url}")
            return content, url

        raise FetchFailedError(
            f"unable to fetch database from any servers for repository '{repo.name}' "
            f"({len(repo.servers)} tried)"
        )

    def iter_records(self, data: bytes, repo_name: str) -> Iterator[PackageRecord]:
        """
        Stream package records out of a gzip-compressed database archive

        The archive is read in a single forward pass; the iterator cannot be
        restarted.

        Args:
            data: Archive bytes as downloaded
            repo_name: Repository stamped onto every record

        Yields:
            PackageRecord with origin_repo set to repo_name

        Raises:
            DecodeFailedError: the gzip stream or the archive is corrupt
            RecordMalformedError: a desc entry is not a complete record
        """
        try:
            with gzip.GzipFile(fileobj=io.BytesIO(data)) as stream, \
                    tarfile.open(fileobj=stream, mode='r|') as archive:
                for member in archive:
                    if not member.isfile() or PurePosixPath(member.name).name != DESC_MEMBER:
                        continue
                    yield self._read_member(archive, member, repo_name)
        except (tarfile.TarError, zlib.error, EOFError, OSError) as e:
            raise DecodeFailedError(f"corrupt database archive for '{repo_name}': {e}") from e

    @staticmethod
    def _read_member(archive: tarfile.TarFile, member: tarfile.TarInfo, repo_name: str) -> PackageRecord:
        extracted = archive.extractfile(member)
        if extracted is None:
            raise RecordMalformedError(f"{repo_name}: unable to read {member.name}")

        try:
            text = extracted.read().decode('utf-8')
        except UnicodeDecodeError as e:
            raise RecordMalformedError(f"{repo_name}: {member.name} is not valid UTF-8") from e

        record = parse_record(text)
        if record is None:
            raise RecordMalformedError(f"{repo_name}: {member.name} lacks %NAME% or %VERSION%")

        record.origin_repo = repo_name
        return record

    def fetch_packages(self, repo: RepositoryConfig) -> PackageMap:
        """
        Download a repository database and index its packages by name

        Args:
            repo: Repository to fetch

        Returns:
            Package name -> PackageRecord for this repository only
        """
        data, url = self.download(repo)

        packages: PackageMap = {}
        for record in self.iter_records(data, repo.name):
            packages[record.name] = record

        logger.info(f"{repo.name}: {len(packages)} packages read from {url}")
        return packages


def merge_packages(target: PackageMap, repo_packages: PackageMap) -> PackageMap:
    """Merge one repository's packages into the shared map; later repositories win"""
    target.update(repo_packages)
    return target
