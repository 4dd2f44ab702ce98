"""
Pacman Conf Module - Reads repository sections and their servers from pacman.conf
"""

import logging
import platform
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..common.errors import ConfigMalformedError, ConfigMissingError
from .models import RepositoryConfig

logger = logging.getLogger(__name__)

OPTIONS_SECTION = 'options'
SERVER_KEYWORD = 'Server'
INCLUDE_KEYWORD = 'Include'


def host_arch() -> str:
    """Architecture of the running machine, as used for $arch"""
    return platform.machine()


def substitute_url_vars(url: str, repo: str, arch: str) -> str:
    """Replace $repo and $arch in a server URL template"""
    return url.replace('$repo', repo).replace('$arch', arch)


def database_url(server: str, repo: str, arch: str) -> str:
    """
    Build the URL of a repository database on one server

    Args:
        server: Server URL template from pacman.conf or a mirror list
        repo: Repository name
        arch: Value for $arch

    Returns:
        URL of <repo>.db on that server
    """
    base = substitute_url_vars(server, repo, arch).rstrip('/')
    return f"{base}/{repo}.db"


def _directive_value(keyword: str, line: str, path: Path, line_number: int) -> str:
    """Return the last whitespace-separated token of a Key = value or Key value line"""
    key, sep, value = line.partition('=')
    if sep and key.strip() == keyword:
        tokens = value.split()
    else:
        tokens = line.split()[1:]
    if not tokens:
        raise ConfigMalformedError(f"{path}:{line_number}: directive without a value: {line}")
    return tokens[-1]


def read_mirror_list(path) -> List[str]:
    """
    Read server URLs from a mirror list

    Only lines beginning with Server contribute; everything else, nested
    Include lines among them, is ignored.

    Args:
        path: Mirror list file

    Returns:
        Server URL templates in file order

    Raises:
        ConfigMissingError: the file does not exist or cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigMissingError(f"mirrorlist does not exist: {path}")

    try:
        content = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigMissingError(f"unable to read mirrorlist {path}: {e}") from e

    servers = []
    for line_number, raw_line in enumerate(content.splitlines(), 1):
        line = raw_line.strip()
        if line.startswith(SERVER_KEYWORD):
            servers.append(_directive_value(SERVER_KEYWORD, line, path, line_number))

    logger.debug(f"Read {len(servers)} servers from mirrorlist {path}")
    return servers


class ParserState(Enum):
    """Where the parser currently is in pacman.conf"""
    NO_SECTION = 'no_section'
    OPTIONS = 'options'
    REPOSITORY = 'repository'


class PacmanConfReader:
    """Parses pacman.conf into an ordered list of repositories"""

    def __init__(self, conf_path):
        self.conf_path = Path(conf_path)
        self._state = ParserState.NO_SECTION
        self._current: Optional[RepositoryConfig] = None
        self._repositories: List[RepositoryConfig] = []

    def read(self) -> List[RepositoryConfig]:
        """
        Read the configuration file

        Returns:
            RepositoryConfig list in declaration order

        Raises:
            ConfigMissingError: pacman.conf or an included mirror list is absent
            ConfigMalformedError: a section header or directive is unreadable
        """
        if not self.conf_path.is_file():
            raise ConfigMissingError(f"pacman configuration does not exist: {self.conf_path}")

        try:
            content = self.conf_path.read_text(encoding='utf-8')
        except OSError as e:
            raise ConfigMissingError(f"unable to read {self.conf_path}: {e}") from e

        logger.debug(f"Parsing repositories from {self.conf_path}")
        return self.parse(content)

    def parse(self, content: str) -> List[RepositoryConfig]:
        """Parse configuration text; Include targets are still read from disk"""
        self._state = ParserState.NO_SECTION
        self._current = None
        self._repositories = []

        for line_number, raw_line in enumerate(content.splitlines(), 1):
            line = raw_line.strip()
            if not line or line.startswith('#'):
                continue

            if line.startswith('['):
                self._open_section(line, line_number)
            elif line.startswith(SERVER_KEYWORD):
                self._add_servers([_directive_value(SERVER_KEYWORD, line, self.conf_path, line_number)], line)
            elif line.startswith(INCLUDE_KEYWORD):
                self._include(_directive_value(INCLUDE_KEYWORD, line, self.conf_path, line_number), line)

        self._finalize()
        logger.info(f"Found {len(self._repositories)} repositories in {self.conf_path}")
        return self._repositories

    def _open_section(self, line: str, line_number: int):
        """Finalize the open section and start the one named on this line"""
        end = line.find(']')
        name = line[1:end].strip() if end > 0 else ''
        if not name:
            raise ConfigMalformedError(
                f"{self.conf_path}:{line_number}: malformed section header: {line}"
            )

        self._finalize()

        if name == OPTIONS_SECTION:
            self._state = ParserState.OPTIONS
            self._current = None
        else:
            self._state = ParserState.REPOSITORY
            self._current = RepositoryConfig(name=name)

    def _add_servers(self, servers: List[str], line: str):
        if self._state is not ParserState.REPOSITORY:
            logger.debug(f"Ignoring '{line}' outside a repository section")
            return
        self._current.servers.extend(servers)

    def _include(self, mirror_list: str, line: str):
        if self._state is not ParserState.REPOSITORY:
            logger.debug(f"Ignoring '{line}' outside a repository section")
            return
        self._add_servers(read_mirror_list(mirror_list), line)

    def _finalize(self):
        """Append the open repository section, if any, exactly once"""
        if self._state is ParserState.REPOSITORY:
            logger.debug(f"Repository [{self._current.name}]: {len(self._current.servers)} servers")
            self._repositories.append(self._current)
        self._state = ParserState.NO_SECTION
        self._current = None


def read_repositories(conf_path) -> List[RepositoryConfig]:
    """Read the repositories configured in pacman.conf"""
    return PacmanConfReader(conf_path).read()
