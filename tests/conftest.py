"""
Pytest configuration and fixtures for pacoutdated tests.
"""

import io
import tarfile
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import MagicMock

import pytest
import requests


def desc_text(name, version, extra_fields=True):
    """Build desc record text the way pacman writes it."""
    lines = ["%NAME%", name, "", "%VERSION%", version, ""]
    if extra_fields:
        lines = ["%FILENAME%", f"{name}-{version}-x86_64.pkg.tar.zst", ""] + lines
        lines += ["%DESC%", f"The {name} package", "", "%ARCH%", "x86_64", ""]
    return "\n".join(lines)


def build_db_archive(packages, include_files_member=True):
    """Build a gzip-compressed repository database from (name, version) pairs."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name, version in packages:
            directory = tarfile.TarInfo(f"{name}-{version}")
            directory.type = tarfile.DIRTYPE
            tar.addfile(directory)

            data = desc_text(name, version).encode("utf-8")
            member = tarfile.TarInfo(f"{name}-{version}/desc")
            member.size = len(data)
            tar.addfile(member, io.BytesIO(data))

            if include_files_member:
                files = b"%FILES%\nusr/\n"
                member = tarfile.TarInfo(f"{name}-{version}/files")
                member.size = len(files)
                tar.addfile(member, io.BytesIO(files))
    return buffer.getvalue()


def mock_response(content=b"", status_code=200):
    """A requests.Response stand-in usable as a context manager."""
    response = MagicMock()
    response.content = content
    response.raw.read.return_value = content
    response.status_code = status_code
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error"
        )
    return response


def url_router(routes):
    """side_effect for requests.get answering from a url -> response/exception map."""
    def _get(url, timeout=None, stream=False):
        outcome = routes.get(url)
        if outcome is None:
            raise requests.exceptions.ConnectionError(f"no route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
    return _get


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def local_db(temp_dir):
    """Return a function populating a fake local package database."""
    db_dir = temp_dir / "local"
    db_dir.mkdir()

    def _add(name, version):
        package_dir = db_dir / f"{name}-{version}"
        package_dir.mkdir()
        (package_dir / "desc").write_text(desc_text(name, version), encoding="utf-8")
        return package_dir

    _add.path = db_dir
    return _add


@pytest.fixture
def write_file(temp_dir):
    """Return a function writing text files below the temporary directory."""
    def _write(relative, content):
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_mirrorlist(write_file):
    """Mirror list with two servers, a comment and a disabled server."""
    return write_file(
        "pacman.d/mirrorlist",
        "## Arch Linux repository mirrorlist\n"
        "## Generated on 2024-01-15\n"
        "\n"
        "Server = https://mirror-a.example.org/archlinux/$repo/os/$arch\n"
        "#Server = https://disabled.example.org/archlinux/$repo/os/$arch\n"
        "Server = https://mirror-b.example.org/archlinux/$repo/os/$arch\n",
    )


@pytest.fixture
def sample_pacman_conf(write_file, sample_mirrorlist):
    """A pacman.conf with an options section and three repositories."""
    return write_file(
        "pacman.conf",
        "#\n"
        "# /etc/pacman.conf\n"
        "#\n"
        "[options]\n"
        "HoldPkg     = pacman glibc\n"
        "Architecture = auto\n"
        "Server = https://options.example.org/should-not-appear\n"
        "\n"
        "[core]\n"
        "Server = https://primary.example.org/$repo/os/$arch\n"
        f"Include = {sample_mirrorlist}\n"
        "\n"
        "[extra]\n"
        f"Include = {sample_mirrorlist}\n"
        "\n"
        "[custom]\n"
        "SigLevel = Optional TrustAll\n"
        "Server = file:///home/custompkgs\n",
    )
