"""
Tests for pacman.conf and mirror list parsing.
"""

import pytest

from pacoutdated.common.errors import ConfigMalformedError, ConfigMissingError
from pacoutdated.repo.models import RepositoryConfig
from pacoutdated.repo.pacman_conf import (
    PacmanConfReader,
    database_url,
    read_mirror_list,
    read_repositories,
    substitute_url_vars,
)

MIRROR_A = "https://mirror-a.example.org/archlinux/$repo/os/$arch"
MIRROR_B = "https://mirror-b.example.org/archlinux/$repo/os/$arch"


class TestUrlTemplates:
    """Tests for server URL substitution."""

    def test_substitute_url_vars(self):
        url = substitute_url_vars(MIRROR_A, "core", "x86_64")
        assert url == "https://mirror-a.example.org/archlinux/core/os/x86_64"

    def test_database_url(self):
        url = database_url(MIRROR_A, "extra", "aarch64")
        assert url == "https://mirror-a.example.org/archlinux/extra/os/aarch64/extra.db"

    def test_database_url_trailing_slash(self):
        assert database_url("https://m.example.org/", "core", "x86_64") == "https://m.example.org/core.db"


class TestReadMirrorList:
    """Tests for read_mirror_list."""

    def test_only_server_lines(self, sample_mirrorlist):
        """Test comments and disabled servers are ignored, order is kept."""
        assert read_mirror_list(sample_mirrorlist) == [MIRROR_A, MIRROR_B]

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigMissingError, match="mirrorlist does not exist"):
            read_mirror_list(temp_dir / "absent")

    def test_nested_include_not_expanded(self, write_file):
        path = write_file("nested", "Include = /etc/pacman.d/other\nServer = https://x.example.org\n")
        assert read_mirror_list(path) == ["https://x.example.org"]

    def test_server_without_spaces(self, write_file):
        path = write_file("compact", "Server=https://compact.example.org/$repo\n")
        assert read_mirror_list(path) == ["https://compact.example.org/$repo"]


    @pytest.mark.parametrize("line", [
        "Server https://q.example.org/$repo?arch=$arch",
        "Server = https://q.example.org/$repo?arch=$arch",
        "Server=https://q.example.org/$repo?arch=$arch",
    ])
    def test_query_string_in_url(self, write_file, line):
        """Test an = inside the URL does not split the directive."""
        path = write_file("query", line + "\n")
        assert read_mirror_list(path) == ["https://q.example.org/$repo?arch=$arch"]


class TestPacmanConfReader:
    """Tests for PacmanConfReader."""

    def test_sample_configuration(self, sample_pacman_conf):
        """Test sections, includes and the options section together."""
        repos = read_repositories(sample_pacman_conf)
        assert repos == [
            RepositoryConfig("core", ["https://primary.example.org/$repo/os/$arch", MIRROR_A, MIRROR_B]),
            RepositoryConfig("extra", [MIRROR_A, MIRROR_B]),
            RepositoryConfig("custom", ["file:///home/custompkgs"]),
        ]

    def test_missing_configuration(self, temp_dir):
        with pytest.raises(ConfigMissingError):
            read_repositories(temp_dir / "pacman.conf")

    def test_sections_in_declaration_order(self, temp_dir):
        names = ["zeta", "alpha", "mid", "beta"]
        text = "".join(f"[{name}]\nServer = https://{name}.example.org\n" for name in names)
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse(text)
        assert [repo.name for repo in repos] == names
        assert [repo.servers for repo in repos] == [[f"https://{name}.example.org"] for name in names]

    def test_last_section_finalized_once(self, temp_dir):
        """Test the final section is kept without a following header, and only once."""
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse("[core]\n[extra]")
        assert repos == [RepositoryConfig("core", []), RepositoryConfig("extra", [])]

    def test_options_only(self, temp_dir):
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse("[options]\nServer = https://x\n")
        assert repos == []

    def test_options_content_excluded_from_neighbours(self, temp_dir):
        text = (
            "[core]\nServer = https://core.example.org\n"
            "[options]\nServer = https://options.example.org\n"
            "[extra]\nServer = https://extra.example.org\n"
        )
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse(text)
        assert repos == [
            RepositoryConfig("core", ["https://core.example.org"]),
            RepositoryConfig("extra", ["https://extra.example.org"]),
        ]

    def test_include_appends_after_servers(self, temp_dir, sample_mirrorlist):
        text = f"[core]\nServer = https://first.example.org\nInclude = {sample_mirrorlist}\n"
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse(text)
        assert repos[0].servers == ["https://first.example.org", MIRROR_A, MIRROR_B]

    def test_include_of_missing_mirrorlist(self, temp_dir):
        text = f"[core]\nInclude = {temp_dir / 'missing'}\n"
        with pytest.raises(ConfigMissingError, match="mirrorlist does not exist"):
            PacmanConfReader(temp_dir / "pacman.conf").parse(text)

    def test_commented_and_indented_lines(self, temp_dir):
        text = "[core]\n#Server = https://off.example.org\n    Server = https://on.example.org\n"
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse(text)
        assert repos[0].servers == ["https://on.example.org"]

    def test_servers_before_any_section_ignored(self, temp_dir):
        text = "Server = https://stray.example.org\n[core]\n"
        repos = PacmanConfReader(temp_dir / "pacman.conf").parse(text)
        assert repos == [RepositoryConfig("core", [])]

    @pytest.mark.parametrize("header", ["[core", "[]", "[ ]"])
    def test_malformed_section_header(self, temp_dir, header):
        with pytest.raises(ConfigMalformedError, match=":2:"):
            PacmanConfReader(temp_dir / "pacman.conf").parse(f"[options]\n{header}\n")

    def test_server_without_value(self, temp_dir):
        with pytest.raises(ConfigMalformedError):
            PacmanConfReader(temp_dir / "pacman.conf").parse("[core]\nServer =\n")

    def test_reader_is_reusable(self, sample_pacman_conf):
        reader = PacmanConfReader(sample_pacman_conf)
        assert reader.read() == reader.read()
