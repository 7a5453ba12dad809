"""Tests for the builder functions and configuration."""

import stat
from datetime import datetime, timedelta, timezone

import pytest

from fakefs import (
    DEFAULT_CONFIG,
    ConfigurationError,
    Directory,
    FakeFSError,
    File,
    FileSystem,
    FileSystemConfig,
    InvalidOptionError,
    ModeConfig,
    make_dir,
    make_file,
    make_filesystem,
)
from fakefs.testing import names, read_all


class TestMakeFile:

    def test_text_is_utf8(self):
        leaf = make_file("greeting", "héllo")
        assert leaf.content == "héllo".encode("utf-8")

    def test_bytes(self):
        leaf = make_file("blob", b"\x00\x01\xff")
        assert read_all(leaf) == b"\x00\x01\xff"

    def test_bytearray(self):
        assert make_file("blob", bytearray(b"abc")).content == b"abc"

    def test_returns_file(self):
        assert isinstance(make_file("x", ""), File)

    def test_datetime_option(self, modified):
        assert make_file("x", "", modified).mod_time() == modified

    def test_last_datetime_wins(self, modified):
        later = modified + timedelta(days=1)
        assert make_file("x", "", modified, later).mod_time() == later

    @pytest.mark.parametrize("option", [42, "2014-01-01", None, 1.5])
    def test_unknown_option_is_fatal(self, option):
        with pytest.raises(InvalidOptionError) as excinfo:
            make_file("x", "", option)

        error = excinfo.value
        assert isinstance(error, TypeError)
        assert not isinstance(error, FakeFSError)
        assert error.option == option


class TestMakeDir:

    def test_returns_directory(self):
        assert isinstance(make_dir("d"), Directory)

    def test_children_in_order(self):
        directory = make_dir("d", make_file("b", ""), make_file("a", ""))
        assert names(directory.readdir(0).entries) == ["b", "a"]

    def test_nodes_of_any_kind(self):
        inner = make_dir("inner")
        directory = make_dir("d", inner, make_file("f", ""))
        assert directory.open("inner") is inner


class TestMakeFilesystem:

    def test_root_is_unnamed(self):
        root = make_filesystem()
        assert isinstance(root, FileSystem)
        assert root.name() == ""
        assert root.is_dir()

    def test_default_config(self):
        assert make_filesystem().config is DEFAULT_CONFIG

    def test_invalid_config_is_rejected(self):
        config = FileSystemConfig(resolution_cache_size=-1)
        with pytest.raises(ConfigurationError) as excinfo:
            make_filesystem(config=config)

        error = excinfo.value
        assert isinstance(error, ValueError)
        assert error.problems == ["resolution_cache_size cannot be negative"]

    def test_custom_separator(self):
        config = FileSystemConfig(separator=":")
        root = make_filesystem(
            make_dir("a", make_file("b", "B", config=config), config=config),
            config=config,
        )
        assert read_all(root.open("a:b")) == b"B"
        assert root.open(":a:b") is root.open("a:b")

    def test_custom_modes(self):
        config = FileSystemConfig(modes=ModeConfig(file_mode=0o600))
        root = make_filesystem(make_file("f", "", config=config), config=config)
        assert root.open("f").mode() == 0o600
        assert root.mode() == 0o755 | stat.S_IFDIR


class TestConfigValidation:

    def test_defaults_are_valid(self):
        assert FileSystemConfig().validate() == []

    def test_uncached(self):
        config = FileSystemConfig.uncached()
        assert config.resolution_cache_size == 0
        assert config.validate() == []

    @pytest.mark.parametrize("separator", ["", "//", "."])
    def test_bad_separator(self, separator):
        assert FileSystemConfig(separator=separator).validate()

    def test_dir_mode_needs_directory_bit(self):
        config = FileSystemConfig(modes=ModeConfig(dir_mode=0o755))
        assert config.validate() == ["dir_mode must carry the directory bit"]

    def test_file_mode_cannot_be_directory(self):
        config = FileSystemConfig(modes=ModeConfig(file_mode=0o644 | stat.S_IFDIR))
        assert config.validate() == ["file_mode cannot carry the directory bit"]

    def test_multiple_problems(self):
        config = FileSystemConfig(resolution_cache_size=-5, separator="")
        assert len(config.validate()) == 2


def test_original_example_tree():
    """Build the tree from the package docstring and walk it."""
    now = datetime.now(timezone.utc)
    fs = make_filesystem(
        make_file("robots.txt", "User-agent: *\nDisallow: /"),
        make_dir("misc",
            make_file("hello.txt", "Hello", now),
        ),
    )

    assert read_all(fs.open("/robots.txt")).startswith(b"User-agent")
    hello = fs.open("/misc/hello.txt")
    assert hello.mod_time() == now
    assert read_all(hello) == b"Hello"
