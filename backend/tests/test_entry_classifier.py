import pytest

from treescaffold.services.entry_classifier import is_file_entry


def test_known_extension():
    assert is_file_entry("x.py") is True


def test_trailing_slash_is_directory():
    assert is_file_entry("dir/") is False
    assert is_file_entry("assets.v2/") is False


@pytest.mark.parametrize("name", ["Dockerfile", "Makefile", "README", "LICENSE", ".env", ".gitignore", ".dockerignore"])
def test_extensionless_files(name: str):
    assert is_file_entry(name) is True


def test_no_dot_is_directory():
    assert is_file_entry("no-extension") is False
    assert is_file_entry("src") is False


def test_version_like_name_counts_as_file():
    # Known limitation of the heuristic
    assert is_file_entry("v1.2") is True


def test_unknown_short_extension_is_file():
    assert is_file_entry("favicon.ico") is True
    assert is_file_entry("Cargo.toml") is True


def test_long_extension_is_directory():
    assert is_file_entry("com.example.application") is False


def test_extension_case_insensitive():
    assert is_file_entry("MAIN.PY") is True


def test_leading_dot_unknown_is_directory():
    assert is_file_entry(".prettierrc") is False
    assert is_file_entry(".github") is False
