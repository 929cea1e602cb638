import pytest

from treescaffold.services.templates import TEMPLATES, get_template, list_templates
from treescaffold.services.tree_parser import parse_tree


def test_list_templates():
    assert list_templates() == ["tauri", "nextjs", "fastapi", "python_pkg", "vite_vanilla"]


def test_unknown_template():
    with pytest.raises(KeyError):
        get_template("cobol")


@pytest.mark.parametrize("key", list(TEMPLATES))
def test_templates_parse_with_single_root(key: str):
    result = parse_tree(get_template(key))
    assert result.has_root_wrapper is True
    assert result.files


def test_tauri_template_paths():
    result = parse_tree(get_template("tauri"))
    assert "my-tauri-app/frontend/public" in result.directories
    assert "my-tauri-app/frontend/src/App.tsx" in result.files
    assert "my-tauri-app/src-tauri/Cargo.toml" in result.files
    assert result.file_contents["my-tauri-app/src/main.rs"] == 'fn main() { println!("Hello from Rust!"); }'


def test_nextjs_template_paths():
    result = parse_tree(get_template("nextjs"))
    assert "my-next-app/app/api/hello" in result.directories
    assert "my-next-app/app/api/hello/route.ts" in result.files
    assert "my-next-app/components/Header.tsx" in result.files
    assert "my-next-app/README.md" in result.files


def test_fastapi_template_paths():
    result = parse_tree(get_template("fastapi"))
    assert "my-api/app/api/router.py" in result.files
    assert "my-api/app/core/config.py" in result.files
    assert "my-api/app/schemas" in result.directories
    assert "my-api/.env" in result.files
    assert "my-api/Dockerfile" in result.files
    assert result.file_contents["my-api/app/main.py"].startswith("from fastapi import FastAPI")
