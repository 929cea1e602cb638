import pytest

from treescaffold.services.tree_parser import EmptyInputError, parse_tree


def test_simple_indented_tree(simple_tree: str):
    result = parse_tree(simple_tree)
    assert result.root_dir == "project"
    assert result.has_root_wrapper is True
    assert "project/subdir" in result.directories
    assert "project/file1.txt" in result.files
    assert "project/subdir/file2.py" in result.files


def test_box_drawing_tree(box_tree: str):
    result = parse_tree(box_tree)
    assert result.root_dir == "my-app"
    assert result.has_root_wrapper is True
    assert "my-app/src" in result.directories
    assert "my-app/src/main.js" in result.files
    assert "my-app/package.json" in result.files


def test_structure_is_preorder(box_tree: str):
    result = parse_tree(box_tree)
    assert [n.full_path for n in result.structure] == [
        "my-app",
        "my-app/src",
        "my-app/src/main.js",
        "my-app/package.json",
    ]
    root = result.structure[0]
    assert root.name == "my-app/"
    assert root.level == 0
    assert root.is_file is False


def test_wrapper_directory_recorded():
    result = parse_tree("project/\n    a.txt")
    assert result.directories == ["project"]
    assert result.files == ["project/a.txt"]


def test_inline_content():
    result = parse_tree("crate/\n    main.rs [fn main() {}]")
    node = next(n for n in result.structure if n.is_file)
    assert node.name == "main.rs"
    assert node.content == "fn main() {}"
    assert node.full_path == "crate/main.rs"
    assert result.file_contents == {"crate/main.rs": "fn main() {}"}


def test_two_top_level_entries_not_wrapper():
    result = parse_tree("a/\nb.txt")
    assert result.has_root_wrapper is False
    assert result.root_dir == "a"
    assert result.directories == ["a"]
    assert result.files == ["b.txt"]


def test_second_top_level_directory_retracts_wrapper():
    text = "src/\n  main.py\ndocs/\n  index.md"
    result = parse_tree(text)
    assert result.has_root_wrapper is False
    assert result.directories == ["src", "docs"]
    assert result.files == ["src/main.py", "docs/index.md"]


def test_flat_file_list():
    result = parse_tree("README.md\nsetup.py")
    assert result.root_dir == "README.md"
    assert result.has_root_wrapper is False
    assert result.directories == []
    assert result.files == ["README.md", "setup.py"]


def test_first_entry_indented_is_not_wrapper():
    result = parse_tree("  lib/\n    util.py")
    assert result.has_root_wrapper is False
    assert result.root_dir == "lib"


def test_dedent_skips_levels():
    text = """root/
    a/
        b/
            deep.txt
    top.txt"""
    result = parse_tree(text)
    assert "root/a/b/deep.txt" in result.files
    assert "root/top.txt" in result.files


def test_over_indentation_attaches_to_deepest_directory():
    text = "root/\n    a/\n                lost.txt"
    result = parse_tree(text)
    assert result.files == ["root/a/lost.txt"]
    lost = result.structure[-1]
    assert lost.level == 4


def test_duplicates_collapse():
    text = "root/\n    a/\n    a/\n    x.txt\n    x.txt"
    result = parse_tree(text)
    assert result.directories == ["root", "root/a"]
    assert result.files == ["root/x.txt"]
    # the outline still lists every line
    assert len(result.structure) == 5


def test_file_and_directory_with_same_path_both_kept():
    text = "root/\n    data.v1\n    data.v1/"
    result = parse_tree(text)
    assert "root/data.v1" in result.files
    assert "root/data.v1" in result.directories


def test_comments_and_blank_lines_ignored():
    text = """
my-project/

    # This is a comment
    src/ # source folder
        main.js // entry point
"""
    result = parse_tree(text)
    assert "my-project/src" in result.directories
    assert "my-project/src/main.js" in result.files
    names = [n.name for n in result.structure]
    assert names == ["my-project/", "src/", "main.js"]


def test_only_comments_gives_empty_result():
    result = parse_tree("# nothing here\n   # still nothing\n")
    assert result.structure == []
    assert result.directories == []
    assert result.files == []
    assert result.root_dir == ""
    assert result.has_root_wrapper is False


@pytest.mark.parametrize("text", ["", "   \n\n", "\t\n"])
def test_empty_input_raises(text: str):
    with pytest.raises(EmptyInputError):
        parse_tree(text)


def test_empty_input_error_is_value_error():
    assert issubclass(EmptyInputError, ValueError)


def test_parse_is_deterministic(box_tree: str):
    assert parse_tree(box_tree) == parse_tree(box_tree)


def test_no_state_leaks_between_calls():
    parse_tree("root/\n  two_space.txt")
    # a fresh parse discovers its own indentation unit
    result = parse_tree("root/\n    a/\n        b.txt")
    assert result.files == ["root/a/b.txt"]


def test_paths_are_clean():
    text = """my-project/
├─ frontend/
│ ├─ src/
│ └─ package.json
├─ backend/
│ ├─ main.py
│ └─ handlers/
│   └─ sample.py
└─ README.md"""
    result = parse_tree(text)
    for path in result.directories + result.files:
        assert path
        assert not path.startswith("/")
        assert not path.endswith("/")
    assert result.directories == [
        "my-project",
        "my-project/frontend",
        "my-project/frontend/src",
        "my-project/backend",
        "my-project/backend/handlers",
    ]
    assert result.files == [
        "my-project/frontend/package.json",
        "my-project/backend/main.py",
        "my-project/backend/handlers/sample.py",
        "my-project/README.md",
    ]


def test_crlf_input():
    result = parse_tree("root/\r\n    a.txt\r\n")
    assert result.files == ["root/a.txt"]
