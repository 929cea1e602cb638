import os

import pytest

# Disable rate limiting and token auth for tests
os.environ["TREE_SCAFFOLD_NO_RATE_LIMIT"] = "true"
os.environ.pop("TREE_SCAFFOLD_API_TOKEN", None)


SIMPLE_TREE = """project/
    file1.txt
    subdir/
        file2.py"""

BOX_TREE = """my-app/
├── src/
│   └── main.js
└── package.json"""


@pytest.fixture
def simple_tree() -> str:
    return SIMPLE_TREE


@pytest.fixture
def box_tree() -> str:
    return BOX_TREE
