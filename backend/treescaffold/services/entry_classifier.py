from __future__ import annotations

from treescaffold.services.tree_config import (
    EXTENSIONLESS_FILES,
    KNOWN_FILE_EXTENSIONS,
    MAX_EXTENSION_LENGTH,
    MIN_EXTENSION_LENGTH,
)


def is_file_entry(name: str) -> bool:
    """Guess whether a cleaned tree entry names a file or a directory.

    Heuristic only: a directory literally named ``v1.2`` is reported as a
    file, and an extensionless file not in the known list as a directory.
    """
    if name.endswith("/"):
        return False

    if name.lower() in EXTENSIONLESS_FILES:
        return True

    last_dot = name.rfind(".")
    if last_dot == -1:
        return False

    extension = name[last_dot:].lower()
    if extension in KNOWN_FILE_EXTENSIONS:
        return True
    # Leading-dot names (".prettierrc") are only files when listed above
    return last_dot > 0 and MIN_EXTENSION_LENGTH <= len(extension) <= MAX_EXTENSION_LENGTH
