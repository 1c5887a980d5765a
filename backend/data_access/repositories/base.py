"""
Base repository with file transaction management.

Provides a context manager for writes that handles:
- Writing to a temporary file beside the target
- Atomic replace of the target on success
- Removing the temporary file on failure
"""

import os
import tempfile
from contextlib import contextmanager
from typing import IO, Generator


class BaseRepository:
    """
    Base class for file-backed repositories.

    Subclasses should use self.writer() for anything that replaces the
    stored file, so a crash mid-write never leaves a half-written file.
    """

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return os.path.exists(self.path)

    @contextmanager
    def writer(self) -> Generator[IO[str], None, None]:
        """
        Context manager for replacing the stored file.

        Automatically handles:
        - Creating the parent directory
        - Committing (atomic rename over the target) on successful exit
        - Rolling back (deleting the temporary file) on exception

        Yields:
            A text file handle to write the new contents to.

        Example:
            with self.writer() as f:
                json.dump(data, f)
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.tmp-', suffix='.json')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                yield f
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    @contextmanager
    def reader(self) -> Generator[IO[str], None, None]:
        """
        Context manager for reading the stored file.

        Yields:
            A text file handle positioned at the start of the file.
        """
        with open(self.path, 'r', encoding='utf-8') as f:
            yield f
