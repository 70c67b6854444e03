from pathlib import Path
from typing import List

from core import StorageError, Task


class TaskFileParser:
    """Line-oriented task file format.

    line 1: title
    line 2: tags
    line 3: reserved, ignored
    line 4+: details
    """

    TITLE_LINE = 1
    TAGS_LINE = 2
    RESERVED_LINE = 3

    @classmethod
    def parse(cls, filepath: Path) -> Task:
        try:
            content = filepath.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise StorageError(f"Cannot read task file {filepath}: {exc}") from exc
        return cls.parse_text(content, str(filepath))

    @classmethod
    def parse_text(cls, content: str, file_path: str) -> Task:
        title = ""
        tags = ""
        details: List[str] = []

        *lines, tail = content.split("\n")
        for line_no, line in enumerate(lines, start=1):
            if line_no == cls.TITLE_LINE:
                title = line
            elif line_no == cls.TAGS_LINE:
                tags = line
            elif line_no > cls.RESERVED_LINE:
                details.append(line + "\n")

        # Last line without a trailing newline still counts.
        if tail:
            line_no = len(lines) + 1
            if line_no == cls.TITLE_LINE:
                title = tail
            elif line_no == cls.TAGS_LINE:
                tags = tail
            elif line_no > cls.RESERVED_LINE:
                details.append(tail)

        return Task(title=title, tags=tags, details="".join(details), file_path=file_path)

    @staticmethod
    def to_file_content(task: Task) -> str:
        return task.to_file_content()


__all__ = ["TaskFileParser"]
