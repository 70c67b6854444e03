from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Task:
    """One task file, parsed.

    ``file_path`` is the absolute path of the backing file and identifies the
    task within a load cycle.
    """

    title: str
    tags: str
    details: str
    file_path: str

    def copy(self) -> "Task":
        return replace(self)

    def to_file_content(self) -> str:
        lines = [self.title, self.tags, ""]
        content = "\n".join(lines) + "\n"
        return content + self.details
