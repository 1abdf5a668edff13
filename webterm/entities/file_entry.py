"""
File entry domain entity backing the simulated home directory.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """
    Simulated file system entry (file or directory).

    Sizes and modification dates are pre-formatted strings; nothing here touches
    the real file system.
    """

    name: str
    is_dir: bool
    size: str
    modified: str
    hidden: bool = False

    @property
    def permissions(self) -> str:
        """Permission string shown by the long listing."""
        return "drwxr-xr-x" if self.is_dir else "-rw-r--r--"

    def long_line(self, owner: str, human_readable: bool = False) -> str:
        """
        Render the entry as one ``ls -l`` line.

        Args:
            owner: User shown as both owner and group
            human_readable: Keep the size string as is instead of padding it

        Returns:
            The formatted line
        """
        size = self.size if human_readable else self.size.rjust(6)
        return f"{self.permissions} 1 {owner} {owner} {size} {self.modified} {self.name}"


HOME_FIXTURE: tuple[FileEntry, ...] = (
    FileEntry("documenti", True, "4.0K", "Dec 10 14:30"),
    FileEntry("downloads", True, "8.0K", "Dec 9 10:15"),
    FileEntry("musica", True, "4.0K", "Dec 8 16:45"),
    FileEntry("immagini", True, "12K", "Dec 11 09:20"),
    FileEntry(".config", True, "4.0K", "Dec 5 11:30", hidden=True),
    FileEntry("file1.txt", False, "1.2K", "Dec 10 14:30"),
    FileEntry("file2.pdf", False, "2.4M", "Dec 9 10:15"),
    FileEntry("foto.jpg", False, "4.8M", "Dec 8 16:45"),
    FileEntry(".log", False, "4.8K", "Dec 7 08:20", hidden=True),
)

# Targets accepted by cd besides absolute paths
KNOWN_DIRECTORIES: frozenset[str] = frozenset(
    {"~", "documenti", "downloads", "musica", "immagini", ".."}
)
