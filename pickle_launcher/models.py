"""Data models for the pickle launcher."""

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List


@dataclass
class ConfigEntry:
    """A single key=value line from the pickle config."""
    key: str
    value: str
    line_number: int = 0


@dataclass
class Playlist:
    """Ordered video files handed to the player."""
    paths: List[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __getitem__(self, index: int) -> Path:
        return self.paths[index]


@dataclass
class LaunchCommand:
    """Player invocation: executable, flags, then the playlist."""
    executable: Path
    flags: List[str]
    playlist: Playlist

    @property
    def argv(self) -> List[str]:
        return [str(self.executable), *self.flags, *(str(p) for p in self.playlist)]

    def quoted(self) -> str:
        """Render the command with every argument shell-quoted."""
        return ''.join(f'  {shlex.quote(arg)}' for arg in self.argv)
