"""
Source position bookkeeping.

A FileSet assigns every source file of one load a contiguous range of integer
positions. A node stores a single integer ``pos``; the FileSet maps it back to
the file, line and column it came from. Position 0 means "no position".

Each load creates its own FileSet, so positions are only meaningful together
with the FileSet of the tree that produced them.
"""

from bisect import bisect_right

from attrs import frozen

NO_POS = 0


@frozen
class Position:
    """Human-readable location of a node: filename plus 1-based line and column."""

    filename: str
    offset: int
    line: int
    column: int

    @property
    def is_valid(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        if not self.is_valid:
            return self.filename or "-"
        return f"{self.filename}:{self.line}:{self.column}"


class SourceFile:
    """A file registered in a FileSet, with its line table."""

    def __init__(self, name: str, base: int, source: str):
        self.name = name
        self.base = base
        self.size = len(source)
        self._line_starts = [0]
        for index, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(index + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def pos(self, offset: int) -> int:
        """
        Convert a character offset within this file to a FileSet position.

        Params:
            offset: Character offset, 0 <= offset <= size

        Returns:
            Position value unique within the owning FileSet

        Raises:
            ValueError: If the offset lies outside the file
        """
        if not 0 <= offset <= self.size:
            raise ValueError(f"offset {offset} out of range for {self.name} (size {self.size})")
        return self.base + offset

    def offset(self, pos: int) -> int:
        """Inverse of pos()."""
        if not self.base <= pos <= self.base + self.size:
            raise ValueError(f"position {pos} does not belong to {self.name}")
        return pos - self.base

    def position(self, pos: int) -> Position:
        offset = self.offset(pos)
        line_index = bisect_right(self._line_starts, offset) - 1
        return Position(
            filename=self.name,
            offset=offset,
            line=line_index + 1,
            column=offset - self._line_starts[line_index] + 1,
        )

    def line_of(self, offset: int) -> int:
        """1-based line number of a character offset."""
        return bisect_right(self._line_starts, offset)

    def __repr__(self) -> str:
        return f"SourceFile(name={self.name!r}, base={self.base}, size={self.size})"


class FileSet:
    """
    Registry of the source files parsed by one load.

    Files are added in order and receive non-overlapping position ranges;
    the first file starts at base 1 so that 0 stays free for NO_POS.
    """

    def __init__(self):
        self._files: list[SourceFile] = []
        self._next_base = 1

    def add_file(self, name: str, source: str) -> SourceFile:
        """
        Register a file and reserve positions for its contents.

        Params:
            name: Filename reported in positions
            source: Full text of the file

        Returns:
            The registered SourceFile
        """
        source_file = SourceFile(name, self._next_base, source)
        # One extra slot so the end-of-file position stays inside the file.
        self._next_base += source_file.size + 1
        self._files.append(source_file)
        return source_file

    def file(self, pos: int) -> SourceFile | None:
        """Return the file containing pos, or None for NO_POS or unknown positions."""
        if pos == NO_POS:
            return None
        index = bisect_right([f.base for f in self._files], pos) - 1
        if index < 0:
            return None
        candidate = self._files[index]
        if pos > candidate.base + candidate.size:
            return None
        return candidate

    def position(self, pos: int) -> Position:
        """Resolve pos to a Position; unknown positions yield an invalid Position."""
        source_file = self.file(pos)
        if source_file is None:
            return Position(filename="", offset=0, line=0, column=0)
        return source_file.position(pos)

    def files(self) -> list[SourceFile]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __bool__(self) -> bool:
        # A set with no files yet is still a usable registry.
        return True

    def __iter__(self):
        return iter(self._files)
