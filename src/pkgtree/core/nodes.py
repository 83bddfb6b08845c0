"""
Syntax tree node types.

The tree is declaration-level: a SourceUnit records its package clause,
imports, top-level declarations and every comment in the file. A PackageTree
groups the SourceUnits of one directory that declare the same package.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pkgtree.core.positions import FileSet, Position


@dataclass
class Comment:
    """A single // or /* */ comment, including its markers."""

    text: str
    pos: int
    end: int

    @property
    def is_block(self) -> bool:
        return self.text.startswith("/*")

    def body(self) -> str:
        """Comment text without its markers."""
        if self.is_block:
            return self.text[2:-2]
        return self.text[2:]


@dataclass
class CommentGroup:
    """Comments with no blank line or code between them."""

    comments: list[Comment]

    @property
    def pos(self) -> int:
        return self.comments[0].pos

    @property
    def end(self) -> int:
        return self.comments[-1].end

    def text(self) -> str:
        """
        Return the group's text with comment markers stripped.

        Leading and trailing blank lines are removed, as is a single space
        after ``//``.
        """
        lines: list[str] = []
        for comment in self.comments:
            body = comment.body()
            if not comment.is_block and body.startswith(" "):
                body = body[1:]
            lines.extend(line.rstrip() for line in body.split("\n"))
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines) + "\n" if lines else ""


@dataclass
class ImportSpec:
    """One imported path, with its optional local name."""

    path: str
    pos: int
    name: str | None = None
    doc: CommentGroup | None = None


@dataclass
class FuncDecl:
    """A top-level function or method declaration."""

    name: str
    pos: int
    end: int
    receiver: str | None = None  # e.g. "(s *Server)" for methods
    doc: CommentGroup | None = None
    has_body: bool = True

    @property
    def is_method(self) -> bool:
        return self.receiver is not None


@dataclass
class GenDecl:
    """An import, type, var or const declaration, possibly grouped in parentheses."""

    keyword: str
    pos: int
    end: int
    names: list[str] = field(default_factory=list)
    specs: list[ImportSpec] = field(default_factory=list)  # import declarations only
    grouped: bool = False
    doc: CommentGroup | None = None


Decl = FuncDecl | GenDecl


@dataclass
class SourceUnit:
    """The syntax tree of one source file."""

    filename: str
    package_name: str
    package_pos: int
    pos: int
    end: int
    package_doc: CommentGroup | None = None
    imports: list[ImportSpec] = field(default_factory=list)
    decls: list[Decl] = field(default_factory=list)
    comments: list[CommentGroup] = field(default_factory=list)

    def funcs(self) -> list[FuncDecl]:
        return [decl for decl in self.decls if isinstance(decl, FuncDecl)]

    def declared_names(self) -> list[str]:
        """Names introduced by the file's top-level declarations, in source order."""
        names: list[str] = []
        for decl in self.decls:
            if isinstance(decl, FuncDecl):
                if not decl.is_method:
                    names.append(decl.name)
            elif decl.keyword != "import":
                names.extend(decl.names)
        return names


@dataclass
class PackageTree:
    """
    All source units of one directory that declare the same package.

    Params:
        name: Declared package identifier
        directory: Directory the files were loaded from
        file_set: Position registry shared by every unit of this load
        files: Filename to SourceUnit, in sorted filename order
    """

    name: str
    directory: Path
    file_set: FileSet
    files: dict[str, SourceUnit] = field(default_factory=dict)

    @property
    def filenames(self) -> list[str]:
        return list(self.files)

    def add(self, unit: SourceUnit) -> None:
        if unit.package_name != self.name:
            raise ValueError(
                f"Cannot add file '{unit.filename}' of package '{unit.package_name}' to package '{self.name}'"
            )
        self.files[unit.filename] = unit

    def imports(self) -> list[str]:
        """Sorted, de-duplicated import paths of all files."""
        return sorted({spec.path for unit in self.files.values() for spec in unit.imports})

    def declared_names(self) -> list[str]:
        names: list[str] = []
        for unit in self.files.values():
            names.extend(unit.declared_names())
        return names

    def position(self, pos: int) -> Position:
        """Resolve a node position through this tree's FileSet."""
        return self.file_set.position(pos)
