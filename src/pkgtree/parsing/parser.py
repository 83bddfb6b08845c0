"""
Declaration-level parser for Go source files.

Files are parsed with tree-sitter's Go grammar. The concrete syntax tree is
reduced to a SourceUnit: the package clause, import specs, and top-level
func/type/var/const declarations, with comment groups attached as
documentation where they directly precede a declaration.

A file is rejected if its tree contains ERROR or MISSING nodes, and also for
a few rules the grammar does not enforce: the package clause must come first,
the package name may not be ``_``, imports must precede other declarations and
only declarations may appear at the top level.
"""

import logging
from dataclasses import dataclass
from typing import Any

import tree_sitter
import tree_sitter_go

from pkgtree.core.nodes import (
    Comment,
    CommentGroup,
    Decl,
    FuncDecl,
    GenDecl,
    ImportSpec,
    SourceUnit,
)
from pkgtree.core.positions import FileSet, SourceFile
from pkgtree.exceptions import ParseError

logger = logging.getLogger(__name__)

GO_LANGUAGE = tree_sitter.Language(tree_sitter_go.language())

# Top-level declaration node -> keyword recorded on the GenDecl
GEN_DECL_KEYWORDS = {
    "import_declaration": "import",
    "type_declaration": "type",
    "var_declaration": "var",
    "const_declaration": "const",
}
SPEC_TYPES = {"import_spec", "type_spec", "type_alias", "var_spec", "const_spec"}
FUNC_DECL_TYPES = {"function_declaration", "method_declaration"}


@dataclass
class _PlacedGroup:
    """A comment group together with the lines it spans."""

    group: CommentGroup
    first_line: int
    last_line: int
    is_lead: bool


class SourceParser:
    """Parser for Go source files."""

    def __init__(self):
        self._parser = tree_sitter.Parser(GO_LANGUAGE)

    def parse_file(self, filename: str, source: str, file_set: FileSet) -> SourceUnit:
        """
        Parse a single source file.

        The file is registered in ``file_set`` before parsing, so positions of
        the returned nodes resolve through it.

        Params:
            filename: Name recorded in positions and on the SourceUnit
            source: Complete file contents
            file_set: Position registry of the current load

        Returns:
            The file's SourceUnit

        Raises:
            ParseError: If the file is not syntactically valid
        """
        source_file = file_set.add_file(filename, source)
        data = source.encode("utf-8")
        tree = self._parser.parse(data)
        unit = _TreeReader(source_file, source, data).read(tree.root_node)
        logger.debug(
            "Parsed %s: package %s, %d declarations",
            filename,
            unit.package_name,
            len(unit.decls),
        )
        return unit


class _TreeReader:
    """Builds a SourceUnit from the syntax tree of one file."""

    def __init__(self, source_file: SourceFile, source: str, data: bytes):
        self.source_file = source_file
        self.source = source
        self.data = data
        self._ascii = len(data) == len(source)
        self.comment_groups: list[_PlacedGroup] = []
        self._lead_by_last_line: dict[int, CommentGroup] = {}

    # Offsets and text

    def char_offset(self, byte_offset: int) -> int:
        """Convert a tree-sitter byte offset into a character offset."""
        if self._ascii:
            return byte_offset
        return len(self.data[:byte_offset].decode("utf-8"))

    def pos(self, byte_offset: int) -> int:
        return self.source_file.pos(self.char_offset(byte_offset))

    def text(self, node: Any) -> str:
        return self.data[node.start_byte : node.end_byte].decode("utf-8")

    def error(self, node: Any, message: str) -> ParseError:
        return ParseError(message, self.source_file.position(self.pos(node.start_byte)))

    def first_token(self, node: Any) -> Any:
        while node.child_count:
            node = node.children[0]
        return node

    # Validation

    def check_syntax(self, root: Any) -> None:
        """Raise a ParseError for the first ERROR or MISSING node, in source order."""
        if not root.has_error:
            return
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_missing:
                raise self.error(node, f"missing {node.type!r}")
            if node.type == "ERROR":
                snippet = self.text(node).strip().split("\n")[0][:20]
                raise self.error(node, f"syntax error near {snippet!r}")
            stack.extend(child for child in reversed(node.children) if child.has_error)
        raise self.error(root, "syntax error")

    # Comments

    def leaves(self, root: Any) -> list[Any]:
        """Tokens of the tree in source order, without whitespace terminators."""
        result = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.child_count:
                stack.extend(reversed(node.children))
            elif node.end_byte > node.start_byte and self.text(node).strip():
                result.append(node)
        return result

    def group_comments(self, root: Any) -> None:
        current: list[Any] = []
        previous_code_line = 0

        def flush(next_code_line: int) -> None:
            if not current:
                return
            first_line = current[0].start_point[0] + 1
            last_line = current[-1].end_point[0] + 1
            group = CommentGroup(
                [
                    Comment(self.text(node), self.pos(node.start_byte), self.pos(node.end_byte))
                    for node in current
                ]
            )
            is_lead = first_line > previous_code_line and next_code_line > last_line
            self.comment_groups.append(_PlacedGroup(group, first_line, last_line, is_lead))
            current.clear()

        for node in self.leaves(root):
            line = node.start_point[0] + 1
            if node.type == "comment":
                if current and line > current[-1].end_point[0] + 2:
                    flush(line)
                current.append(node)
                continue
            flush(line)
            previous_code_line = node.end_point[0] + 1
        flush(self.source_file.line_count + 1)

        self._lead_by_last_line = {
            g.last_line: g.group for g in self.comment_groups if g.is_lead
        }

    def doc_for(self, node: Any) -> CommentGroup | None:
        return self._lead_by_last_line.get(node.start_point[0])

    # Declarations

    def read(self, root: Any) -> SourceUnit:
        self.check_syntax(root)
        self.group_comments(root)

        top_level = [
            node
            for node in root.named_children
            if node.type not in ("comment", "empty_statement")
        ]
        if not top_level or top_level[0].type != "package_clause":
            found = repr(self.text(self.first_token(top_level[0]))) if top_level else "EOF"
            raise ParseError(
                f"expected 'package', found {found}",
                self.source_file.position(
                    self.pos(top_level[0].start_byte if top_level else len(self.data))
                ),
            )
        package_clause = top_level[0]
        name_node = next(
            c for c in package_clause.named_children if c.type == "package_identifier"
        )
        package_name = self.text(name_node)
        if package_name == "_":
            raise self.error(name_node, "invalid package name _")

        imports: list[ImportSpec] = []
        decls: list[Decl] = []
        for node in top_level[1:]:
            if node.type == "import_declaration":
                if any(not (isinstance(d, GenDecl) and d.keyword == "import") for d in decls):
                    raise self.error(node, "imports must appear before other declarations")
                decl = self.read_gen_decl(node)
                imports.extend(decl.specs)
            elif node.type in GEN_DECL_KEYWORDS:
                decl = self.read_gen_decl(node)
            elif node.type in FUNC_DECL_TYPES:
                decl = self.read_func_decl(node)
            elif node.type == "package_clause":
                raise self.error(node, "expected declaration, found 'package'")
            else:
                token = self.text(self.first_token(node))
                raise self.error(
                    node, f"non-declaration statement outside function body: {token!r}"
                )
            decls.append(decl)

        return SourceUnit(
            filename=self.source_file.name,
            package_name=package_name,
            package_pos=self.pos(name_node.start_byte),
            pos=self.pos(package_clause.start_byte),
            end=self.source_file.pos(len(self.source)),
            package_doc=self.doc_for(package_clause),
            imports=imports,
            decls=decls,
            comments=[g.group for g in self.comment_groups],
        )

    def specs(self, node: Any) -> list[Any]:
        """Spec nodes of a declaration, looking inside parenthesized spec lists."""
        result = []
        for child in node.named_children:
            if child.type in SPEC_TYPES:
                result.append(child)
            elif child.type.endswith("_list"):
                result.extend(self.specs(child))
        return result

    def is_grouped(self, node: Any) -> bool:
        for child in node.children:
            if child.type == "(":
                return True
            if child.type.endswith("_list") and any(c.type == "(" for c in child.children):
                return True
        return False

    def read_gen_decl(self, node: Any) -> GenDecl:
        decl = GenDecl(
            keyword=GEN_DECL_KEYWORDS[node.type],
            pos=self.pos(node.start_byte),
            end=self.pos(node.end_byte),
            grouped=self.is_grouped(node),
            doc=self.doc_for(node),
        )
        for spec in self.specs(node):
            if spec.type == "import_spec":
                decl.specs.append(self.read_import_spec(spec, decl.grouped))
            elif spec.type in ("type_spec", "type_alias"):
                decl.names.append(self.text(spec.child_by_field_name("name")))
            else:
                decl.names.extend(self.text(n) for n in spec.children_by_field_name("name"))
        return decl

    def read_import_spec(self, node: Any, grouped: bool) -> ImportSpec:
        path_node = node.child_by_field_name("path")
        path = self.text(path_node)[1:-1]
        if not path:
            raise self.error(path_node, "invalid import path: empty")
        name_node = node.child_by_field_name("name")
        return ImportSpec(
            path=path,
            pos=self.pos(node.start_byte),
            name=self.text(name_node) if name_node is not None else None,
            doc=self.doc_for(node) if grouped else None,
        )

    def read_func_decl(self, node: Any) -> FuncDecl:
        receiver = node.child_by_field_name("receiver")
        return FuncDecl(
            name=self.text(node.child_by_field_name("name")),
            pos=self.pos(node.start_byte),
            end=self.pos(node.end_byte),
            receiver=self.text(receiver) if receiver is not None else None,
            doc=self.doc_for(node),
            has_body=node.child_by_field_name("body") is not None,
        )
