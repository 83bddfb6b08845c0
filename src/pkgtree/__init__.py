"""
pkgtree - Load the syntax tree of one source package from a directory

pkgtree resolves a package path to a directory, parses every source file in
it and returns the single production or test package it declares.
"""

from importlib.metadata import version

from pkgtree.api import load_package, package_ast, package_test_ast
from pkgtree.core.nodes import PackageTree, SourceUnit
from pkgtree.core.positions import FileSet, Position
from pkgtree.selection.roles import PRODUCTION, TEST, PackageRole

__version__ = version("pkgtree")

__all__ = [
    "__version__",
    "load_package",
    "package_ast",
    "package_test_ast",
    "PackageTree",
    "SourceUnit",
    "FileSet",
    "Position",
    "PackageRole",
    "PRODUCTION",
    "TEST",
]
