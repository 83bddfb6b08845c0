"""
Entry points: resolve a package path, load its directory and select the
package of one role.
"""

from pkgtree.config import LoaderConfig, ResolverConfig
from pkgtree.core.nodes import PackageTree
from pkgtree.parsing.loader import FileFilter, PackageLoader, SourceUnitParser
from pkgtree.resolution.path_resolver import PathResolver
from pkgtree.selection.roles import (
    PRODUCTION,
    TEST,
    PackagePredicate,
    PackageRole,
    filter_by_role,
    get_role,
)


def load_package(
    path: str,
    role: PackageRole | PackagePredicate | str = PRODUCTION,
    resolver: PathResolver | None = None,
    parser: SourceUnitParser | None = None,
    config: LoaderConfig | None = None,
    file_filter: FileFilter | None = None,
) -> PackageTree:
    """
    Return the single package of ``role`` found at ``path``.

    The path is resolved before any file is read. The returned tree owns a
    FileSet created for this call only.

    Params:
        path: Import-style package path
        role: PackageRole, role name ("production" or "test"), or a predicate
        resolver: Path resolver; defaults to ResolverConfig().build_resolver()
        parser: Per-file parser; defaults to SourceParser
        config: Loader settings
        file_filter: Optional predicate restricting which source files are parsed

    Returns:
        The selected PackageTree

    Raises:
        PathResolutionError: If the path does not resolve to a directory
        ParseError: If any source file in the directory fails to parse
        NoMatchingPackageError: If no package of the role exists
        TooManyPackagesError: If several packages of the role exist
    """
    if isinstance(role, str):
        role = get_role(role)
    if resolver is None:
        resolver = ResolverConfig().build_resolver()

    directory = resolver.resolve(path)
    loader = PackageLoader(parser=parser, config=config, file_filter=file_filter)
    return filter_by_role(loader.load(directory), role)


def package_ast(path: str, resolver: PathResolver | None = None, **kwargs) -> PackageTree:
    """Return the production (non ``_test``) package at the given path."""
    return load_package(path, PRODUCTION, resolver=resolver, **kwargs)


def package_test_ast(path: str, resolver: PathResolver | None = None, **kwargs) -> PackageTree:
    """Return the ``_test`` package at the given path."""
    return load_package(path, TEST, resolver=resolver, **kwargs)
