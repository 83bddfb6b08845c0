"""
Package roles and role-based selection.

A directory may hold one production package and one test package whose name
carries the ``_test`` suffix. A role is a predicate over (package name,
package tree); selecting by role must leave exactly one package.
"""

import logging
from collections.abc import Callable, Mapping

from attrs import frozen

from pkgtree.core.nodes import PackageTree
from pkgtree.exceptions import NoMatchingPackageError, TooManyPackagesError

logger = logging.getLogger(__name__)

TEST_PACKAGE_SUFFIX = "_test"
CUSTOM_ROLE_NAME = "custom"

PackagePredicate = Callable[[str, PackageTree], bool]


def is_test_package(name: str, tree: PackageTree | None = None) -> bool:
    """Check whether a package name carries the test suffix."""
    return name.endswith(TEST_PACKAGE_SUFFIX)


def is_production_package(name: str, tree: PackageTree | None = None) -> bool:
    """Check whether a package name lacks the test suffix."""
    return not name.endswith(TEST_PACKAGE_SUFFIX)


@frozen
class PackageRole:
    """A named package predicate."""

    name: str
    predicate: PackagePredicate

    def matches(self, name: str, tree: PackageTree) -> bool:
        return self.predicate(name, tree)


PRODUCTION = PackageRole("production", is_production_package)
TEST = PackageRole("test", is_test_package)

ROLES = {role.name: role for role in (PRODUCTION, TEST)}


def get_role(role: "PackageRole | str") -> PackageRole:
    """
    Look up a role by name, or pass a PackageRole through.

    Params:
        role: A PackageRole or one of the names "production", "test"

    Raises:
        ValueError: If the name is not a known role
    """
    if isinstance(role, PackageRole):
        return role
    try:
        return ROLES[role]
    except KeyError:
        raise ValueError(
            f"Unknown package role: {role}. Valid roles are: {', '.join(sorted(ROLES))}"
        ) from None


def filter_packages(
    packages: Mapping[str, PackageTree], predicate: PackagePredicate
) -> dict[str, PackageTree]:
    """Return the packages for which predicate(name, tree) holds."""
    return {name: tree for name, tree in packages.items() if predicate(name, tree)}


def filter_by_role(
    packages: Mapping[str, PackageTree],
    role: "PackageRole | PackagePredicate",
    role_name: str | None = None,
) -> PackageTree:
    """
    Select the single package matching a role.

    Params:
        packages: Package name to tree, as produced by PackageLoader.load
        role: A PackageRole, or a bare predicate over (name, tree)
        role_name: Name reported in errors for a bare predicate; defaults to
            the function name, or "custom" for a lambda

    Returns:
        The only matching PackageTree

    Raises:
        NoMatchingPackageError: If no package matches
        TooManyPackagesError: If more than one package matches
    """
    if isinstance(role, PackageRole):
        role_name, predicate = role.name, role.predicate
    else:
        predicate = role
        if role_name is None:
            role_name = getattr(role, "__name__", CUSTOM_ROLE_NAME)
            if role_name == "<lambda>":
                role_name = CUSTOM_ROLE_NAME

    matching = filter_packages(packages, predicate)
    if not matching:
        raise NoMatchingPackageError(role_name, packages.keys())
    if len(matching) > 1:
        raise TooManyPackagesError(matching.keys(), role_name)

    (tree,) = matching.values()
    logger.debug("Selected %s package %s", role_name, tree.name)
    return tree
