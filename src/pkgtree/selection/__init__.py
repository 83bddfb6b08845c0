"""
pkgtree package selection.

This package provides package roles and the filter that reduces a directory's
packages to the single package of a role.
"""

from pkgtree.selection.roles import (
    PRODUCTION,
    ROLES,
    TEST,
    TEST_PACKAGE_SUFFIX,
    PackagePredicate,
    PackageRole,
    filter_by_role,
    filter_packages,
    get_role,
    is_production_package,
    is_test_package,
)

__all__ = [
    "PRODUCTION",
    "ROLES",
    "TEST",
    "TEST_PACKAGE_SUFFIX",
    "PackagePredicate",
    "PackageRole",
    "filter_by_role",
    "filter_packages",
    "get_role",
    "is_production_package",
    "is_test_package",
]
