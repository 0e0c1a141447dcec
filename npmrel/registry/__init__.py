"""npm registry operations and package.json patching."""

from .manifest import apply_package_versions, read_manifest, write_manifest
from .npm import (
    NpmPackageOptions,
    diff_packages,
    get_package_version_str_by_tag,
    get_versions_by_spec,
    pack,
    publish_package,
)

__all__ = [
    "NpmPackageOptions",
    "apply_package_versions",
    "diff_packages",
    "get_package_version_str_by_tag",
    "get_versions_by_spec",
    "pack",
    "publish_package",
    "read_manifest",
    "write_manifest",
]
