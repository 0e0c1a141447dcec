"""package.json helpers.

A manifest is the parsed `package.json` as a plain dict; fields other than the
dependency maps are carried through untouched.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from npmrel.core.structured import StrDict, as_str_dict

__all__ = [
    "DEPENDENCY_FIELDS",
    "apply_package_versions",
    "read_manifest",
    "write_manifest",
]

DEPENDENCY_FIELDS = ("dependencies", "devDependencies")


def apply_package_versions(manifest: Mapping[str, object], versions: Mapping[str, str]) -> StrDict:
    """Pin dependencies that `manifest` already declares to the given versions.

    Both `dependencies` and `devDependencies` are updated. Names the manifest
    does not declare are ignored. The input is left untouched: the result is a
    shallow copy whose dependency maps are fresh dicts.
    """
    package_json: StrDict = dict(manifest)

    for field in DEPENDENCY_FIELDS:
        deps = as_str_dict(package_json.get(field))
        if deps is None:
            continue
        patched = dict(deps)
        for name, version in versions.items():
            if patched.get(name) is not None:
                patched[name] = version
        package_json[field] = patched

    return package_json


def read_manifest(path: Path) -> StrDict:
    """Load a package.json file.

    Raises:
        ValueError: the file is not a JSON object.
    """
    obj: object = json.loads(path.read_text(encoding="utf-8"))
    data = as_str_dict(obj)
    if data is None:
        raise ValueError(f"{path}: expected a JSON object")
    return data


def write_manifest(path: Path, manifest: Mapping[str, object]) -> None:
    """Write a package.json file the way npm formats it."""
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
