"""Namespace listing shared by the primitive namespace packages."""

from __future__ import annotations

from pathlib import Path
import importlib


def list_namespace_primitives(package: str, namespace_dir: Path) -> dict[str, str]:
    """List primitive names and one-line descriptions found in namespace_dir."""
    primitives: dict[str, str] = {}

    for item in sorted(namespace_dir.iterdir(), key=lambda p: p.name):
        if not (item.is_file() and item.suffix == ".py" and not item.name.startswith("_")):
            continue

        module = importlib.import_module(f"{package}.{item.stem}")
        spec = getattr(module, "PRIMITIVE_SPEC", None)
        name = spec.name if spec is not None else item.stem

        description = "No description available"
        if spec is not None and spec.description:
            description = spec.description
        elif module.__doc__:
            description = module.__doc__.strip().split("\n")[0]

        primitives[name] = description

    return primitives
