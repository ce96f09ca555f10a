"""Helpers that turn command-line shapefile arguments into file paths."""

from __future__ import annotations


def last_component(path: str) -> str:
    """Return the text after the last '/' of a path ("" if it ends with '/')."""
    return path.split("/")[-1]


def _split_names(names: str) -> list[str]:
    """Split a '|'-separated list of names; a trailing separator adds no empty name."""
    if not names:
        return []
    parts = names.split("|")
    if parts[-1] == "":
        parts.pop()
    return parts


def count_shapefiles(names: str) -> int:
    """Return how many shapefile names a '|'-separated list holds."""
    return len(_split_names(names))


def shapefile_paths(directory: str, names: str) -> list[str]:
    """Join each '|'-separated shapefile name onto the directory."""
    return [f"{directory}/{name}" for name in _split_names(names)]


def index_path(output_path: str, directory: str) -> str:
    """Return the index file path: the output prefix followed by the directory's last component."""
    return output_path + last_component(directory)