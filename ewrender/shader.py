"""Loading of vertex and fragment shader source text."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


class ShaderSourceError(Exception):
    """A shader source file could not be read."""


def load_shader_source(path: str | os.PathLike) -> str:
    """Return the whole text of the shader file at ``path``."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderSourceError(f"Failed to load file {os.fspath(path)}") from exc


@dataclass(frozen=True)
class ShaderSource:
    """The source code of a vertex + fragment shader program."""

    vertex: str
    fragment: str

    @classmethod
    def from_files(
        cls, vertex_path: str | os.PathLike, fragment_path: str | os.PathLike
    ) -> "ShaderSource":
        return cls(load_shader_source(vertex_path), load_shader_source(fragment_path))