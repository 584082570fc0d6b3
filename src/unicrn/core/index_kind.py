"""Barrel index kinds shared by the path resolver and index synchronizer."""

from enum import Enum


class IndexKind(Enum):
    """A generated index.ts and the directory it re-exports.

    Value is (subdirectory under componentsFolder, source file suffix).
    """

    COMPONENTS = ("ui", ".tsx")
    HOOKS = ("hooks", ".ts")

    @property
    def subdir(self) -> str:
        return self.value[0]

    @property
    def suffix(self) -> str:
        return self.value[1]
