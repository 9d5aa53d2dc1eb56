"""Data types for GitHub repositories and trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class RepositorySummary:
    """Snapshot of one repository as reported by GitHub."""

    id: int
    name: str
    full_name: str
    description: str | None
    html_url: str
    clone_url: str
    language: str | None
    stargazers_count: int
    forks_count: int
    private: bool
    updated_at: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RepositorySummary":
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data.get("full_name") or data["name"],
            description=data.get("description"),
            html_url=data.get("html_url", ""),
            clone_url=data.get("clone_url", ""),
            language=data.get("language"),
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            private=bool(data.get("private", False)),
            updated_at=data.get("updated_at", ""),
        )


@dataclass(frozen=True)
class TreeEntry:
    """One node of a recursive git tree listing."""

    path: str
    type: str
    sha: str
    size: int | None = None
    mode: str = ""
    url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "TreeEntry | None":
        """Build an entry, or None when the item has no usable path."""
        path = data.get("path")
        if not isinstance(path, str) or not path:
            return None
        return cls(
            path=path,
            type=data.get("type", ""),
            sha=data.get("sha", ""),
            size=data.get("size"),
            mode=data.get("mode", ""),
            url=data.get("url", ""),
        )


@dataclass(frozen=True)
class CodeFileRecord:
    """A classified code file ready to be shown to the client."""

    path: str
    language: str | None
    size: int
    sha: str
    download_url: str | None = None
    type: Literal["file"] = "file"
