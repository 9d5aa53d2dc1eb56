"""GitHub repository API schemas."""

from typing import Literal

from pydantic import BaseModel


class RepositoryResponse(BaseModel):
    """One repository of the authenticated user."""

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

    model_config = {"from_attributes": True}


class ReposResponse(BaseModel):
    success: bool = True
    repos: list[RepositoryResponse]
    total: int


class CodeFileResponse(BaseModel):
    """A code file inside a repository tree."""

    path: str
    type: Literal["file"] = "file"
    language: str | None
    size: int
    sha: str
    download_url: str | None = None

    model_config = {"from_attributes": True}


class RepositoryRef(BaseModel):
    owner: str
    name: str
    full_name: str


class FileTreeResponse(BaseModel):
    success: bool = True
    files: list[CodeFileResponse]
    total: int
    repository: RepositoryRef
