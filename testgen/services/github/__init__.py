"""GitHub repository listing and file classification."""

from testgen.services.github.classifier import classify_tree, detect_language, is_code_file
from testgen.services.github.models import CodeFileRecord, RepositorySummary, TreeEntry
from testgen.services.github.service import GitHubService

__all__ = [
    "GitHubService",
    "classify_tree",
    "detect_language",
    "is_code_file",
    "CodeFileRecord",
    "RepositorySummary",
    "TreeEntry",
]
