"""Turn a git tree listing into a list of code files.

A file is kept when it is a blob and its extension is one of CODE_EXTENSIONS.
The language label comes from LANGUAGE_MAP; accepted extensions missing from
the map (generic config formats among them) get no language.
"""

from __future__ import annotations

from typing import Iterable

from testgen.services.github.models import CodeFileRecord, TreeEntry

DEFAULT_RAW_BASE_URL = "https://raw.githubusercontent.com"

CODE_EXTENSIONS = frozenset({
    # JavaScript/TypeScript
    ".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs",
    # Python
    ".py", ".pyw", ".pyi",
    # Java
    ".java", ".class", ".jar",
    # C/C++
    ".c", ".cpp", ".cc", ".cxx", ".h", ".hpp", ".hh", ".hxx",
    # C#
    ".cs", ".csx",
    # Go
    ".go",
    # Rust
    ".rs",
    # PHP
    ".php", ".phtml",
    # Ruby
    ".rb", ".rbw",
    # Swift
    ".swift",
    # Kotlin
    ".kt", ".kts",
    # Scala
    ".scala", ".sc",
    # R
    ".r",
    # MATLAB
    ".m",
    # Shell
    ".sh", ".bash", ".zsh", ".fish",
    # SQL
    ".sql",
    # HTML/CSS
    ".html", ".htm", ".css", ".scss", ".sass", ".less",
    # Configuration files that might contain code
    ".json", ".xml", ".yaml", ".yml", ".toml",
    # Other
    ".vue", ".svelte", ".dart", ".elm", ".clj", ".cljs", ".hs", ".ml", ".fs",
})

LANGUAGE_MAP = {
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".mjs": "JavaScript",
    ".cjs": "JavaScript",
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".py": "Python",
    ".pyw": "Python",
    ".pyi": "Python",
    ".java": "Java",
    ".c": "C",
    ".cpp": "C++",
    ".cc": "C++",
    ".cxx": "C++",
    ".cs": "C#",
    ".go": "Go",
    ".rs": "Rust",
    ".php": "PHP",
    ".rb": "Ruby",
    ".swift": "Swift",
    ".kt": "Kotlin",
    ".scala": "Scala",
    ".r": "R",
    ".sh": "Shell",
    ".bash": "Shell",
    ".sql": "SQL",
    ".html": "HTML",
    ".htm": "HTML",
    ".css": "CSS",
    ".scss": "SCSS",
    ".sass": "Sass",
    ".vue": "Vue",
    ".dart": "Dart",
}


def get_extension(path: str) -> str:
    """Lowercased extension of the last path segment, dot included.

    Returns "" when the segment has no dot or ends with one.
    """
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:].lower()


def is_code_file(path: str) -> bool:
    return get_extension(path) in CODE_EXTENSIONS


def detect_language(path: str) -> str | None:
    return LANGUAGE_MAP.get(get_extension(path))


def build_download_url(
    owner: str,
    repo: str,
    branch: str,
    path: str,
    raw_base_url: str = DEFAULT_RAW_BASE_URL,
) -> str:
    return f"{raw_base_url.rstrip('/')}/{owner}/{repo}/{branch}/{path}"


def classify_tree(
    entries: Iterable[TreeEntry | None],
    owner: str,
    repo: str,
    branch: str,
    raw_base_url: str = DEFAULT_RAW_BASE_URL,
) -> list[CodeFileRecord]:
    """Filter tree entries down to code files, keeping the input order.

    Entries that are None or have no path are skipped so that one bad item
    does not fail the whole listing.
    """
    files: list[CodeFileRecord] = []
    for entry in entries:
        if entry is None or not entry.path:
            continue
        if entry.type != "blob":
            continue
        if not is_code_file(entry.path):
            continue

        files.append(CodeFileRecord(
            path=entry.path,
            language=detect_language(entry.path),
            size=entry.size or 0,
            sha=entry.sha,
            download_url=build_download_url(owner, repo, branch, entry.path, raw_base_url),
        ))
    return files
