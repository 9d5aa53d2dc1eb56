"""Pick the language and test framework for a source file.

Both the code prompt and the response labelling call resolve_test_target,
so the framework named to the model is the one reported to the client.
"""

from __future__ import annotations

from testgen.services.generation.models import TestTarget

UI_MARKER = "React"
UI_EXTENSIONS = ("tsx", "jsx")
TYPESCRIPT_EXTENSIONS = ("ts", "tsx")

DEFAULT_FRAMEWORK = "Jest"
UI_FRAMEWORK = "Jest + React Testing Library"


def file_extension(filename: str | None) -> str:
    """Lowercased text after the last dot, or "" when there is none."""
    if not filename or "." not in filename:
        return ""
    return filename.lower().rsplit(".", 1)[-1]


def uses_ui_framework(extension: str, content: str) -> bool:
    return extension in UI_EXTENSIONS or UI_MARKER in (content or "")


def resolve_test_target(filename: str | None, content: str) -> TestTarget:
    extension = file_extension(filename)
    is_ui = uses_ui_framework(extension, content)

    if extension == "py":
        return TestTarget(language="Python", test_framework="pytest")
    if extension in TYPESCRIPT_EXTENSIONS:
        return TestTarget(
            language="TypeScript",
            test_framework=UI_FRAMEWORK if is_ui else DEFAULT_FRAMEWORK,
        )
    if is_ui:
        return TestTarget(language="JavaScript", test_framework=UI_FRAMEWORK)
    return TestTarget(language="JavaScript", test_framework=DEFAULT_FRAMEWORK)
