"""AI test summary and test code generation."""

from testgen.services.generation.models import (
    CodeGenerationRequest,
    CodeGenerationResult,
    FileInput,
    GeneratedCodeArtifact,
    SummaryGenerationResult,
    TestSummary,
    TestTarget,
)
from testgen.services.generation.service import GenerationService

__all__ = [
    "GenerationService",
    "CodeGenerationRequest",
    "CodeGenerationResult",
    "FileInput",
    "GeneratedCodeArtifact",
    "SummaryGenerationResult",
    "TestSummary",
    "TestTarget",
]
