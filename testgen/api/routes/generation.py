"""Test summary and test code generation routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from testgen.api.dependencies import get_generation_service
from testgen.api.schemas.generation import (
    GenerateCodeRequest,
    GenerateCodeResponse,
    GenerateSummaryRequest,
    GenerateSummaryResponse,
    TestSummarySchema,
)
from testgen.core.exceptions import RequestValidationFailure
from testgen.services.generation import CodeGenerationRequest, FileInput, GenerationService

router = APIRouter(tags=["Generation"])


@router.post("/generate-summary", response_model=GenerateSummaryResponse)
async def generate_summary(
    body: GenerateSummaryRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerateSummaryResponse:
    """Generate AI test case summaries for the selected files."""
    if not body.files:
        raise RequestValidationFailure(
            "No files provided",
            "At least one file must be provided for analysis",
        )
    if any(not f.filename or not f.content for f in body.files):
        raise RequestValidationFailure(
            "Invalid file format",
            "Each file must have 'filename' and 'content' properties",
        )

    files = [FileInput(filename=f.filename, content=f.content) for f in body.files]
    result = await service.generate_summaries(files)

    return GenerateSummaryResponse(
        summaries=[
            TestSummarySchema(summary_id=s.summary_id, summary_text=s.summary_text)
            for s in result.summaries
        ],
        total=len(result.summaries),
        generated_at=datetime.now(timezone.utc),
        ai_provider=result.provider_label,
    )


@router.post("/generate-code", response_model=GenerateCodeResponse)
async def generate_code(
    body: GenerateCodeRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerateCodeResponse:
    """Generate test code for one test summary."""
    if not body.summary_id or not body.summary_text or not body.file_content:
        raise RequestValidationFailure(
            "Invalid request format",
            "Request body must contain 'summaryId', 'summaryText', and 'fileContent'",
        )

    request = CodeGenerationRequest(
        summary_id=body.summary_id,
        summary_text=body.summary_text,
        file_content=body.file_content,
        filename=body.filename,
    )
    result = await service.generate_code(request)
    artifact = result.artifact

    return GenerateCodeResponse(
        code=artifact.code,
        language=artifact.language,
        test_framework=artifact.test_framework,
        generated_at=datetime.now(timezone.utc),
        ai_provider=result.provider_label,
    )
