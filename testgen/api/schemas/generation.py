"""Test generation API schemas.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FileInputSchema(CamelModel):
    filename: str
    content: str


class GenerateSummaryRequest(CamelModel):
    files: list[FileInputSchema] = Field(..., description="Files to analyze")


class TestSummarySchema(CamelModel):
    __test__ = False

    summary_id: str
    summary_text: str


class GenerateSummaryResponse(CamelModel):
    success: bool = True
    summaries: list[TestSummarySchema]
    total: int
    generated_at: datetime
    ai_provider: str


class GenerateCodeRequest(CamelModel):
    summary_id: str
    summary_text: str
    file_content: str
    filename: str | None = None


class GenerateCodeResponse(CamelModel):
    success: bool = True
    code: str
    language: str
    test_framework: str
    generated_at: datetime
    ai_provider: str
