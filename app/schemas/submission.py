from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional


SUBMISSION_CATEGORIES = ["Oracle", "Research", "Analytics", "Bot", "Developer", "Agent"]


class AppSubmission(BaseModel):
    name: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, description="Name or handle of the submitter")
    url: Optional[str] = None
    github: Optional[str] = None
    description: str = Field(..., min_length=1)
    category: str
    tags: str = Field(default="", description="Comma separated, as typed")

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in SUBMISSION_CATEGORIES:
            raise ValueError(f"category must be one of {', '.join(SUBMISSION_CATEGORIES)}")
        return value


class SubmissionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    issue_url: str
