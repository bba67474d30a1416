from fastapi import APIRouter
from typing import List

from app.schemas.submission import AppSubmission, SubmissionResponse, SUBMISSION_CATEGORIES
from app.services.submission import build_issue_url

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.get("/categories", response_model=List[str])
async def submission_categories():
    return SUBMISSION_CATEGORIES


@router.post("", response_model=SubmissionResponse)
async def submit_app(submission: AppSubmission):
    """
    Build a link to a pre-filled issue on the community projects repository.

    Nothing is stored here; the entry is reviewed on the issue tracker and
    added to the catalog data by a maintainer.
    """
    return SubmissionResponse(issue_url=build_issue_url(submission))
