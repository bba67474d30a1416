from urllib.parse import quote

from app.core.config import settings
from app.schemas.submission import AppSubmission


# Characters encodeURIComponent leaves alone besides alphanumerics and -_.
_URI_COMPONENT_SAFE = "!~*'()"


def _encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_issue_title(submission: AppSubmission) -> str:
    return f"[New App] {submission.name}"


def build_issue_body(submission: AppSubmission) -> str:
    return f"""## App Submission

**Name:** {submission.name}
**Author:** {submission.author}
**URL:** {submission.url or ""}
**GitHub:** {submission.github or ""}
**Category:** {submission.category}
**Tags:** {submission.tags}

**Description:**
{submission.description}

---
_Submitted via CortexHub_"""


def build_issue_url(submission: AppSubmission) -> str:
    """Link to a new issue on the submissions repository, pre-filled with the entry."""
    repo = settings.SUBMISSION_REPO_URL.rstrip("/")
    title = _encode_component(build_issue_title(submission))
    body = _encode_component(build_issue_body(submission))
    return f"{repo}/issues/new?title={title}&body={body}"
