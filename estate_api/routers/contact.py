"""
Contact form API endpoints.
Submissions can be created, listed, fetched and marked as read, but not edited or deleted.
"""

from fastapi import APIRouter, Depends, status, Path
from typing import List

from estate_api.services.contact import ContactService
from estate_api.schemas.contact import ContactSubmissionCreate, ContactSubmissionResponse
from estate_api.schemas.error import get_read_error_responses, get_write_error_responses
from estate_api.utils.dependencies import get_contact_service
from estate_api.utils.validators import parse_positive_int


router = APIRouter(prefix="/contact", tags=["Contact"])


def _to_response(submission) -> ContactSubmissionResponse:
    return ContactSubmissionResponse.model_validate(submission.to_dict())


@router.post(
    "",
    response_model=ContactSubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact form",
    responses=get_write_error_responses()
)
async def submit_contact_form(
    submission_data: ContactSubmissionCreate,
    contact_service: ContactService = Depends(get_contact_service)
) -> ContactSubmissionResponse:
    """
    Store an inquiry from the contact form.

    Args:
        submission_data: Validated form payload

    Returns:
        Stored submission with `isRead` false
    """
    submission = await contact_service.submit(submission_data)
    return _to_response(submission)


@router.get("", response_model=List[ContactSubmissionResponse], summary="List contact submissions")
async def list_contact_submissions(
    contact_service: ContactService = Depends(get_contact_service)
) -> List[ContactSubmissionResponse]:
    submissions = await contact_service.list_submissions()
    return [_to_response(submission) for submission in submissions]


@router.get(
    "/{submission_id}",
    response_model=ContactSubmissionResponse,
    summary="Get contact submission",
    responses=get_read_error_responses()
)
async def get_contact_submission(
    submission_id: str = Path(..., description="Submission ID"),
    contact_service: ContactService = Depends(get_contact_service)
) -> ContactSubmissionResponse:
    submission = await contact_service.get_submission(parse_positive_int(submission_id, "submission ID"))
    return _to_response(submission)


@router.patch(
    "/{submission_id}/read",
    response_model=ContactSubmissionResponse,
    summary="Mark submission as read",
    description="Move a submission from unread to read. Repeating the call is harmless.",
    responses=get_read_error_responses()
)
async def mark_contact_submission_read(
    submission_id: str = Path(..., description="Submission ID"),
    contact_service: ContactService = Depends(get_contact_service)
) -> ContactSubmissionResponse:
    submission = await contact_service.mark_as_read(parse_positive_int(submission_id, "submission ID"))
    return _to_response(submission)
