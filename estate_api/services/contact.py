"""
Contact service for inquiries left through the site.
"""

from typing import List
import logging

from estate_api.storage import MemStorage
from estate_api.models.contact import ContactSubmission
from estate_api.schemas.contact import ContactSubmissionCreate
from estate_api.utils.exceptions import ContactSubmissionNotFoundError, InternalServerError

logger = logging.getLogger(__name__)


class ContactService:
    """
    Contact submission operations.

    A submission is unread when created and can only move to read.
    """

    def __init__(self, storage: MemStorage):
        self.contact_repo = storage.contact_submissions

    async def submit(self, submission_data: ContactSubmissionCreate) -> ContactSubmission:
        """
        Store a new inquiry.

        Args:
            submission_data: Validated contact form payload

        Returns:
            Stored submission, unread
        """
        try:
            submission = await self.contact_repo.create(submission_data.model_dump())
        except Exception as e:
            logger.error(f"Failed to store contact submission: {e}", exc_info=True)
            raise InternalServerError("Failed to process contact submission")

        logger.info(f"Contact submission received from {submission.email} (ID: {submission.id})")
        return submission

    async def list_submissions(self) -> List[ContactSubmission]:
        try:
            return await self.contact_repo.get_all()
        except Exception as e:
            logger.error(f"Failed to list contact submissions: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch contact submissions")

    async def get_submission(self, submission_id: int) -> ContactSubmission:
        try:
            submission = await self.contact_repo.get_by_id(submission_id)
        except Exception as e:
            logger.error(f"Failed to get contact submission {submission_id}: {e}", exc_info=True)
            raise InternalServerError("Failed to fetch contact submission")

        if submission is None:
            raise ContactSubmissionNotFoundError(submission_id)
        return submission

    async def mark_as_read(self, submission_id: int) -> ContactSubmission:
        """
        Mark a submission as read.

        Raises:
            ContactSubmissionNotFoundError: If the submission doesn't exist
        """
        try:
            submission = await self.contact_repo.mark_read(submission_id)
        except Exception as e:
            logger.error(f"Failed to mark contact submission {submission_id} as read: {e}", exc_info=True)
            raise InternalServerError("Failed to mark submission as read")

        if submission is None:
            raise ContactSubmissionNotFoundError(submission_id)

        logger.info(f"Contact submission {submission_id} marked as read")
        return submission
