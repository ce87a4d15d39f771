"""
Contact submission repository.
Submissions are created, read and marked as read; they are never edited.
"""

from typing import Optional, List, Dict, Any
import copy
import logging

from estate_api.repositories.base import DeletableRepository
from estate_api.models.contact import ContactSubmission

logger = logging.getLogger(__name__)


class ContactSubmissionRepository(DeletableRepository[ContactSubmission]):
    """Repository for inquiries sent through the contact form."""

    def __init__(self, clock=None):
        super().__init__(ContactSubmission, clock)

    def _server_values(self) -> Dict[str, Any]:
        return {"submitted_at": self.clock(), "is_read": False}

    async def mark_read(self, id: int) -> Optional[ContactSubmission]:
        """
        Mark a submission as read.

        Marking an already read submission is allowed and changes nothing.

        Args:
            id: Identifier of the submission

        Returns:
            Updated submission if found, None otherwise
        """
        with self._lock:
            submission = self._rows.get(id)
            if submission is None:
                logger.debug(f"ContactSubmission with id {id} not found for mark-read")
                return None

            if not submission.is_read:
                # is_read is server-owned, so it bypasses the generic merge
                submission = copy.deepcopy(submission)
                submission.is_read = True
                self._rows[id] = submission
                logger.debug(f"Marked ContactSubmission {id} as read")

            return copy.deepcopy(submission)

    async def get_unread(self) -> List[ContactSubmission]:
        """Get submissions nobody has read yet."""
        return await self.filter_by(lambda submission: not submission.is_read)
