"""
Resume import failures and the HTTP status each one is reported with.
"""
from typing import Optional


class ResumeImportError(Exception):
    status_code = 500
    message = "Error processing PDF"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)


class InvalidRequest(ResumeImportError):
    status_code = 400
    message = "File and userId are required"


class ExtractionFailed(ResumeImportError):
    message = "Failed to extract text from PDF"


class OrganizationFailed(ResumeImportError):
    message = "Failed to organize text"


class UserNotFound(ResumeImportError):
    status_code = 404
    message = "User not found"


class UpdateNotApplied(ResumeImportError):
    message = "Resume was not updated"
