"""
API Blueprint - resume import from an uploaded PDF

Steps run strictly in order and the first failure ends the request:
extract text, organize it with OpenAI, confirm the user exists, save the resume.
"""
from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from resume_ready.errors import InvalidRequest, ResumeImportError, UpdateNotApplied, UserNotFound
from resume_ready.services import pdf_service

api_bp = Blueprint("api", __name__)


def get_organizer():
    return current_app.extensions["text_organizer"]


def get_user_store():
    return current_app.extensions["user_store"]


def import_resume(data: bytes, user_id: str) -> str:
    """Run the import pipeline for one upload and return the organized text."""
    log = current_app.logger

    try:
        extracted_text = pdf_service.extract_pdf_text(data)
    except ResumeImportError as e:
        log.error("No text extracted from PDF: %r", e.__cause__)
        raise
    log.info("Extracted PDF text: %s", extracted_text)

    try:
        organized_text = get_organizer().organize(extracted_text)
    except ResumeImportError as e:
        log.error("Failed to receive organized text from OpenAI: %r", e.__cause__)
        raise
    log.info("Organized text from OpenAI: %s", organized_text)

    store = get_user_store()
    log.info("Attempting to update MongoDB with userId: %s", user_id)

    if store.find_user(user_id) is None:
        log.error("User not found in MongoDB with userId: %s", user_id)
        raise UserNotFound()

    outcome = store.set_resume(user_id, organized_text)
    if not outcome.matched:
        log.error("No user document matched the query for userId: %s", user_id)
        raise UserNotFound("Failed to update resume, user not found")
    if not outcome.modified:
        log.warning("User document found but resume not updated for userId: %s", user_id)
        raise UpdateNotApplied()

    log.info("Resume updated successfully in MongoDB for userId: %s", user_id)
    return organized_text


# ============ API Routes ============

@api_bp.route("/api/extract-pdf-text", methods=["POST"])
def extract_pdf_text():
    try:
        file = request.files.get("file")
        user_id = request.form.get("userId") or ""
        data = file.read() if file else b""
        if not data or not user_id.strip():
            raise InvalidRequest()

        organized_text = import_resume(data, user_id)
    except ResumeImportError as e:
        return jsonify({"error": e.message}), e.status_code
    except HTTPException:
        raise
    except Exception as e:
        current_app.logger.exception("Error processing PDF: %s", e)
        return jsonify({"error": str(e) or "Error processing PDF"}), 500

    return jsonify({"message": "PDF processed and saved successfully", "organizedText": organized_text}), 200
