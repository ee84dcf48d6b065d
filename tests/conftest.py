"""
Test Configuration and Fixtures
"""
import pytest

from resume_ready import create_app
from resume_ready.errors import OrganizationFailed
from resume_ready.services.user_store import UpdateOutcome


class FakeUserStore:
    """In-memory stand-in for the MongoDB users collection"""

    def __init__(self):
        self.users = {}
        self.vanish_before_update = False
        self.suppress_writes = False
        self.ping_error = None

    def add_user(self, user_id, **fields):
        self.users[user_id] = {"userId": user_id, **fields}

    def find_user(self, user_id):
        return self.users.get(user_id)

    def set_resume(self, user_id, resume):
        if self.vanish_before_update:
            self.users.pop(user_id, None)
        user = self.users.get(user_id)
        if user is None:
            return UpdateOutcome(0, 0)
        if self.suppress_writes or user.get("resume") == resume:
            return UpdateOutcome(1, 0)
        user["resume"] = resume
        return UpdateOutcome(1, 1)

    def ping(self):
        if self.ping_error:
            raise self.ping_error


class FakeOrganizer:
    """Returns a canned reply and records the text it was asked to organize"""

    ready = True

    def __init__(self, reply="Name: Test User"):
        self.reply = reply
        self.calls = []

    def organize(self, text):
        self.calls.append(text)
        if not self.reply:
            raise OrganizationFailed()
        return self.reply


@pytest.fixture
def user_store():
    return FakeUserStore()


@pytest.fixture
def organizer():
    return FakeOrganizer()


@pytest.fixture
def app(user_store, organizer):
    """Create application for testing"""
    app = create_app('testing', user_store=user_store, text_organizer=organizer)
    yield app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def extracted(monkeypatch):
    """Pin the PDF extractor to a fixed text layer"""
    state = {"text": "John Doe, Software Engineer, 5 years experience", "calls": 0}

    def fake_extract(data):
        state["calls"] += 1
        return state["text"]

    monkeypatch.setattr("resume_ready.services.pdf_service.extract_pdf_text", fake_extract)
    return state
