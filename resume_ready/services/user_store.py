"""MongoDB access for user records."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection


@dataclass(frozen=True)
class UpdateOutcome:
    matched_count: int
    modified_count: int

    @property
    def matched(self) -> bool:
        return self.matched_count > 0

    @property
    def modified(self) -> bool:
        return self.modified_count > 0


class UserStore:
    """User documents keyed by their ``userId`` field."""

    def __init__(self, collection: Collection, client: Optional[MongoClient] = None):
        self.collection = collection
        self.client = client

    @classmethod
    def from_uri(cls, uri: str, db_name: str = "resume-ready", collection: str = "users") -> "UserStore":
        # MongoClient connects lazily; the first query surfaces connection errors.
        client = MongoClient(uri)
        return cls(client[db_name][collection], client=client)

    def find_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"userId": user_id})

    def set_resume(self, user_id: str, resume: str) -> UpdateOutcome:
        result = self.collection.update_one({"userId": user_id}, {"$set": {"resume": resume}})
        return UpdateOutcome(result.matched_count, result.modified_count)

    def ping(self) -> None:
        if self.client is not None:
            self.client.admin.command("ping")

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
