"""OpenAI wrapper.

Turns raw resume text into a resume-like layout with one chat completion.
"""
from __future__ import annotations

from typing import Tuple

from openai import OpenAI

from resume_ready.errors import OrganizationFailed

SYSTEM_PROMPT = (
    "You are an assistant that organizes the following text into a structured format "
    "similar to a resume layout. Use commas to separate items where appropriate, and list "
    "information in a clear, concise manner with each point or category distinctly separated. "
    "Maintain the original order of the text without adding introductory messages or "
    "additional instructions."
)


def organize_prompt(text: str) -> str:
    return f"Organize and categorize the following text: {text}"


def client_ready(api_key: str) -> Tuple[bool, str]:
    if not (api_key or "").strip():
        return False, "OPENAI_API_KEY is missing"
    return True, ""


class TextOrganizer:
    """Chat completion client bound to one model and output budget."""

    def __init__(self, client: OpenAI, model: str = "gpt-4o-mini", max_tokens: int = 2000):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, cfg) -> "TextOrganizer":
        client = None
        ok, _ = client_ready(cfg["OPENAI_API_KEY"])
        if ok:
            client = OpenAI(api_key=cfg["OPENAI_API_KEY"].strip(), timeout=cfg["OPENAI_TIMEOUT"])
        return cls(client, model=cfg["OPENAI_MODEL"], max_tokens=cfg["OPENAI_MAX_TOKENS"])

    @property
    def ready(self) -> bool:
        return self.client is not None

    def organize(self, text: str) -> str:
        if self.client is None:
            raise OrganizationFailed() from RuntimeError("OPENAI_API_KEY is missing")
        try:
            res = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": organize_prompt(text)},
                ],
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            raise OrganizationFailed() from e
        content = ""
        if res.choices:
            content = res.choices[0].message.content or ""
        if not content:
            raise OrganizationFailed()
        return content
