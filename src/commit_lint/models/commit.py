"""Commit model holding a commit's identifier and message."""

from pydantic import BaseModel

PARAGRAPH_SEPARATOR = "\n\n"


class Commit(BaseModel):
    """A single git commit as read from the repository log."""

    hash: str
    message: str

    model_config = {"frozen": True}

    @property
    def subject(self) -> str:
        """First paragraph of the commit message."""
        return self.message.split(PARAGRAPH_SEPARATOR)[0]

    @property
    def body(self) -> str:
        """Paragraphs after the subject, joined without a separator."""
        parts = self.message.split(PARAGRAPH_SEPARATOR)
        if len(parts) > 1:
            return "".join(parts[1:])
        return ""
