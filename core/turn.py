from enum import Enum

from pydantic import BaseModel


class Speaker(str, Enum):
    """Who authored a turn. Values double as Messages API roles."""

    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """One message in the conversation — immutable once appended."""

    model_config = {"frozen": True}

    speaker: Speaker
    text: str

    @property
    def is_assistant(self) -> bool:
        return self.speaker is Speaker.ASSISTANT

    def to_message(self) -> dict[str, str]:
        return {"role": self.speaker.value, "content": self.text}
