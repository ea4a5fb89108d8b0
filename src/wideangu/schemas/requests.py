"""Pydantic schemas for the write-stub endpoints.

Learn: These bodies are deliberately unvalidated. Routes take the raw
parsed JSON (FastAPI still rejects malformed JSON before the handler
runs) and build a model with from_json(). Any JSON value is accepted:
an object supplies whichever fields it has, anything else (array,
string, number, null) supplies none.

Every field is typed Any so whatever the client sends is echoed back
verbatim. Use model_dump(exclude_unset=True) to tell "not sent" apart
from an explicit null.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StubRequest(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    def from_json(cls, body: Any):
        if isinstance(body, dict):
            return cls.model_validate(body)
        return cls()


class InstantCaptureRequest(StubRequest):
    services: Any = None
    location: Any = None
    date: Any = None


class RegisterRequest(StubRequest):
    email: Any = None
    user_type: Any = Field(default=None, alias="userType")
    professional_type: Any = Field(default=None, alias="professionalType")
