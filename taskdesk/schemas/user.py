from typing import Optional

from pydantic import BaseModel, field_validator
from taskdesk.schemas.validators import encodable_text


class SignupRequest(BaseModel):
    # email/password stay optional here so the router can answer with its own
    # "required" message instead of a schema error
    name: Optional[str] = None
    emailid: Optional[str] = None
    password: Optional[str] = None

    @field_validator("name", "emailid", "password")
    @classmethod
    def text_is_encodable(cls, v):
        return encodable_text(v)


class SigninRequest(BaseModel):
    emailid: Optional[str] = None
    password: Optional[str] = None

    @field_validator("emailid", "password")
    @classmethod
    def text_is_encodable(cls, v):
        return encodable_text(v)


class MessageResponse(BaseModel):
    message: str


class SigninResponse(BaseModel):
    message: str
    user: int
