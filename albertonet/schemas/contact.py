from typing import List, Literal

from pydantic import BaseModel, Field


class ContactForm(BaseModel):
    """Raw form input; every field may be missing or blank."""

    name: str = ""
    email: str = ""
    message: str = ""
    isCompany: bool = False


class ContactMessage(BaseModel):
    name: str
    email: str
    message: str
    isCompany: bool = False


class ContactResult(BaseModel):
    status: Literal["send", "error"]
    errors: List[str] = Field(default_factory=list)
    name: str = ""
    email: str = ""
    message: str = ""
    isCompany: bool = False
