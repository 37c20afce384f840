from typing import Optional

from pydantic import BaseModel, ConfigDict


class ContactSubmission(BaseModel):
    """Untrusted contact form body; every field may be missing."""

    model_config = ConfigDict(extra="ignore", strict=True)

    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool
    message: str
