"""Lead and contact form schemas."""
from pydantic import ConfigDict, EmailStr, Field

from studio.schemas.common import CamelModel


class _FormBase(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=200)
    budget: str | None = Field(default=None, max_length=100)
    timeline: str | None = Field(default=None, max_length=100)


class LeadRequest(_FormBase):
    """Project inquiry from the lead-capture modal."""

    project_description: str = Field(min_length=1, max_length=5000)


class ContactRequest(_FormBase):
    """Message from the contact page."""

    message: str = Field(min_length=1, max_length=5000)
    project_type: str | None = Field(default=None, max_length=100)
