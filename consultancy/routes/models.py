"""Pydantic request models for API endpoints."""

import re
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

_EMAIL_RE = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

DeliveryMode = Literal["online", "offline", "both"]
ContactStatus = Literal["pending", "read", "responded"]


def _check_email(value: str | None) -> str | None:
    if value is not None and not _EMAIL_RE.fullmatch(value.strip()):
        raise ValueError("Invalid email address")
    return value.strip() if value is not None else None


def _check_iso_date(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("Date must be in ISO 8601 format, e.g. 2027-01-17") from None
    return value


class CreateService(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    icon: str = Field(min_length=1)
    features: list[str]


class UpdateService(BaseModel):
    title: str | None = None
    description: str | None = None
    icon: str | None = None
    features: list[str] | None = None


class CreateTrainingProgram(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)
    duration: str = Field(min_length=1)
    slug: str | None = None
    price: int | None = None
    online_price: int | None = None
    offline_price: int | None = None
    delivery_mode: DeliveryMode | None = None
    image_path: str | None = None


class UpdateTrainingProgram(BaseModel):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    duration: str | None = None
    slug: str | None = None
    price: int | None = None
    online_price: int | None = None
    offline_price: int | None = None
    delivery_mode: DeliveryMode | None = None
    image_path: str | None = None


class CreateParticipant(BaseModel):
    participant_id: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    email: str
    phone: str | None = None
    training_program_id: int
    enrollment_date: str | None = None
    status: str = "active"

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _check_email(value)


class UpdateParticipant(BaseModel):
    participant_id: str | None = None
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    training_program_id: int | None = None
    enrollment_date: str | None = None
    status: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _check_email(value)


class CreateCertificate(BaseModel):
    certificate_id: str = Field(min_length=1)
    participant_id: int
    training_program_id: int
    issue_date: str
    expiry_date: str | None = None
    certificate_path: str | None = None

    @field_validator("issue_date", "expiry_date")
    @classmethod
    def check_dates(cls, value: str | None) -> str | None:
        return _check_iso_date(value)


class UpdateCertificate(BaseModel):
    certificate_id: str | None = None
    participant_id: int | None = None
    training_program_id: int | None = None
    issue_date: str | None = None
    expiry_date: str | None = None
    certificate_path: str | None = None

    @field_validator("issue_date", "expiry_date")
    @classmethod
    def check_dates(cls, value: str | None) -> str | None:
        return _check_iso_date(value)


class VerifyCertificateBody(BaseModel):
    certificate_id: str = Field(min_length=1)
    participant_name: str = Field(min_length=1)


class CheckStatusBody(BaseModel):
    participant_id: str | None = None
    email: str | None = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _check_email(value)


class ContactForm(BaseModel):
    name: str = Field(min_length=1)
    email: str
    phone: str | None = None
    subject: str = Field(min_length=1)
    message: str = Field(min_length=10)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str | None:
        return _check_email(value)


class UpdateContactStatus(BaseModel):
    status: ContactStatus


class UpdateSettings(BaseModel):
    site_name: str | None = None
    site_url: str | None = None
    default_description: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    social_links: dict[str, str] | None = None
