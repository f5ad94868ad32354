"""
Validation Module - Typed request payloads checked at the API boundary

Each entity has a pydantic model describing its insert payload. The
validate_* functions take the raw decoded JSON body and return a plain dict
of cleaned fields, or raise ValidationError naming the offending fields.
With partial=True only the provided fields are validated, which is what the
update routes use.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError


SKILL_CATEGORIES = ('Frontend', 'Backend', 'Tools')
DEFAULT_PROJECT_LINK = '#'

_MISSING_ERRORS = {'missing', 'string_too_short'}


class Payload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore', validate_assignment=True)


class ProfilePayload(Payload):
    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    bio: str = Field(min_length=1)
    email: EmailStr
    github: Optional[str] = ''
    linkedin: Optional[str] = ''

    @field_validator('github', 'linkedin')
    @classmethod
    def blank_to_empty(cls, value):
        return '' if value is None else value


class ProjectPayload(Payload):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image: str = Field(min_length=1)
    link: Optional[str] = DEFAULT_PROJECT_LINK
    tech: List[str] = Field(default_factory=list)

    @field_validator('link')
    @classmethod
    def default_link(cls, value):
        return value or DEFAULT_PROJECT_LINK

    @field_validator('tech', mode='before')
    @classmethod
    def split_tech(cls, value):
        """Accept a list of strings or a comma separated string"""
        return normalize_tech(value)


class SkillPayload(Payload):
    name: str = Field(min_length=1)
    category: Literal['Frontend', 'Backend', 'Tools']


class ExperiencePayload(Payload):
    role: str = Field(min_length=1)
    company: str = Field(min_length=1)
    period: str = Field(min_length=1)
    description: str = Field(min_length=1)


class CredentialsPayload(BaseModel):
    # Passwords are taken verbatim, only the email is trimmed
    model_config = ConfigDict(extra='ignore')

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator('email', mode='before')
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


class LoginPayload(CredentialsPayload):
    # Format is not checked on login so every failure looks the same
    email: str = Field(min_length=1)


class ContactPayload(Payload):
    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=1, max_length=5000)


def normalize_tech(value):
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    if isinstance(value, (list, tuple)):
        cleaned = []
        for item in value:
            if isinstance(item, str):
                item = item.strip()
                if not item:
                    continue
            cleaned.append(item)
        return cleaned
    return value


def _error_fields(exc):
    fields = {}
    for error in exc.errors():
        loc = error.get('loc') or ('body',)
        fields.setdefault(str(loc[0]), error.get('msg', 'Invalid value'))
    return fields


def _raise_from(exc):
    fields = _error_fields(exc)
    missing = sorted({
        str((error.get('loc') or ('body',))[0])
        for error in exc.errors()
        if error.get('type') in _MISSING_ERRORS
    })
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", fields=fields) from exc
    raise ValidationError(fields=fields) from exc


def validate_payload(model, data, partial=False):
    """Validate raw input against a payload model and return the cleaned dict"""
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    if not partial:
        try:
            return model.model_validate(data).model_dump()
        except PydanticValidationError as exc:
            _raise_from(exc)

    provided = {name: data[name] for name in model.model_fields if name in data}
    if not provided:
        raise ValidationError('No updatable fields provided')

    instance = model.model_construct()
    cleaned = {}
    fields = {}
    for name, value in provided.items():
        try:
            setattr(instance, name, value)
        except PydanticValidationError as exc:
            fields.update(_error_fields(exc))
            continue
        cleaned[name] = getattr(instance, name)
    if fields:
        raise ValidationError(fields=fields)
    return cleaned


def validate_profile(data, partial=False):
    return validate_payload(ProfilePayload, data, partial)


def validate_project(data, partial=False):
    return validate_payload(ProjectPayload, data, partial)


def validate_skill(data, partial=False):
    return validate_payload(SkillPayload, data, partial)


def validate_experience(data, partial=False):
    return validate_payload(ExperiencePayload, data, partial)


def validate_credentials(data):
    return validate_payload(CredentialsPayload, data)


def validate_login(data):
    return validate_payload(LoginPayload, data)


def validate_contact(data):
    return validate_payload(ContactPayload, data)
