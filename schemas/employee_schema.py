# schemas/employee_schema.py
from typing import Any, Dict, Mapping, Optional, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from models.employee import EmployeeCreate, Gender
from models.submission import ImageFile, SubmissionDraft
from utils.image_utils import encode_image

DEFAULT_MAX_IMAGE_SIZE = 5 * 1024 * 1024


def _required(value: Any, message: str) -> str:
    if not isinstance(value, str) or len(value) < 1:
        raise PydanticCustomError("required", message)
    return value


class EmployeeSubmission(BaseModel):
    """
    Shape of a valid employee submission.

    Every rule raises a single, human readable message so the failures can be
    shown next to the form field or joined into one response message.
    """
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    email: str = ""
    mobile: str = ""
    designation: str = ""
    gender: Optional[Gender] = None
    course: str = ""
    image: Optional[bytes] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value):
        return _required(value, "Name is required")

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value):
        if not isinstance(value, str):
            raise PydanticCustomError("email", "Invalid email format")
        # Bare addresses only, "Name <addr>" display forms are rejected
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("email", "Invalid email format")
        return value

    @field_validator("mobile", mode="before")
    @classmethod
    def check_mobile(cls, value):
        # Length only; the value is not required to be numeric
        if not isinstance(value, str) or len(value) < 10:
            raise PydanticCustomError("mobile", "Mobile number must be at least 10 digits")
        return value

    @field_validator("designation", mode="before")
    @classmethod
    def check_designation(cls, value):
        return _required(value, "Designation is required")

    @field_validator("gender", mode="before")
    @classmethod
    def check_gender(cls, value):
        if value not in [g.value for g in Gender]:
            raise PydanticCustomError("gender", "Gender is required")
        return value

    @field_validator("course", mode="before")
    @classmethod
    def check_course(cls, value):
        return _required(value, "Course is required")

    @field_validator("image", mode="before")
    @classmethod
    def check_image(cls, value, info: ValidationInfo):
        if isinstance(value, ImageFile):
            value = value.data
        if not value:
            raise PydanticCustomError("image", "Image is required")
        limit = (info.context or {}).get("max_image_size", DEFAULT_MAX_IMAGE_SIZE)
        if len(value) > limit:
            raise PydanticCustomError(
                "image_size",
                "Max image size is {limit_mb}MB",
                {"limit_mb": limit // (1024 * 1024)},
            )
        return value


class ValidationResult(BaseModel):
    value: Optional[EmployeeCreate] = None
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return ", ".join(self.errors.values())


def validate_employee(
    candidate: Union[Mapping[str, Any], SubmissionDraft],
    max_image_size: int = DEFAULT_MAX_IMAGE_SIZE,
) -> ValidationResult:
    """Check a candidate submission; on success the image comes back base64 encoded."""
    if isinstance(candidate, SubmissionDraft):
        data = {**candidate.fields(), "image": candidate.image}
    else:
        data = dict(candidate)

    try:
        submission = EmployeeSubmission.model_validate(
            data, context={"max_image_size": max_image_size}
        )
    except PydanticValidationError as exc:
        errors = {}
        for error in exc.errors():
            field_name = str(error["loc"][0]) if error["loc"] else "__root__"
            errors.setdefault(field_name, error["msg"])
        return ValidationResult(errors=errors)

    value = EmployeeCreate(
        name=submission.name,
        email=submission.email,
        mobile=submission.mobile,
        designation=submission.designation,
        gender=submission.gender,
        course=submission.course,
        image=encode_image(submission.image),
    )
    return ValidationResult(value=value)
