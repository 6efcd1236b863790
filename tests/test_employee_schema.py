import pytest
from pydantic import ValidationError as PydanticValidationError

from conftest import make_image

from models.employee import Gender
from models.submission import ImageFile, SubmissionDraft
from schemas.employee_schema import validate_employee
from utils.image_utils import encode_image


def _candidate(**overrides):
    data = {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "mobile": "1234567890",
        "designation": "Engineer",
        "gender": "Female",
        "course": "CS",
        "image": make_image(2 * 1024 * 1024),
    }
    data.update(overrides)
    return data


def test_valid_submission_is_normalized():
    image = make_image(2 * 1024 * 1024)
    result = validate_employee(_candidate(image=image))

    assert result.ok
    assert result.errors == {}
    assert result.value.gender is Gender.FEMALE
    assert result.value.image == encode_image(image)


def test_every_broken_field_reports_its_own_message():
    result = validate_employee({"gender": "unknown"})

    assert not result.ok
    assert result.errors == {
        "name": "Name is required",
        "email": "Invalid email format",
        "mobile": "Mobile number must be at least 10 digits",
        "designation": "Designation is required",
        "gender": "Gender is required",
        "course": "Course is required",
        "image": "Image is required",
    }
    assert result.message.startswith("Name is required, Invalid email format, ")


def test_mobile_is_checked_by_length_only():
    assert not validate_employee(_candidate(mobile="12345")).ok
    assert validate_employee(_candidate(mobile="call me now")).ok


def test_gender_must_match_enumeration_exactly():
    result = validate_employee(_candidate(gender="female"))
    assert result.errors == {"gender": "Gender is required"}


def test_image_larger_than_limit_is_rejected():
    result = validate_employee(_candidate(image=make_image(6 * 1024 * 1024)))
    assert result.errors == {"image": "Max image size is 5MB"}


def test_image_exactly_at_limit_is_accepted():
    assert validate_employee(_candidate(image=make_image(5 * 1024 * 1024))).ok


def test_custom_image_limit():
    result = validate_employee(_candidate(image=make_image(2 * 1024 * 1024)), max_image_size=1024 * 1024)
    assert result.errors == {"image": "Max image size is 1MB"}


def test_draft_is_accepted_as_candidate():
    draft = SubmissionDraft(
        name="Jane Doe",
        email="jane@x.com",
        mobile="1234567890",
        designation="Engineer",
        gender="Other",
        course="CS",
        image=ImageFile(filename="jane.png", content_type="image/png", data=make_image(512)),
    )
    result = validate_employee(draft)
    assert result.ok
    assert result.value.gender is Gender.OTHER


def test_empty_draft_image_is_missing():
    draft = SubmissionDraft(name="Jane", email="jane@x.com", mobile="1234567890",
                            designation="Engineer", course="CS")
    assert validate_employee(draft).errors == {"image": "Image is required"}


def test_display_name_email_is_rejected():
    result = validate_employee(_candidate(email="Jane Doe <jane@x.com>"))
    assert result.errors == {"email": "Invalid email format"}


def test_email_is_kept_as_submitted():
    assert validate_employee(_candidate(email="jane@x.com")).value.email == "jane@x.com"


def test_draft_fields_leave_out_the_image():
    image = ImageFile(filename="jane.png", content_type="image/png", data=make_image(256))
    draft = SubmissionDraft(name="Jane", image=image)

    assert draft.fields() == {"name": "Jane", "email": "", "mobile": "", "designation": "",
                              "gender": "Male", "course": ""}
    assert image.size == 256
    with pytest.raises(PydanticValidationError):
        image.filename = "other.png"
