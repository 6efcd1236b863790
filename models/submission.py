# models/submission.py
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class ImageFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class SubmissionDraft(BaseModel):
    """In-progress form state; lives only until the create succeeds."""
    name: str = ""
    email: str = ""
    mobile: str = ""
    designation: str = ""
    gender: str = "Male"
    course: str = ""
    image: Optional[ImageFile] = None

    def fields(self) -> Dict[str, str]:
        return self.model_dump(exclude={"image"})
