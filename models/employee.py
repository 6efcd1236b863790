# models/employee.py
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class EmployeeCreate(BaseModel):
    name: str
    email: str
    mobile: str
    designation: str
    gender: Gender
    course: str
    image: str  # base64 encoded image bytes


class Employee(EmployeeCreate):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Employee":
        data = {k: v for k, v in document.items() if k != "_id"}
        data["id"] = str(document["_id"])
        return cls.model_validate(data)


class EmployeeCreatedResponse(BaseModel):
    success: bool = True
    message: str
    employee: Employee


class EmployeeListResponse(BaseModel):
    employees: List[Employee]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
