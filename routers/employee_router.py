# routers/employee_router.py
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from config import Settings
from models.employee import EmployeeCreatedResponse, EmployeeListResponse, ErrorResponse
from services.employee_service import add_employee, get_employees
from services.employee_store import EmployeeStore

router = APIRouter(prefix="/api/Employee", tags=["employees"])


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post(
    "",
    status_code=201,
    response_model=EmployeeCreatedResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def api_add_employee(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    mobile: Optional[str] = Form(None),
    designation: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    course: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    store: EmployeeStore = Depends(get_employee_store),
    settings: Settings = Depends(get_app_settings),
):
    fields = {
        "name": name,
        "email": email,
        "mobile": mobile,
        "designation": designation,
        "gender": gender,
        "course": course,
    }
    image_data = await image.read() if image is not None else None

    employee = await add_employee(store, fields, image_data, settings.MAX_IMAGE_SIZE)
    return EmployeeCreatedResponse(message="Employee added successfully", employee=employee)


@router.get("", response_model=EmployeeListResponse, responses={500: {"model": ErrorResponse}})
async def api_get_employees(store: EmployeeStore = Depends(get_employee_store)):
    return EmployeeListResponse(employees=await get_employees(store))
