# routers/pages_router.py
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import URL

from clients.employee_client import EmployeeApiClient
from config import Settings
from models.submission import ImageFile, SubmissionDraft
from routers.employee_router import get_app_settings
from utils.image_utils import image_data_url
from views.add_employee_form import AddEmployeeFormView
from views.dashboard import DashboardView
from views.notifications import Notification

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "views" / "templates"))
templates.env.filters["image_url"] = image_data_url

router = APIRouter(tags=["pages"], include_in_schema=False)


def get_api_client(request: Request) -> EmployeeApiClient:
    return request.app.state.api_client


async def _image_from_upload(image: Optional[UploadFile]) -> Optional[ImageFile]:
    if image is None or not image.filename:
        return None
    data = await image.read()
    if not data:
        return None
    return ImageFile(
        filename=image.filename,
        content_type=image.content_type or "application/octet-stream",
        data=data,
    )


async def _draft_from_form(name, email, mobile, designation, gender, course, image) -> SubmissionDraft:
    return SubmissionDraft(
        name=name,
        email=email,
        mobile=mobile,
        designation=designation,
        gender=gender,
        course=course,
        image=await _image_from_upload(image),
    )


@router.get("/AddEmployeeForm", response_class=HTMLResponse)
async def add_employee_form(
    request: Request,
    api_client: EmployeeApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_app_settings),
):
    view = AddEmployeeFormView(api_client, settings.MAX_IMAGE_SIZE)
    return templates.TemplateResponse(request, "add_employee_form.html", {"view": view})


@router.post("/AddEmployeeForm", response_class=HTMLResponse)
async def submit_add_employee_form(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    mobile: str = Form(""),
    designation: str = Form(""),
    gender: str = Form("Male"),
    course: str = Form(""),
    image: Optional[UploadFile] = File(None),
    api_client: EmployeeApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_app_settings),
):
    view = AddEmployeeFormView(api_client, settings.MAX_IMAGE_SIZE)
    draft = await _draft_from_form(name, email, mobile, designation, gender, course, image)
    await view.submit(draft)

    if view.redirect_to:
        url = URL(view.redirect_to).include_query_params(notice=view.notification.description)
        return RedirectResponse(str(url), status_code=303)

    status_code = 400 if view.field_errors else 200
    return templates.TemplateResponse(
        request, "add_employee_form.html", {"view": view}, status_code=status_code
    )


@router.get("/dashboard", response_class=HTMLResponse)
@router.get("/employees", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    add: bool = False,
    notice: Optional[str] = None,
    api_client: EmployeeApiClient = Depends(get_api_client),
):
    view = DashboardView(api_client)
    if add:
        view.toggle_add_form()
    await view.mount()
    if notice and view.notification is None:
        view.notification = Notification(title="Success", description=notice)
    return templates.TemplateResponse(request, "dashboard.html", {"view": view})


@router.post("/dashboard", response_class=HTMLResponse)
async def submit_dashboard_form(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    mobile: str = Form(""),
    designation: str = Form(""),
    gender: str = Form(""),
    course: str = Form(""),
    image: Optional[UploadFile] = File(None),
    api_client: EmployeeApiClient = Depends(get_api_client),
):
    view = DashboardView(api_client)
    view.toggle_add_form()
    await view.mount()
    draft = await _draft_from_form(name, email, mobile, designation, gender, course, image)
    await view.submit_inline(draft)
    return templates.TemplateResponse(request, "dashboard.html", {"view": view, "draft": draft})
