from fastapi import APIRouter, Depends, Request, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from hrms.core.config.database import get_database
from hrms.model.employee_id import EmployeeId
from hrms.schema.employee_schema import EmployeeResponse, EmployeeSchema
from hrms.service.employee_service import EmployeeService
from hrms.utils.exceptions import InvalidBodyError

employee = APIRouter()

EMPLOYEE_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": EmployeeSchema.model_json_schema()}},
    }
}


async def get_service(
    request: Request,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> EmployeeService:
    return EmployeeService(db, request.app.state.settings.employee_collection)


async def read_employee(request: Request) -> EmployeeSchema:
    """Decode the request body by hand so ID errors are reported before body errors"""
    raw = await request.body()
    try:
        return EmployeeSchema.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidBodyError(str(e)) from e


@employee.get("", response_model=list[EmployeeResponse])
async def list_employees(employee_service: EmployeeService = Depends(get_service)):
    """List every employee in store order"""
    return await employee_service.list_employees()


@employee.get("/{id}", response_model=EmployeeResponse)
async def get_employee(id: str, employee_service: EmployeeService = Depends(get_service)):
    employee_id = EmployeeId.parse(id)
    return await employee_service.get_employee(employee_id)


@employee.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=EMPLOYEE_BODY,
)
async def create_employee(
    request: Request, employee_service: EmployeeService = Depends(get_service)
):
    """Create an employee, the store assigns its ID"""
    employee_data = await read_employee(request)
    return await employee_service.create_employee(employee_data)


@employee.put("/{id}", response_model=EmployeeResponse, openapi_extra=EMPLOYEE_BODY)
async def update_employee(
    id: str,
    request: Request,
    employee_service: EmployeeService = Depends(get_service),
):
    """Replace name, salary and age of an employee"""
    employee_id = EmployeeId.parse(id)
    employee_data = await read_employee(request)
    return await employee_service.update_employee(employee_id, employee_data)


@employee.delete("/{id}")
async def delete_employee(
    id: str, employee_service: EmployeeService = Depends(get_service)
) -> str:
    employee_id = EmployeeId.parse(id)
    return await employee_service.delete_employee(employee_id)
