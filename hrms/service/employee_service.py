from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from hrms.model.employee_id import EmployeeId
from hrms.schema.employee_schema import EmployeeResponse, EmployeeSchema
from hrms.utils.exceptions import NotFoundError, NotMatchedError, StoreError
from hrms.utils.helpers import document_to_record
from hrms.utils.logger import Logger

service_logger = Logger(__name__)

EMPLOYEE_COLLECTION = "employees"


def to_response(doc: dict) -> EmployeeResponse:
    """Decode a stored document, a wrongly typed field is a store fault"""
    try:
        return EmployeeResponse(**document_to_record(doc))
    except ValidationError as e:
        service_logger.error(f"Stored employee {doc.get('_id')} is malformed: {e}")
        raise StoreError(str(e)) from e


class EmployeeService:
    """Maps employee operations onto single calls against the employees collection.

    Every pymongo failure is re-raised as StoreError carrying the driver's
    message; nothing is retried.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection: str = EMPLOYEE_COLLECTION):
        self.db = db
        self.employees = db[collection]

    async def list_employees(self) -> list[EmployeeResponse]:
        try:
            employees = [to_response(doc) async for doc in self.employees.find({})]
        except PyMongoError as e:
            service_logger.error(f"Failed to list employees: {e}")
            raise StoreError(str(e)) from e
        return employees

    async def get_employee(self, employee_id: EmployeeId) -> EmployeeResponse:
        try:
            doc = await self.employees.find_one(employee_id.query())
        except PyMongoError as e:
            service_logger.error(f"Failed to fetch employee {employee_id}: {e}")
            raise StoreError(str(e)) from e

        if doc is None:
            raise NotFoundError(f"Employee {employee_id} not found")
        return to_response(doc)

    async def create_employee(self, employee: EmployeeSchema) -> EmployeeResponse:
        """Insert the employee and return it as re-read from the store."""
        try:
            result = await self.employees.insert_one(employee.model_dump())
            doc = await self.employees.find_one({"_id": result.inserted_id})
        except PyMongoError as e:
            service_logger.error(f"Failed to create employee: {e}")
            raise StoreError(str(e)) from e

        if doc is None:
            raise StoreError(f"Employee {result.inserted_id} vanished after insert")

        service_logger.info(f"Created employee {result.inserted_id}")
        return to_response(doc)

    async def update_employee(
        self, employee_id: EmployeeId, employee: EmployeeSchema
    ) -> EmployeeResponse:
        """
        Replace name, salary and age of the matching employee.

        The response echoes the submitted values with the path ID, it is not
        re-read from the store.
        """
        try:
            result = await self.employees.find_one_and_update(
                employee_id.query(), {"$set": employee.update_fields()}
            )
        except PyMongoError as e:
            service_logger.error(f"Failed to update employee {employee_id}: {e}")
            raise StoreError(str(e)) from e

        if result is None:
            raise NotMatchedError(f"No employee matches ID {employee_id}")

        service_logger.info(f"Updated employee {employee_id}")
        return EmployeeResponse(id=str(employee_id), **employee.model_dump())

    async def delete_employee(self, employee_id: EmployeeId) -> str:
        try:
            result = await self.employees.delete_one(employee_id.query())
        except PyMongoError as e:
            service_logger.error(f"Failed to delete employee {employee_id}: {e}")
            raise StoreError(str(e)) from e

        if result.deleted_count < 1:
            raise NotFoundError(f"Employee {employee_id} not found")

        service_logger.info(f"Deleted employee {employee_id}")
        return "record deleted"
