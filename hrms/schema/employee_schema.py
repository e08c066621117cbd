from pydantic import BaseModel, ConfigDict, Field as field


class EmployeeSchema(BaseModel):
    """Employee payload accepted on create and update."""

    name: str = field(..., description="Full name of the employee")
    salary: float = field(..., description="Salary of the employee")
    age: float = field(..., description="Age of the employee")

    # any client-supplied "id" is dropped, the store assigns identifiers;
    # numbers must be JSON numbers, no numeric strings, booleans or NaN
    model_config = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)

    def update_fields(self) -> dict:
        return {"name": self.name, "age": self.age, "salary": self.salary}


class EmployeeResponse(EmployeeSchema):
    """Employee as returned to clients."""

    id: str = field(..., description="Store-assigned employee ID")
