from typing import Optional

from fastapi.responses import JSONResponse

from hrms.utils.exceptions import HrmsError

# stored documents missing a field decode to these
EMPLOYEE_ZERO_VALUES = {"name": "", "salary": 0.0, "age": 0.0}


def document_to_record(doc: dict) -> dict:
    """Expose a stored document's `_id` as a string `id`, filling absent fields"""
    record = {**EMPLOYEE_ZERO_VALUES, **doc}
    record["id"] = str(record.pop("_id", ""))
    return record


def error_response(message: str, code: int = 400, kind: Optional[str] = None) -> JSONResponse:
    """Standard error response format"""
    error = {"code": code, "message": message}
    if kind is not None:
        error["kind"] = kind
    return JSONResponse(status_code=code, content={"success": False, "error": error})


def hrms_error_response(exc: HrmsError) -> JSONResponse:
    return error_response(
        message=exc.message, code=exc.status_code, kind=exc.kind.value
    )
