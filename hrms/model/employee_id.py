from dataclasses import dataclass

from bson import ObjectId

from hrms.utils.exceptions import InvalidIdError


@dataclass(frozen=True)
class EmployeeId:
    """Store-assigned employee identifier, always a valid ObjectId"""

    value: ObjectId

    @classmethod
    def parse(cls, raw: str) -> "EmployeeId":
        # ObjectId.is_valid also accepts 12-byte strings, the API only takes hex
        if not isinstance(raw, str) or len(raw) != 24 or not ObjectId.is_valid(raw):
            raise InvalidIdError(f"Invalid employee ID: {raw!r}")
        return cls(ObjectId(raw))

    def query(self) -> dict:
        return {"_id": self.value}

    def __str__(self) -> str:
        return str(self.value)
