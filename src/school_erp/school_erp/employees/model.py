from __future__ import annotations

from dataclasses import dataclass, fields

from ..common.numbers import as_number, compact_number
from ..store.schema import EMPLOYEES_MASTER

_COLUMNS = (
    "employee_id", "name", "post", "phone1", "email", "joining_date", "salary",
    "father_name", "mother_name", "dob", "gender", "qualification", "experience",
    "address", "phone2", "aadhaar", "pan", "bank_account", "ifsc", "photo_url",
)


def _wire(attr: str) -> str:
    head, *rest = attr.split("_")
    return head + "".join(p.capitalize() for p in rest)


@dataclass(frozen=True)
class Employee:
    """Domain entity: staff member keyed by sequential employee ID."""

    employee_id: str
    name: str = ""
    post: str = ""
    phone1: str = ""
    email: str = ""
    joining_date: str = ""
    salary: float = 0.0
    father_name: str = ""
    mother_name: str = ""
    dob: str = ""
    gender: str = ""
    qualification: str = ""
    experience: str = ""
    address: str = ""
    phone2: str = ""
    aadhaar: str = ""
    pan: str = ""
    bank_account: str = ""
    ifsc: str = ""
    photo_url: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "Employee":
        cells = list(row) + [""] * (len(EMPLOYEES_MASTER.headers) - len(row))
        values = dict(zip(_COLUMNS, (str(c) for c in cells)))
        values["salary"] = as_number(values["salary"])
        return cls(**values)

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        values = {}
        for f in fields(cls):
            wire = _wire(f.name)
            if data.get(wire) is not None:
                values[f.name] = data[wire]
        values["employee_id"] = str(values.get("employee_id", "")).strip()
        values["salary"] = as_number(values.get("salary", 0))
        return cls(**{k: (v if k == "salary" else str(v)) for k, v in values.items()})

    def to_row(self) -> list[object]:
        return [compact_number(self.salary) if c == "salary" else getattr(self, c) for c in _COLUMNS]

    def to_dict(self) -> dict:
        out = {_wire(c): getattr(self, c) for c in _COLUMNS}
        out["salary"] = compact_number(self.salary)
        return out
