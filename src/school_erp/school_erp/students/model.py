from __future__ import annotations

from dataclasses import asdict, dataclass, fields

from ..common.numbers import as_number, compact_number
from ..store.schema import STUDENTS_MASTER

# Sheet column order for each attribute.
_COLUMNS = (
    "admission_no", "roll_no", "name", "class_name", "section", "status",
    "father_name", "mother_name", "dob", "phone1", "phone2", "address",
    "aadhaar", "samagra_id", "joining_date", "total_fees", "photo_url",
)

_WIRE_NAMES = {
    "admission_no": "admissionNo",
    "roll_no": "rollNo",
    "class_name": "class",
    "father_name": "fatherName",
    "mother_name": "motherName",
    "samagra_id": "samagraId",
    "joining_date": "joiningDate",
    "total_fees": "totalFees",
    "photo_url": "photoUrl",
}


@dataclass(frozen=True)
class Student:
    """Domain entity: a student keyed by admission number."""

    admission_no: str
    roll_no: str = ""
    name: str = ""
    class_name: str = ""
    section: str = ""
    status: str = "Active"
    father_name: str = ""
    mother_name: str = ""
    dob: str = ""
    phone1: str = ""
    phone2: str = ""
    address: str = ""
    aadhaar: str = ""
    samagra_id: str = ""
    joining_date: str = ""
    total_fees: float = 0.0
    photo_url: str = ""

    @classmethod
    def from_row(cls, row: list[str]) -> "Student":
        cells = list(row) + [""] * (len(STUDENTS_MASTER.headers) - len(row))
        values = dict(zip(_COLUMNS, (str(c) for c in cells)))
        values["total_fees"] = as_number(values["total_fees"])
        return cls(**values)

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        names = {f.name for f in fields(cls)}
        values = {}
        for attr in names:
            wire = _WIRE_NAMES.get(attr, attr)
            if wire in data and data[wire] is not None:
                values[attr] = data[wire]
        values["admission_no"] = str(values.get("admission_no", "")).strip()
        values["total_fees"] = as_number(values.get("total_fees", 0))
        return cls(**{k: (v if k == "total_fees" else str(v)) for k, v in values.items()})

    def to_row(self) -> list[object]:
        return [compact_number(self.total_fees) if c == "total_fees" else getattr(self, c) for c in _COLUMNS]

    def to_dict(self) -> dict:
        data = asdict(self)
        out = {_WIRE_NAMES.get(k, k): v for k, v in data.items()}
        out["totalFees"] = compact_number(self.total_fees)
        return out

    @property
    def is_active(self) -> bool:
        return self.status == "Active"
