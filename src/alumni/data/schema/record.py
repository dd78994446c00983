from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import pandas as pd

# Dataset header names, in the order the registration export writes them
NAME = "Student_Name"
EMAIL = "Email"
DEPARTMENT = "Department"
PASSING_YEAR = "Passing_Year"
ADDRESS = "Current_Address"
DESIGNATION = "Designation"
COMPANY = "Company_or_Business"
PACKAGE = "Current_Package"
FEEDBACK = "Feedback"
PHOTO_STATUS = "Photo_Status"
REGISTRATION_DATE = "Registration_Date"
REGISTRATION_TIME = "Registration_Time"

FIELDS = (
    NAME,
    EMAIL,
    DEPARTMENT,
    PASSING_YEAR,
    ADDRESS,
    DESIGNATION,
    COMPANY,
    PACKAGE,
    FEEDBACK,
    PHOTO_STATUS,
    REGISTRATION_DATE,
    REGISTRATION_TIME,
)


class Record(Mapping[str, str]):
    """One alumnus row: an immutable field -> string mapping.

    Unknown fields read as "" through the convenience properties; extra
    columns from the dataset header are kept as-is.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        object.__setattr__(self, "_data", {str(k): "" if v is None else str(v) for k, v in dict(data).items()})

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError("Record is immutable")

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    def __repr__(self) -> str:
        return f"Record({self._data!r})"

    def field(self, key: str) -> str:
        return self._data.get(key, "")

    @property
    def name(self) -> str:
        return self.field(NAME)

    @property
    def department(self) -> str:
        return self.field(DEPARTMENT)

    @property
    def passing_year(self) -> str:
        return self.field(PASSING_YEAR)

    @property
    def designation(self) -> str:
        return self.field(DESIGNATION)

    @property
    def company(self) -> str:
        return self.field(COMPANY)

    @property
    def package(self) -> str:
        return self.field(PACKAGE)

    @property
    def feedback(self) -> str:
        return self.field(FEEDBACK)


def records_frame(records: Iterable[Record], columns: Iterable[str] | None = None) -> pd.DataFrame:
    """Tabular view of records (one row per record, index = position).

    Missing fields become "" so string comparisons never see NaN.
    """
    rows = [dict(r) for r in records]
    if columns is None:
        cols: list[str] = []
        for r in rows:
            for k in r:
                if k not in cols:
                    cols.append(k)
    else:
        cols = list(columns)
    df = pd.DataFrame(rows, columns=cols, dtype="object")
    return df.fillna("").reset_index(drop=True)
