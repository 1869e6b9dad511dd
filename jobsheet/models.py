# jobsheet/models.py — request/response models shared by the API, UI and sheet writer
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jdutils.constants import JOB_FIELDS


class JobRecord(BaseModel):
    """One job application row. Every field is free text and defaults to ""."""

    model_config = ConfigDict(populate_by_name=True)

    source: str = ""
    company: str = ""
    role: str = ""
    yoe: str = ""
    pay: str = ""
    link: str = ""
    applied: str = ""
    applied_date: str = Field(default="", alias="appliedDate")
    responded: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_row(self) -> List[str]:
        """Sheet row: a reserved empty column A, then the fields in column order."""
        return [""] + [getattr(self, f) for f in JOB_FIELDS]

    def as_form(self) -> Dict[str, str]:
        return {f: getattr(self, f) for f in JOB_FIELDS}


class ParseRequest(BaseModel):
    jd: str = ""


class ParseResponse(BaseModel):
    ok: bool
    fields: Dict[str, str] = Field(default_factory=dict)
    message: Optional[str] = None
