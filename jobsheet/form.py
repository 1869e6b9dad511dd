# jobsheet/form.py — editable form state: paste JD, auto-fill, edit, submit
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from jdutils.constants import (
    JOB_FIELDS,
    MSG_AUTOFILLED,
    MSG_COMPANY_REQUIRED,
    MSG_EMPTY_JD,
    MSG_GENERIC_FAILURE,
    MSG_SAVED,
)
from jdutils.helpers import blank_record, merge_fields
from jdutils.jd_parsing import parse_jd
from jdutils.logger import setup_logger
from .models import JobRecord

logger = setup_logger(__name__)

Submitter = Callable[[JobRecord], object]


@dataclass
class FormStatus:
    kind: str  # "ok" / "error"
    msg: str


class JobForm:
    """
    One user's form session.

    The submitter is called once per submit() with the current record and
    signals failure by raising; the record survives a failed submit so the
    user can try again.
    """

    def __init__(self, submitter: Submitter, values: Optional[Dict[str, str]] = None, jd: str = ""):
        self.submitter = submitter
        self.values: Dict[str, str] = blank_record()
        if values:
            for key, value in values.items():
                self.update(key, value)
        self.jd = jd
        self.status: Optional[FormStatus] = None
        self.loading = False

    @property
    def record(self) -> JobRecord:
        return JobRecord(**self.values)

    def update(self, field: str, value: Optional[str]) -> None:
        if field not in JOB_FIELDS:
            raise KeyError(field)
        self.values[field] = "" if value is None else str(value)

    def reset(self) -> None:
        self.values = blank_record()
        self.jd = ""

    def autofill(self) -> FormStatus:
        if not self.jd.strip():
            self.status = FormStatus("error", MSG_EMPTY_JD)
            return self.status

        parsed = parse_jd(self.jd)
        self.values = merge_fields(self.values, parsed)
        self.status = FormStatus("ok", MSG_AUTOFILLED)
        return self.status

    def submit(self) -> FormStatus:
        self.status = None
        if not self.values["company"].strip():
            self.status = FormStatus("error", MSG_COMPANY_REQUIRED)
            return self.status

        self.loading = True
        try:
            self.submitter(self.record)
        except Exception as e:
            logger.error(f"Error adding job: {e}")
            self.status = FormStatus("error", str(e) or MSG_GENERIC_FAILURE)
            return self.status
        finally:
            self.loading = False

        self.status = FormStatus("ok", MSG_SAVED)
        self.reset()
        return self.status
