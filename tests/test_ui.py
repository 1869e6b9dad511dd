# tests/test_ui.py - Tests for the Gradio form callbacks
import sys
import pytest
from pathlib import Path
from unittest.mock import patch

project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root))

from jobsheet import ui
from jobsheet.sheets import SheetsAppendError
from jdutils.constants import JOB_FIELDS, MSG_AUTOFILLED, MSG_COMPANY_REQUIRED, MSG_EMPTY_JD, MSG_SAVED

BLANK = tuple("" for _ in JOB_FIELDS)


def _values(**kw):
    return tuple(kw.get(f, "") for f in JOB_FIELDS)


class TestAutofillCallback:
    def test_autofill_fills_fields(self):
        out = ui.autofill_from_jd("Job Title: Data Engineer\nCompany: Globex\nvia Naukri", *BLANK)

        fields = dict(zip(JOB_FIELDS, out[:-1]))
        assert fields["role"] == "Data Engineer"
        assert fields["company"] == "Globex"
        assert fields["source"] == "Naukri"
        assert out[-1].endswith(MSG_AUTOFILLED)

    def test_autofill_empty_jd_leaves_inputs(self):
        values = _values(company="Typed")
        out = ui.autofill_from_jd("  ", *values)

        assert out[:-1] == values
        assert out[-1].endswith(MSG_EMPTY_JD)


class TestSaveCallback:
    def test_save_success_clears_everything(self):
        with patch.object(ui, "sheets_client") as mock_client:
            out = ui.save_job("some jd", *_values(company="Acme", role="SRE"))

        mock_client.append_job.assert_called_once()
        assert out[0] == ""
        assert out[1:-1] == BLANK
        assert out[-1].endswith(MSG_SAVED)

    def test_save_failure_keeps_inputs(self):
        values = _values(company="Acme", role="SRE")
        with patch.object(ui, "sheets_client") as mock_client:
            mock_client.append_job.side_effect = SheetsAppendError("quota exceeded")
            out = ui.save_job("some jd", *values)

        assert out[0] == "some jd"
        assert out[1:-1] == values
        assert out[-1].endswith("quota exceeded")
        assert out[-1].startswith("⚠️")

    def test_save_requires_company(self):
        with patch.object(ui, "sheets_client") as mock_client:
            out = ui.save_job("", *_values(role="SRE"))

        mock_client.append_job.assert_not_called()
        assert out[-1].endswith(MSG_COMPANY_REQUIRED)


def test_build_demo():
    demo = ui.build_demo()
    assert demo is not None
