# ui.py - Gradio front end for the job tracker form
from __future__ import annotations

from typing import Tuple

import gradio as gr

from jdutils.config import config
from jdutils.constants import APPLIED_CHOICES, FIELD_LABELS, JOB_FIELDS
from .form import FormStatus, JobForm
from .models import JobRecord
from .sheets import SheetsClient

sheets_client = SheetsClient(config)

PLACEHOLDERS = {
    "source": "WellFound, LinkedIn, etc.",
    "role": "Software Engineer Intern",
    "yoe": "0, 1, etc.",
    "pay": "1L – 2L",
    "link": "https://...",
    "applied_date": "YYYY-MM-DD",
    "responded": "e.g. sent assignment, waiting...",
}


def _submit(record: JobRecord):
    return sheets_client.append_job(record)


def format_status(status: FormStatus) -> str:
    icon = "✅" if status.kind == "ok" else "⚠️"
    return f"{icon} {status.msg}"


def _form_from_inputs(jd: str, values: Tuple[str, ...]) -> JobForm:
    return JobForm(_submit, values=dict(zip(JOB_FIELDS, values)), jd=jd or "")


def autofill_from_jd(jd: str, *values: str):
    """Button callback: merge parsed JD fields into the current inputs."""
    form = _form_from_inputs(jd, values)
    status = form.autofill()
    return (*[form.values[f] for f in JOB_FIELDS], format_status(status))


def save_job(jd: str, *values: str):
    """Button callback: append to the sheet; clears the form only on success."""
    form = _form_from_inputs(jd, values)
    status = form.submit()
    return (form.jd, *[form.values[f] for f in JOB_FIELDS], format_status(status))


def build_demo() -> gr.Blocks:
    with gr.Blocks(title="Job Tracker") as demo:
        gr.Markdown(
            "## Job Tracker\n"
            "Fill this form and it will be added directly to your Google Sheet."
        )

        jd_text = gr.Textbox(
            label="Job Description (Paste JD)",
            lines=6,
            placeholder="Paste the full job description here...",
        )
        autofill_btn = gr.Button("Auto-fill from JD (Free)")

        field_inputs = []
        for name in JOB_FIELDS:
            label = FIELD_LABELS[name]
            if name == "applied":
                comp = gr.Dropdown(
                    label=label,
                    choices=[(lbl, value) for value, lbl in APPLIED_CHOICES],
                    value="",
                )
            elif name == "company":
                comp = gr.Textbox(label=f"{label} *")
            elif name == "responded":
                comp = gr.Textbox(label=label, lines=3, placeholder=PLACEHOLDERS[name])
            else:
                comp = gr.Textbox(label=label, placeholder=PLACEHOLDERS.get(name, ""))
            field_inputs.append(comp)

        save_btn = gr.Button("Save Job", variant="primary")
        status_md = gr.Markdown()

        autofill_btn.click(
            autofill_from_jd,
            inputs=[jd_text, *field_inputs],
            outputs=[*field_inputs, status_md],
        )
        save_btn.click(
            save_job,
            inputs=[jd_text, *field_inputs],
            outputs=[jd_text, *field_inputs, status_md],
        )
    return demo


if __name__ == "__main__":
    build_demo().launch()
