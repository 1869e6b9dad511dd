# api.py — FastAPI endpoints + the job tracker form page

from __future__ import annotations

import time
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from jdutils.config import config
from jdutils.constants import MSG_AUTOFILLED, MSG_COMPANY_REQUIRED, MSG_EMPTY_JD, MSG_UNKNOWN_ERROR
from jdutils.jd_parsing import parse_jd
from jdutils.logger import setup_logger
from .health import health_check, health_checker
from .models import JobRecord, ParseRequest, ParseResponse
from .sheets import SheetsClient

logger = setup_logger(__name__)

# Built once at startup; credentials are only checked when a row is appended
sheets_client = SheetsClient(config)


# ---------- FastAPI app ----------

app = FastAPI(title="Job Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


# ---------- API endpoints ----------

@app.post("/api/parse", response_model=ParseResponse)
def parse_endpoint(req: ParseRequest):
    """Run the JD heuristics and return whatever fields were found."""
    if not req.jd.strip():
        return _error(400, MSG_EMPTY_JD)
    return ParseResponse(ok=True, fields=parse_jd(req.jd), message=MSG_AUTOFILLED)


@app.post("/api/jobs")
def add_job(record: JobRecord) -> JSONResponse:
    """
    Append one job row to the sheet.
    - 400 when company is blank (nothing is sent to Google).
    - 500 with a single error string when the append fails.
    """
    if not record.company.strip():
        return _error(400, MSG_COMPANY_REQUIRED)

    start_time = time.time()
    try:
        sheets_client.append_job(record)
    except Exception as e:
        logger.error(f"Error adding job: {e!r}")
        health_checker.record_request(success=False)
        return _error(500, str(e) or MSG_UNKNOWN_ERROR)

    health_checker.record_request(success=True, submit_time=time.time() - start_time)
    return JSONResponse({"ok": True})


@app.get("/health")
def health_endpoint() -> Dict[str, Any]:
    return health_check(config)


# ---------- Frontend: job form page ----------

_FORM_HTML = r"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <title>Job Tracker</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <style>
    :root {
      --bg: #f4f4f5;
      --card: #ffffff;
      --accent: #2563eb;
      --accent-soft: rgba(37, 99, 235, 0.08);
      --text: #09090b;
      --text-muted: #52525b;
      --border: #d4d4d8;
      --ok: #16a34a;
      --error: #dc2626;
      --radius: 16px;
    }

    * {
      box-sizing: border-box;
      margin: 0;
      padding: 0;
    }

    body {
      font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
      background: var(--bg);
      color: var(--text);
      min-height: 100vh;
      display: flex;
      align-items: flex-start;
      justify-content: center;
      padding: 40px 16px;
    }

    .card {
      width: 100%;
      max-width: 576px;
      background: var(--card);
      border-radius: var(--radius);
      box-shadow: 0 10px 30px rgba(0, 0, 0, 0.08);
      padding: 24px;
    }

    h1 {
      font-size: 22px;
      font-weight: 600;
      margin-bottom: 4px;
    }

    .subtitle {
      font-size: 13px;
      color: var(--text-muted);
      margin-bottom: 20px;
    }

    .field {
      margin-bottom: 12px;
    }

    label {
      display: block;
      font-size: 12px;
      font-weight: 500;
      margin-bottom: 4px;
    }

    .required {
      color: var(--error);
    }

    input, select, textarea {
      width: 100%;
      border: 1px solid var(--border);
      border-radius: 10px;
      padding: 8px 12px;
      font-size: 14px;
      color: var(--text);
      background: #fff;
      outline: none;
    }

    input:focus, select:focus, textarea:focus {
      border-color: var(--accent);
      box-shadow: 0 0 0 1px var(--accent);
    }

    textarea#jd {
      min-height: 120px;
    }

    .btn-autofill {
      margin-top: 8px;
      font-size: 12px;
      padding: 4px 12px;
      border-radius: 999px;
      border: 1px solid var(--accent);
      color: var(--accent);
      background: transparent;
      cursor: pointer;
    }

    .btn-autofill:hover {
      background: var(--accent-soft);
    }

    .btn-save {
      width: 100%;
      border: none;
      border-radius: 999px;
      padding: 10px;
      font-size: 14px;
      font-weight: 600;
      color: #fff;
      background: var(--accent);
      cursor: pointer;
    }

    .btn-save:disabled {
      opacity: 0.6;
      cursor: default;
    }

    .status {
      font-size: 12px;
      margin-top: 6px;
      min-height: 16px;
    }

    .status.ok { color: var(--ok); }
    .status.error { color: var(--error); }
  </style>
</head>
<body>
  <main class="card">
    <h1>Job Tracker</h1>
    <p class="subtitle">Fill this form and it will be added directly to your Google Sheet.</p>

    <form id="job-form" novalidate>
      <div class="field">
        <label for="jd">Job Description (Paste JD)</label>
        <textarea id="jd" placeholder="Paste the full job description here..."></textarea>
        <button type="button" class="btn-autofill" id="btn-autofill">Auto-fill from JD (Free)</button>
      </div>

      <div class="field">
        <label for="source">Source</label>
        <input id="source" name="source" placeholder="WellFound, LinkedIn, etc." />
      </div>

      <div class="field">
        <label for="company">Company <span class="required">*</span></label>
        <input id="company" name="company" required />
      </div>

      <div class="field">
        <label for="role">Role</label>
        <input id="role" name="role" placeholder="Software Engineer Intern" />
      </div>

      <div class="field">
        <label for="yoe">YOE</label>
        <input id="yoe" name="yoe" placeholder="0, 1, etc." />
      </div>

      <div class="field">
        <label for="pay">Pay</label>
        <input id="pay" name="pay" placeholder="1L – 2L" />
      </div>

      <div class="field">
        <label for="link">Job Link</label>
        <input id="link" name="link" type="url" placeholder="https://..." />
      </div>

      <div class="field">
        <label for="applied">Applied?</label>
        <select id="applied" name="applied">
          <option value="">Select</option>
          <option value="✅">✅ Yes</option>
          <option value="⏳">⏳ In progress</option>
          <option value="❌">❌ No</option>
        </select>
      </div>

      <div class="field">
        <label for="appliedDate">Applied Date</label>
        <input id="appliedDate" name="appliedDate" type="date" />
      </div>

      <div class="field">
        <label for="responded">Responded / Notes</label>
        <textarea id="responded" name="responded" placeholder="e.g. sent assignment, waiting..."></textarea>
      </div>

      <button type="submit" class="btn-save" id="btn-save">Save Job</button>
      <p class="status" id="status"></p>
    </form>
  </main>

  <script>
    const FIELDS = [
      "source", "company", "role", "yoe", "pay", "link",
      "applied", "appliedDate", "responded",
    ];

    const formEl = document.getElementById("job-form");
    const jdEl = document.getElementById("jd");
    const statusEl = document.getElementById("status");
    const saveBtn = document.getElementById("btn-save");
    const autofillBtn = document.getElementById("btn-autofill");

    function setStatus(type, msg) {
      statusEl.className = "status " + (type || "");
      statusEl.textContent = msg || "";
    }

    function readForm() {
      const data = {};
      for (const name of FIELDS) {
        data[name] = document.getElementById(name).value;
      }
      return data;
    }

    function fillForm(values) {
      for (const [name, value] of Object.entries(values)) {
        const el = document.getElementById(name);
        if (el) el.value = value;
      }
    }

    function resetForm() {
      for (const name of FIELDS) {
        document.getElementById(name).value = "";
      }
      jdEl.value = "";
    }

    async function autofill() {
      if (!jdEl.value.trim()) {
        setStatus("error", "Paste a job description first.");
        return;
      }
      try {
        const resp = await fetch("/api/parse", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ jd: jdEl.value }),
        });
        const data = await resp.json();
        if (!resp.ok || !data.ok) throw new Error(data.error || "Failed to parse");
        fillForm(data.fields || {});
        setStatus("ok", data.message);
      } catch (err) {
        setStatus("error", err instanceof Error ? err.message : "Something went wrong");
      }
    }

    async function submitJob(e) {
      e.preventDefault();
      setStatus(null, "");

      const form = readForm();
      if (!form.company.trim()) {
        setStatus("error", "Company is required.");
        return;
      }

      saveBtn.disabled = true;
      saveBtn.textContent = "Saving...";
      try {
        const resp = await fetch("/api/jobs", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify(form),
        });
        const data = await resp.json();
        if (!resp.ok || !data.ok) throw new Error(data.error || "Failed to save");

        setStatus("ok", "Saved to sheet 🎉");
        resetForm();
      } catch (err) {
        setStatus("error", err instanceof Error && err.message ? err.message : "Something went wrong");
      } finally {
        saveBtn.disabled = false;
        saveBtn.textContent = "Save Job";
      }
    }

    autofillBtn.addEventListener("click", autofill);
    formEl.addEventListener("submit", submitJob);
  </script>
</body>
</html>
"""


@app.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
    """Serve the job form page."""
    return HTMLResponse(_FORM_HTML)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
