# constants.py - Application constants shared by the parser, form and sheet writer

# Job Record fields, in sheet column order (column A is left empty)
JOB_FIELDS = [
    "source", "company", "role", "yoe", "pay", "link",
    "applied", "applied_date", "responded",
]

# Keys the JD parser may fill
PARSED_FIELDS = ["role", "company", "yoe", "pay", "source", "link"]

FIELD_LABELS = {
    "source": "Source",
    "company": "Company",
    "role": "Role",
    "yoe": "YOE",
    "pay": "Pay",
    "link": "Job Link",
    "applied": "Applied?",
    "applied_date": "Applied Date",
    "responded": "Responded / Notes",
}

# "Applied?" select options: (value, label)
APPLIED_CHOICES = [
    ("", "Select"),
    ("✅", "✅ Yes"),
    ("⏳", "⏳ In progress"),
    ("❌", "❌ No"),
]

# Lowercase needle(s) -> canonical source name, first hit wins
SOURCE_KEYWORDS = [
    (("linkedin",), "LinkedIn"),
    (("naukri",), "Naukri"),
    (("wellfound", "angel.co"), "WellFound"),
    (("instahyre",), "Instahyre"),
]

# User-facing status messages
MSG_EMPTY_JD = "Paste a job description first."
MSG_AUTOFILLED = "Auto-filled fields from JD. Please review and edit if needed."
MSG_COMPANY_REQUIRED = "Company is required."
MSG_SAVED = "Saved to sheet 🎉"
MSG_GENERIC_FAILURE = "Something went wrong"
MSG_UNKNOWN_ERROR = "Unknown error"
