"""
Google Sheets writer: appends one Job Record per call to the configured tab.

One request per submission. No retries, no custom timeout; failures are
reduced to a single readable message for the caller to show.
"""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import Resource, build
from googleapiclient.errors import HttpError

from jdutils.config import Config, config as default_config
from jdutils.logger import setup_logger, timing_decorator
from .models import JobRecord

logger = setup_logger(__name__)


class SheetsError(Exception):
    """Base class for sheet append failures."""


class SheetsConfigError(SheetsError):
    """Required spreadsheet or service-account settings are missing."""


class SheetsAppendError(SheetsError):
    """The append request could not be completed."""


def normalize_private_key(key: str) -> str:
    # Keys pasted into env files usually carry literal "\n" sequences
    return key.replace("\\n", "\n")


def _http_error_message(err: HttpError) -> str:
    reason = err.reason or ""
    status = getattr(getattr(err, "resp", None), "status", None)
    if status and reason:
        return f"Google Sheets API error {status}: {reason}"
    return reason or str(err)


class SheetsClient:
    """Append-only client for one spreadsheet tab."""

    def __init__(self, settings: Optional[Config] = None, service: Optional[Resource] = None) -> None:
        """
        Args:
            settings: configuration carrying spreadsheet id, tab and credentials
            service: prebuilt Sheets API resource (tests pass a mock here)
        """
        self.settings = settings or default_config
        self._service = service
        self._creds: Optional[service_account.Credentials] = None
        self._lock = threading.Lock()

    @property
    def range_name(self) -> str:
        return f"{self.settings.TAB_NAME}!A:Z"

    def _credentials(self) -> service_account.Credentials:
        missing = self.settings.missing_sheets_settings()
        if missing:
            raise SheetsConfigError(f"Missing Google service account env vars: {', '.join(missing)}")

        info: Dict[str, Any] = {
            "type": "service_account",
            "client_email": self.settings.SERVICE_ACCOUNT_EMAIL,
            "private_key": normalize_private_key(self.settings.PRIVATE_KEY),
            "token_uri": self.settings.TOKEN_URI,
        }
        try:
            return service_account.Credentials.from_service_account_info(info, scopes=self.settings.SCOPES)
        except (ValueError, GoogleAuthError) as e:
            raise SheetsConfigError(f"Invalid Google service account credentials: {e}") from e

    def connect(self) -> Resource:
        """
        Return a Sheets v4 service for one request.

        Credentials are loaded once; each call gets its own service because the
        underlying httplib2 transport is not thread-safe.
        """
        if self._service is not None:
            return self._service
        with self._lock:
            if self._creds is None:
                self._creds = self._credentials()
                logger.info("Loaded Google service account credentials")
        return build("sheets", "v4", credentials=self._creds, cache_discovery=False)

    @timing_decorator
    def append_job(self, record: JobRecord) -> Dict[str, Any]:
        """
        Append the record as a single row.

        Returns:
            The API's append response.

        Raises:
            SheetsConfigError: settings are incomplete
            SheetsAppendError: transport or remote failure
        """
        if not self.settings.SPREADSHEET_ID:
            raise SheetsConfigError("Missing Google service account env vars: GOOGLE_SHEETS_SPREADSHEET_ID")

        service = self.connect()
        body = {"values": [record.to_row()]}
        try:
            response = (
                service.spreadsheets()
                .values()
                .append(
                    spreadsheetId=self.settings.SPREADSHEET_ID,
                    range=self.range_name,
                    valueInputOption="USER_ENTERED",
                    body=body,
                )
                .execute()
            )
        except HttpError as e:
            raise SheetsAppendError(_http_error_message(e)) from e
        except (GoogleAuthError, OSError) as e:
            raise SheetsAppendError(str(e) or e.__class__.__name__) from e

        logger.info(f"Appended job row for {record.company!r} to {self.range_name}")
        return response or {}
