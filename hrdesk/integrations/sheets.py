"""Google Sheets client factory (gspread + service-account credentials)."""

from __future__ import annotations

import logging

import gspread
from google.oauth2.service_account import Credentials

from hrdesk.config import Settings

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_sheets_client(settings: Settings) -> gspread.Client:
    """Authorize a gspread client from the service-account env vars."""
    info = {
        "type": "service_account",
        "client_email": settings.GOOGLE_CLIENT_EMAIL,
        "private_key": settings.google_private_key,
        "token_uri": TOKEN_URI,
    }
    creds = Credentials.from_service_account_info(info, scopes=SCOPES)
    logger.info("Authorized Google Sheets client for %s", settings.GOOGLE_CLIENT_EMAIL)
    return gspread.authorize(creds)


def worksheet_records(
    client: gspread.Client,
    spreadsheet_id: str,
    title: str,
) -> tuple[gspread.Worksheet, list[list[str]]]:
    """Return the worksheet and all of its cell values (header row included)."""
    worksheet = client.open_by_key(spreadsheet_id).worksheet(title)
    return worksheet, worksheet.get_all_values()


def rows_as_dicts(values: list[list[str]], headers: list[str]) -> list[dict[str, str]]:
    """Map data rows onto *headers*, skipping the header row and blank lines."""
    rows: list[dict[str, str]] = []
    start = 1 if values and values[0][: len(headers)] == headers else 0
    for line in values[start:]:
        if not any(str(c).strip() for c in line):
            continue
        padded = list(line) + [""] * (len(headers) - len(line))
        rows.append({headers[i]: str(padded[i]) for i in range(len(headers))})
    return rows
