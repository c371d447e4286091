"""Firebase Admin / Firestore client factory."""

from __future__ import annotations

import json
import logging
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore

from hrdesk.config import Settings

logger = logging.getLogger(__name__)


def build_firestore_client(settings: Settings) -> Any:
    """Initialise the default firebase-admin app once and return its Firestore client."""
    if not firebase_admin._apps:
        options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
        if settings.FIREBASE_CREDENTIALS_JSON:
            cred = credentials.Certificate(json.loads(settings.FIREBASE_CREDENTIALS_JSON))
        else:
            # GOOGLE_APPLICATION_CREDENTIALS / metadata server
            cred = credentials.ApplicationDefault()
        firebase_admin.initialize_app(cred, options)
        logger.info("Firebase app initialised")
    return firestore.client()
