"""Gmail API client implementation.

This module provides a thin client over the Gmail API covering what labeling
needs: listing threads, reading thread metadata, and managing labels.

Notes:
    The Google API client is synchronous and so is this client. Threads are
    labeled one after another, there is nothing to overlap.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from subaddress_labeler.config import Settings
from subaddress_labeler.exceptions import AuthenticationError, ConfigurationError, GmailAPIError

logger = structlog.get_logger()

METADATA_HEADERS: tuple[str, ...] = ("From", "To", "Subject")


class GmailClient:
    """Gmail API client for thread and label operations.

    This client handles authentication and wraps every API failure in
    ``GmailAPIError``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize Gmail client.

        Args:
            settings: Application settings. If None, uses default settings.
        """
        from subaddress_labeler.config import get_settings

        self.settings = settings or get_settings()
        self._service: Any | None = None
        logger.info("gmail_client_initialized")

    def authenticate(self) -> None:
        """Authenticate with Gmail API using OAuth2.

        Raises:
            ConfigurationError: If the credentials file is missing.
            AuthenticationError: If authentication fails.
        """

        if self._service is not None:
            return

        credentials_path = Path(self.settings.gmail_credentials_path)
        token_path = Path(self.settings.gmail_token_path)
        scope = self.settings.gmail_scope

        if not credentials_path.exists():
            raise ConfigurationError(
                f"Gmail credentials file not found: {credentials_path}. "
                "Download an OAuth client file from the Google Cloud console."
            )

        logger.info(
            "gmail_authentication_started",
            credentials_path=str(credentials_path),
            token_path=str(token_path),
            scope=scope,
        )

        try:
            self._service = self._build_service(credentials_path, token_path, scope)
        except Exception as exc:  # noqa: BLE001
            logger.exception("gmail_authentication_failed", error=str(exc))
            raise AuthenticationError(str(exc)) from exc

        logger.info("gmail_authentication_completed")

    def list_threads(
        self,
        query: str | None = None,
        max_results: int | None = None,
    ) -> list[dict[str, Any]]:
        """List thread stubs (id, snippet) matching ``query``.

        Args:
            query: Gmail search query string.
            max_results: Maximum number of threads to return. None means all.

        Raises:
            GmailAPIError: If the API request fails.
        """

        service = self._ensure_authenticated()
        logger.info("listing_threads", query=query, max_results=max_results or "all")

        threads: list[dict[str, Any]] = []
        page_token: str | None = None
        try:
            while True:
                if max_results is not None and len(threads) >= max_results:
                    break

                remaining = None if max_results is None else max_results - len(threads)
                per_page = 500 if remaining is None else min(500, remaining)

                response = (
                    service.users()
                    .threads()
                    .list(userId="me", maxResults=per_page, q=query, pageToken=page_token)
                    .execute()
                )
                threads.extend(response.get("threads", []) or [])
                page_token = response.get("nextPageToken")
                if page_token is None:
                    break
        except Exception as exc:  # noqa: BLE001
            logger.exception("gmail_list_threads_failed", error=str(exc))
            raise GmailAPIError(str(exc)) from exc

        return threads if max_results is None else threads[:max_results]

    def get_thread(self, thread_id: str) -> dict[str, Any]:
        """Get a thread with the From, To and Subject headers of its messages.

        Raises:
            GmailAPIError: If the API request fails.
        """

        service = self._ensure_authenticated()
        logger.debug("getting_thread", thread_id=thread_id)

        try:
            return (
                service.users()
                .threads()
                .get(
                    userId="me",
                    id=thread_id,
                    format="metadata",
                    metadataHeaders=list(METADATA_HEADERS),
                )
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("gmail_get_thread_failed", thread_id=thread_id, error=str(exc))
            raise GmailAPIError(str(exc)) from exc

    def list_labels(self) -> list[dict[str, Any]]:
        """List all labels of the mailbox, system labels included.

        Raises:
            GmailAPIError: If the API request fails.
        """

        service = self._ensure_authenticated()
        try:
            response = service.users().labels().list(userId="me").execute()
        except Exception as exc:  # noqa: BLE001
            logger.exception("gmail_list_labels_failed", error=str(exc))
            raise GmailAPIError(str(exc)) from exc
        return response.get("labels", []) or []

    def create_label(self, name: str) -> dict[str, Any]:
        """Create a visible user label. Gmail nests it under ``/`` separators.

        Raises:
            GmailAPIError: If the API request fails, e.g. the label exists.
        """

        service = self._ensure_authenticated()
        body = {
            "name": name,
            "labelListVisibility": "labelShow",
            "messageListVisibility": "show",
        }
        try:
            return service.users().labels().create(userId="me", body=body).execute()
        except Exception as exc:  # noqa: BLE001
            logger.exception("gmail_create_label_failed", label=name, error=str(exc))
            raise GmailAPIError(str(exc)) from exc

    def add_labels_to_thread(self, thread_id: str, label_ids: list[str]) -> dict[str, Any]:
        """Add labels to every message of a thread.

        Raises:
            GmailAPIError: If the API request fails.
        """

        service = self._ensure_authenticated()
        try:
            return (
                service.users()
                .threads()
                .modify(userId="me", id=thread_id, body={"addLabelIds": label_ids})
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception(
                "gmail_modify_thread_failed",
                thread_id=thread_id,
                label_ids=label_ids,
                error=str(exc),
            )
            raise GmailAPIError(str(exc)) from exc

    def _ensure_authenticated(self) -> Any:
        if self._service is None:
            raise AuthenticationError(
                "Gmail client is not authenticated. Call GmailClient.authenticate() first."
            )
        return self._service

    def _build_service(self, credentials_path: Path, token_path: Path, scope: str) -> Any:
        # Imported lazily to keep import-time cost low and tests fast.
        from google.auth.transport.requests import Request
        from google.oauth2.credentials import Credentials
        from google_auth_oauthlib.flow import InstalledAppFlow
        from googleapiclient.discovery import build

        creds: Credentials | None = None
        if token_path.exists():
            creds = Credentials.from_authorized_user_file(str(token_path), scopes=[scope])

        if creds is not None and creds.expired and creds.refresh_token:
            creds.refresh(Request())

        if creds is None or not creds.valid:
            flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), scopes=[scope])
            creds = flow.run_local_server(port=0)
            token_path.parent.mkdir(parents=True, exist_ok=True)
            token_path.write_text(creds.to_json(), encoding="utf-8")

        # cache_discovery=False prevents writing discovery docs to disk.
        return build("gmail", "v1", credentials=creds, cache_discovery=False)
