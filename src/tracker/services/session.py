"""Signed-in driver session and its customer collection."""

from __future__ import annotations

import json
import logging
import time

from pydantic import ValidationError

from ..config import Settings, settings
from ..models.domain import UserProfile
from ..persistence.customers import CustomerStore
from ..persistence.storage import KeyValueStore, StorageError
from ..schemas.customers import UserProfileRecord

EMAIL_DOMAINS = {"google": "gmail.com"}
DEFAULT_EMAIL_DOMAIN = "icloud.com"


class SessionService:
    """Holds the current user and their customer store for one session.

    Callers own the instance and pass it around explicitly; after any
    mutating call they re-read ``store.customers`` to refresh their views.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        store: CustomerStore | None = None,
        *,
        config: Settings = settings,
    ) -> None:
        self.storage = storage
        self.config = config
        self.store = store or CustomerStore(storage, key=config.customers_key)
        self.user: UserProfile | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def restore(self) -> UserProfile | None:
        """Resume a previously stored session, loading its customers."""
        try:
            payload = self.storage.get_item(self.config.user_key)
        except StorageError as exc:
            logging.error(f"Error reading saved user: {exc}")
            return None
        if not payload:
            return None

        try:
            record = UserProfileRecord.model_validate_json(payload)
        except ValidationError as exc:
            logging.warning(f"Ignoring unreadable saved user: {exc}")
            return None

        self.user = UserProfile(**record.model_dump())
        self.store.load()
        logging.info(f"Restored session for {self.user.email}")
        return self.user

    def login(self, provider: str) -> UserProfile:
        if provider not in self.config.supported_providers:
            raise ValueError(f"Unsupported sign-in provider '{provider}'")

        if self.config.login_delay_seconds:
            time.sleep(self.config.login_delay_seconds)

        domain = EMAIL_DOMAINS.get(provider, DEFAULT_EMAIL_DOMAIN)
        user = UserProfile(
            id=f"{provider}_{int(time.time() * 1000)}",
            name=self.config.mock_user_name,
            email=f"{self.config.mock_user_email_local}@{domain}",
            avatar=self.config.mock_user_avatar,
            provider=provider,
        )
        record = UserProfileRecord(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            provider=user.provider,
        )
        try:
            self.storage.set_item(self.config.user_key, json.dumps(record.model_dump()))
        except StorageError as exc:
            logging.warning(f"Signed in without persisting the session: {exc}")

        self.user = user
        self.store.load()
        logging.info(f"Signed in {user.email} via {provider}")
        return user

    def logout(self) -> None:
        try:
            self.storage.remove_item(self.config.user_key)
        except StorageError as exc:
            logging.error(f"Error clearing saved user: {exc}")
        self.user = None
        self.store.clear()
