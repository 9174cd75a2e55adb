"""
Storage adapters: the four participant operations against either backend.

LocalStoreAdapter persists the whole list as a JSON blob in a key-value store,
writing through on every mutation. RemoteStoreAdapter talks to the participant
API over HTTP and treats any non-success answer as a TransportError.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Optional, Protocol

import requests
from dacite import DaciteError

from leaderboard_client.errors import NotFoundError, TransportError
from leaderboard_client.kv import PARTICIPANTS_KEY, KeyValueStore
from shared.ranking import rank
from shared.types import Participant

logger = logging.getLogger(__name__)


class StoreAdapter(Protocol):
    """Operations the controller needs from a participant backend."""

    def list(self) -> list[Participant]:
        ...

    def create(self, name: str) -> Participant:
        ...

    def update_score(self, participant_id: str, new_score: int) -> Optional[Participant]:
        ...

    def delete(self, participant_id: str) -> bool:
        ...


class LocalStoreAdapter:
    """Participants kept in a single serialized blob."""

    def __init__(self, store: KeyValueStore, key: str = PARTICIPANTS_KEY):
        self.store = store
        self.key = key

    def list(self) -> list[Participant]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("expected a list of participants")
            return [Participant.from_dict(item) for item in data]
        except (ValueError, TypeError, DaciteError) as exc:
            logger.warning("Ignoring unreadable local participants: %s", exc)
            return []

    def _save(self, participants: list[Participant]) -> None:
        payload = [p.as_dict() for p in rank(participants)]
        self.store.set(self.key, json.dumps(payload))

    def _next_id(self, participants: list[Participant]) -> str:
        # Millisecond timestamp, bumped past existing ids created in the same tick.
        candidate = int(time.time() * 1000)
        numeric_ids = [int(p.id) for p in participants if p.id.isdigit()]
        if numeric_ids and candidate <= max(numeric_ids):
            candidate = max(numeric_ids) + 1
        return str(candidate)

    def create(self, name: str) -> Participant:
        participants = self.list()
        participant = Participant(id=self._next_id(participants), name=name, score=0)
        participants.append(participant)
        self._save(participants)
        return participant

    def update_score(self, participant_id: str, new_score: int) -> Optional[Participant]:
        participants = self.list()
        updated = None
        for participant in participants:
            if participant.id == participant_id:
                participant.score = new_score
                updated = participant
        if updated is None:
            return None
        self._save(participants)
        return updated

    def delete(self, participant_id: str) -> bool:
        participants = self.list()
        self._save([p for p in participants if p.id != participant_id])
        return True


class RemoteStoreAdapter:
    """
    Client for the participant API.

    `session` may be any object with requests-style get/post/put/delete
    methods; a fresh requests.Session is used by default.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = None,
        session: Any = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        send = getattr(self.session, method)
        try:
            response = send(self._url(path), timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method.upper(), path, exc)
            raise TransportError(f"Could not reach participant API: {exc}") from exc

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            if response.status_code == 404:
                raise NotFoundError(message, status_code=404)
            raise TransportError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError("Participant API returned invalid JSON") from exc

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("error") or body.get("detail")
            if message:
                return str(message)
        return f"Participant API responded with status {response.status_code}"

    def _parse(self, item: Any) -> Participant:
        try:
            return Participant.from_dict(item)
        except (DaciteError, TypeError) as exc:
            raise TransportError(f"Unexpected participant payload: {item!r}") from exc

    def list(self) -> list[Participant]:
        data = self._request("get", "/participants")
        if not isinstance(data, list):
            raise TransportError("Unexpected participant list payload")
        return [self._parse(item) for item in data]

    def create(self, name: str) -> Participant:
        data = self._request("post", "/participants", json={"name": name})
        return self._parse(data)

    def update_score(self, participant_id: str, new_score: int) -> Optional[Participant]:
        data = self._request(
            "put", f"/participants/{participant_id}", json={"score": new_score}
        )
        return self._parse(data)

    def delete(self, participant_id: str) -> bool:
        self._request("delete", f"/participants/{participant_id}")
        return True
