"""
Leaderboard controller.

Holds the ranked participant list for the active backend and mediates every
mutation through a StoreAdapter. Each public operation is one user action:
errors are caught here, logged and turned into notifications, so callers
only ever see a True/False outcome.

Local mutations update the in-memory list directly and re-rank it. Remote
mutations re-list afterwards so the server stays the source of truth for
ordering and server-assigned fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from leaderboard_client.adapters import LocalStoreAdapter, StoreAdapter
from leaderboard_client.errors import LeaderboardError, TransportError, ValidationError
from leaderboard_client.kv import USE_DATABASE_KEY, KeyValueStore
from shared.ranking import BoardSummary, find_by_id, name_taken, rank, summarize
from shared.types import Participant, StorageMode

logger = logging.getLogger(__name__)

LOAD_FALLBACK_MESSAGE = "Failed to load participants. Using local storage instead."


@dataclass
class Notification:
    """A transient message for the presentation layer."""

    level: str
    message: str


class LeaderboardController:
    def __init__(
        self,
        store: KeyValueStore,
        remote: StoreAdapter,
        *,
        local: Optional[StoreAdapter] = None,
        notify: Optional[Callable[[Notification], None]] = None,
    ):
        self.store = store
        self.local = local if local is not None else LocalStoreAdapter(store)
        self.remote = remote
        self.notify = notify

        self.participants: list[Participant] = []
        self.active_backend = StorageMode.LOCAL
        self.busy = False
        self.loading = False
        self.pending_removal: Optional[Participant] = None
        self.notifications: list[Notification] = []

    @property
    def adapter(self) -> StoreAdapter:
        if self.active_backend is StorageMode.REMOTE:
            return self.remote
        return self.local

    @property
    def is_remote(self) -> bool:
        return self.active_backend is StorageMode.REMOTE

    def _emit(self, level: str, message: str) -> None:
        notification = Notification(level=level, message=message)
        self.notifications.append(notification)
        if self.notify:
            self.notify(notification)

    def _fail(self, action: str, exc: LeaderboardError) -> bool:
        if isinstance(exc, ValidationError):
            logger.info("%s rejected: %s", action, exc)
        else:
            logger.error("Error %s: %s", action, exc)
        self._emit("error", str(exc))
        return False

    def _refresh(self) -> None:
        self.participants = self.remote.list()

    def preferred_backend(self) -> StorageMode:
        if self.store.get(USE_DATABASE_KEY) == "true":
            return StorageMode.REMOTE
        return StorageMode.LOCAL

    def initialize(self) -> bool:
        """
        Loads participants from the preferred backend.

        A failing remote load downgrades to local storage for this session
        only; the persisted preference is left as it is.
        """
        self.loading = True
        try:
            self.active_backend = self.preferred_backend()
            if self.is_remote:
                try:
                    self.busy = True
                    self._refresh()
                    return True
                except TransportError as exc:
                    logger.warning("Error loading participants: %s", exc)
                    self._emit("error", LOAD_FALLBACK_MESSAGE)
                    self.active_backend = StorageMode.LOCAL
                finally:
                    self.busy = False
            self.participants = rank(self.local.list())
            return True
        finally:
            self.loading = False

    def add_participant(self, name: str) -> bool:
        try:
            cleaned = name.strip()
            if not cleaned:
                raise ValidationError("Participant name cannot be empty")
            if name_taken(self.participants, cleaned):
                raise ValidationError("Participant already exists")

            if self.is_remote:
                self.busy = True
                try:
                    self.remote.create(cleaned)
                    self._refresh()
                finally:
                    self.busy = False
            else:
                created = self.local.create(cleaned)
                self.participants = rank([*self.participants, created])
        except LeaderboardError as exc:
            return self._fail("adding participant", exc)

        self._emit("success", "Participant added successfully")
        return True

    def adjust_score(self, participant_id: str, delta: int) -> bool:
        participant = find_by_id(self.participants, participant_id)
        if participant is None:
            # Stale or unknown ids are ignored rather than reported.
            return False

        try:
            candidate = participant.score + delta
            if candidate < 0:
                raise ValidationError("Score cannot be negative")

            if self.is_remote:
                self.busy = True
                try:
                    self.remote.update_score(participant_id, candidate)
                    self._refresh()
                finally:
                    self.busy = False
            else:
                if self.local.update_score(participant_id, candidate) is None:
                    # Gone from the stored blob; resync instead of scoring a ghost.
                    self.participants = rank(self.local.list())
                    return False
                self.participants = rank(
                    Participant(id=p.id, name=p.name, score=candidate)
                    if p.id == participant_id
                    else p
                    for p in self.participants
                )
        except LeaderboardError as exc:
            return self._fail("updating score", exc)
        return True

    def increment(self, participant_id: str) -> bool:
        return self.adjust_score(participant_id, 1)

    def decrement(self, participant_id: str) -> bool:
        return self.adjust_score(participant_id, -1)

    def stage_removal(self, participant_id: str) -> Optional[Participant]:
        """Marks a participant for deletion; nothing changes until confirm_removal()."""
        self.pending_removal = find_by_id(self.participants, participant_id)
        return self.pending_removal

    def cancel_removal(self) -> None:
        self.pending_removal = None

    def confirm_removal(self) -> bool:
        target = self.pending_removal
        if target is None:
            return False

        try:
            if self.is_remote:
                self.busy = True
                try:
                    self.remote.delete(target.id)
                    self._refresh()
                finally:
                    self.busy = False
            else:
                self.local.delete(target.id)
                self.participants = [p for p in self.participants if p.id != target.id]
        except LeaderboardError as exc:
            return self._fail("removing participant", exc)
        finally:
            self.pending_removal = None

        self._emit("success", f"{target.name} removed successfully")
        return True

    def toggle_backend(self) -> bool:
        """
        Switches backends and reloads from scratch. Data is not migrated.
        """
        new_mode = StorageMode.LOCAL if self.is_remote else StorageMode.REMOTE
        try:
            self.store.set(USE_DATABASE_KEY, "true" if new_mode is StorageMode.REMOTE else "false")
        except LeaderboardError as exc:
            return self._fail("switching storage mode", exc)
        self.active_backend = new_mode
        self._emit("success", "Storage mode changed. Reloading data...")

        self.participants = []
        self.pending_removal = None
        return self.initialize()

    def summary(self) -> BoardSummary:
        return summarize(self.participants)
