# storageperms/services/library/state_manager.py
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, Mapping, Optional

from storageperms.common.logging import get_logger
from storageperms.common.uris import with_appended_id
from storageperms.domain.dataclasses.device import DeviceInfo
from storageperms.domain.entities.media_file import MediaFile
from storageperms.domain.entities.ui_state import UiState
from storageperms.domain.enums.media_kind import MediaKind
from storageperms.domain.enums.permission import Permission
from storageperms.domain.enums.query_status import QueryStatus
from storageperms.domain.errors import IndexUnavailable, PreferencesUnavailable, QueryRejected
from storageperms.domain.policies.storage_permissions import (
    HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED,
    PermissionSet,
    derive_required_permissions,
)
from storageperms.domain.ports.key_value_store import KeyValueStorePort
from storageperms.domain.ports.media_index import MediaIndexPort
from storageperms.domain.ports.permissions import PermissionOraclePort

logger = get_logger(__name__)

Observer = Callable[[UiState], None]

DEFAULT_QUERY_LIMIT = 500


class StorageStateManager:
    """
    Owns the storage-permission and media-library state shown to the user.

    Features
    --------
    - required permissions derived once from the device/target versions
    - has_storage_access recomputed from the oracle on every decision
    - "READ_EXTERNAL_STORAGE was granted before" flag in a durable store
    - refresh_library(): Loading now, Done later (via Future and observers)

    Notes
    -----
    - UiState is swapped wholesale on each transition; observers never see
      a half-updated snapshot.
    - Overlapping refreshes are last-write-wins. Nothing is cancelled.
    - A failing query never escapes refresh_library(); it becomes an empty
      Done state and an ERROR log line.
    """

    def __init__(
        self,
        *,
        device: DeviceInfo,
        oracle: PermissionOraclePort,
        store: KeyValueStorePort,
        media_index: MediaIndexPort,
        query_limit: int = DEFAULT_QUERY_LIMIT,
        granular_requires_target: bool = True,
        max_workers: int = 1,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        if query_limit < 1:
            raise ValueError("query_limit must be >= 1")

        self.device = device
        self.oracle = oracle
        self.store = store
        self.media_index = media_index
        self.query_limit = int(query_limit)

        self._permissions: PermissionSet = derive_required_permissions(
            device.sdk_int,
            device.target_sdk,
            granular_requires_target=granular_requires_target,
        )
        self._observers: List[Observer] = []

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max(1, int(max_workers)),
            thread_name_prefix="library-query",
        )

        self._state = UiState(
            target_sdk=device.target_sdk,
            permissions=self._permissions,
            has_storage_access=self.check_access(),
            query_status=QueryStatus.not_started,
            items=(),
        )

    @classmethod
    def from_settings(
        cls,
        cfg,
        *,
        oracle: PermissionOraclePort,
        store: KeyValueStorePort,
        media_index: MediaIndexPort,
    ) -> "StorageStateManager":
        return cls(
            device=DeviceInfo.from_settings(cfg),
            oracle=oracle,
            store=store,
            media_index=media_index,
            query_limit=cfg.library.query_limit,
            granular_requires_target=cfg.permissions.granular_requires_target_sdk,
            max_workers=cfg.library.query_workers,
        )

    # -------------------------
    # State & observers
    # -------------------------
    @property
    def state(self) -> UiState:
        return self._state

    @property
    def permissions(self) -> PermissionSet:
        return self._permissions

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register for every published UiState. Returns an unsubscribe callable."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _publish(self, state: UiState) -> None:
        self._state = state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception("state observer %r failed", observer)

    # -------------------------
    # Permissions
    # -------------------------
    def check_access(self, permissions: Optional[Iterable[str]] = None) -> bool:
        perms = self._permissions if permissions is None else tuple(permissions)
        return all(self.oracle.is_granted(p) for p in perms)

    def has_read_external_storage_been_granted(self) -> Optional[bool]:
        """None means no record: never decided, or the store can't be read."""
        try:
            return self.store.get_bool(HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED)
        except PreferencesUnavailable as e:
            logger.error("reading %s failed: %s", HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED, e)
            return None

    def record_permission_decision(self, grants: Mapping[str, bool]) -> UiState:
        # Remember whether READ_EXTERNAL_STORAGE has ever been granted
        if Permission.read_external_storage in grants:
            granted = bool(grants[Permission.read_external_storage])
            try:
                self.store.set_bool(HAS_READ_EXTERNAL_STORAGE_BEEN_GRANTED, granted)
            except PreferencesUnavailable as e:
                # flag is lost for this decision; access is still republished below
                logger.error("storing %s decision failed: %s", Permission.read_external_storage.value, e)
            else:
                logger.info("%s decision stored: %s", Permission.read_external_storage.value, granted)

        new_state = self._state.copy(has_storage_access=self.check_access())
        self._publish(new_state)
        return new_state

    # -------------------------
    # Library
    # -------------------------
    def refresh_library(self) -> Future[UiState]:
        """
        Publish Loading immediately, then run the query on the pool.
        The returned future resolves to the final Done state and never raises
        the index's error.
        """
        self._publish(self._state.copy(query_status=QueryStatus.loading, items=()))
        try:
            return self._executor.submit(self._run_refresh)
        except RuntimeError as e:
            # pool already shut down
            logger.error("refresh_library failed: %s", e)
            new_state = self._state.copy(query_status=QueryStatus.done, items=())
            self._publish(new_state)
            done: Future[UiState] = Future()
            done.set_result(new_state)
            return done

    def _run_refresh(self) -> UiState:
        try:
            items = self.query_media_index()
        except Exception as e:
            logger.error("refresh_library failed: %s", e)
            new_state = self._state.copy(query_status=QueryStatus.done, items=())
        else:
            logger.debug("refresh_library loaded %d item(s)", len(items))
            new_state = self._state.copy(query_status=QueryStatus.done, items=items)
        self._publish(new_state)
        return new_state

    def query_media_index(self) -> List[MediaFile]:
        base_uri = self.media_index.content_uri()
        if not base_uri:
            raise IndexUnavailable()

        rows = self.media_index.query(
            media_types=(MediaKind.image.code, MediaKind.video.code),
            limit=self.query_limit,
        )
        if rows is None:
            raise QueryRejected()

        items: List[MediaFile] = []
        # Providers may ignore the limit; hold the cap here as well
        for row in list(rows)[: self.query_limit]:
            items.append(
                MediaFile(
                    id=row.id,
                    uri=with_appended_id(base_uri, row.id),
                    kind=MediaKind.from_code(row.media_type),
                    filename=row.display_name or "",
                    size_bytes=int(row.size_bytes or 0),
                    mime_type=row.mime_type or "",
                    path=row.data or "",
                )
            )
        return items

    # -------------------------
    # Lifecycle
    # -------------------------
    def shutdown(self, wait: bool = True) -> None:
        """Stop the query pool if this manager created it. Safe to call multiple times."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "StorageStateManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
