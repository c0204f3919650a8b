# storageperms/services/indexing/indexer.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from storageperms.common.settings import get_settings
from storageperms.database.repos.media_index_repo import SqlAlchemyMediaIndex
from storageperms.domain.dataclasses.reports import IndexReport
from storageperms.services.indexing.utils import guess_mime_type, is_supported_media_file, media_kind_for

log = logging.getLogger(__name__)


class MediaIndexer:
    """
    Fills the local media index from a directory tree, the way the platform
    scanner would on a device. Already-indexed paths are skipped.
    """

    def __init__(self, index: SqlAlchemyMediaIndex, cfg=None) -> None:
        self.index = index
        self.cfg = cfg or get_settings()

    def scan(self, root: Path, *, recursive: bool = True) -> List[Path]:
        root = Path(root)
        if not root.is_dir():
            return []
        it: Iterable[Path] = root.rglob("*") if recursive else root.iterdir()
        return sorted(p for p in it if p.is_file())

    def index_directory(self, root: Path, *, recursive: bool = True) -> IndexReport:
        rep = IndexReport()
        rep.start()

        for p in self.scan(root, recursive=recursive):
            rep.scanned += 1
            if not is_supported_media_file(p, self.cfg):
                rep.skipped += 1
                continue

            path = str(p.resolve())
            if self.index.find_id_by_path(path) is not None:
                rep.skipped += 1
                continue

            kind = media_kind_for(p, self.cfg)
            try:
                st = p.stat()
                self.index.insert(
                    display_name=p.name,
                    size=st.st_size,
                    media_type=kind.code,
                    mime_type=guess_mime_type(p, kind),
                    data=path,
                    date_added=int(st.st_mtime),
                )
            except Exception as e:
                log.warning("failed to index %s: %s", p, e)
                rep.add_error(path, str(e))
                continue
            rep.indexed += 1

        rep.stop()
        log.info(
            "indexed %s: scanned=%d indexed=%d skipped=%d errors=%d",
            root, rep.scanned, rep.indexed, rep.skipped, rep.errors,
        )
        return rep
