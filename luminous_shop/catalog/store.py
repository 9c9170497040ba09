# luminous_shop/catalog/store.py
"""
Holder for the live catalog snapshot.

Readers call current_snapshot() and keep the returned object for the whole
request; reload() builds a complete new snapshot first and only then swaps
the single reference, so a query never sees a half-loaded catalog. A failed
reload leaves the previous snapshot published.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .loader import CatalogLoadError, load_catalog_file
from .snapshot import CatalogSnapshot

log = logging.getLogger(__name__)


class CatalogStore:
    def __init__(self, path: Union[str, Path], snapshot: Optional[CatalogSnapshot] = None):
        self.path = Path(path)
        self._snapshot: CatalogSnapshot = snapshot or CatalogSnapshot(source=str(self.path))
        self._reload_lock = threading.Lock()

    def current_snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    def publish(self, snapshot: CatalogSnapshot) -> CatalogSnapshot:
        previous = self._snapshot
        self._snapshot = snapshot
        log.info(f"CATALOG_PUBLISHED | source={snapshot.source} | count={len(snapshot)} | previous={len(previous)}")
        return snapshot

    def reload(self) -> CatalogSnapshot:
        """Load the catalog file and publish it. Raises CatalogLoadError on failure."""
        with self._reload_lock:
            try:
                snapshot = load_catalog_file(self.path)
            except CatalogLoadError as e:
                log.error(f"CATALOG_RELOAD_FAILED | path={self.path} | error={e} | kept={len(self._snapshot)}")
                raise
            return self.publish(snapshot)

    def try_reload(self) -> bool:
        """Startup variant: log and keep the current (possibly empty) snapshot on failure."""
        try:
            self.reload()
            return True
        except CatalogLoadError:
            return False

