import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from flow_store import FlowStore

logger = logging.getLogger(__name__)

FLOW_DIR_ENV = "FLOWTOOL_FLOW_DIR"

_STORE_SINGLETON: Optional[FlowStore] = None


def create_store(
    *,
    flow_dir: Optional[str | Path] = None,
    load_env: bool = True,
) -> FlowStore:
    """Instantiate a new FlowStore with optional overrides."""

    if load_env:
        load_dotenv()

    resolved_dir = flow_dir or os.getenv(FLOW_DIR_ENV) or None
    store = FlowStore(Path(resolved_dir) if resolved_dir else None)
    if resolved_dir:
        logger.info("Initialized FlowStore at '%s'", resolved_dir)
    else:
        logger.info("Initialized FlowStore under the working directory ('%s')", store.root)
    return store


def get_shared_store() -> FlowStore:
    """Return a cached FlowStore singleton backed by environment defaults."""

    global _STORE_SINGLETON
    if _STORE_SINGLETON is None:
        _STORE_SINGLETON = create_store()
    return _STORE_SINGLETON


def reset_shared_store() -> None:
    global _STORE_SINGLETON
    _STORE_SINGLETON = None
