"""
Module-level entry points for the flow store.

Front ends (the command registry, the CLI) call these functions instead of
holding a FlowStore themselves. The store behind them is chosen once:
either installed by `configure(...)`, or built on first use from `.env`
and the process environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from flow_store import FlowStore
from store_factory import create_store, get_shared_store as _factory_shared_store

_STORE: Optional[FlowStore] = None


def _get_store() -> FlowStore:
    """Return the installed store, building the shared default on first use."""
    global _STORE
    if _STORE is None:
        _STORE = _factory_shared_store()
    return _STORE


def configure(
    *,
    flow_dir: Optional[str | Path] = None,
    load_env: bool = True,
    flow_store: Optional[FlowStore] = None,
) -> FlowStore:
    """Install the store used by every function below and return it.

    An explicit `flow_store` is used as-is; otherwise one is built from
    `flow_dir` and the environment. Each call replaces the previous store.
    """
    global _STORE

    _STORE = flow_store or create_store(flow_dir=flow_dir, load_env=load_env)
    return _STORE


def list_flows() -> List[str]:
    return _get_store().list_flows()


def read_flow(name: str) -> str:
    return _get_store().read_flow(name)


def write_flow(name: str, data: str) -> None:
    _get_store().write_flow(name, data)


def delete_flow(name: str) -> None:
    _get_store().delete_flow(name)


__all__ = [
    "configure",
    "list_flows",
    "read_flow",
    "write_flow",
    "delete_flow",
]
