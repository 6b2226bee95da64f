"""Directory-backed storage for named flow documents."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

FLOW_DIR_NAME = ".flowtool"
FLOW_EXTENSION = ".json"


class FlowStoreError(OSError):
    """Raised when the filesystem refuses a flow store operation."""


class FlowNotFoundError(FlowStoreError, FileNotFoundError):
    """Raised when a flow is read that was never written (or was deleted)."""


class InvalidFlowNameError(ValueError):
    """Raised when a flow name cannot be mapped safely onto a file path."""


def resolve_root() -> Path:
    """Return `<cwd>/.flowtool`, using "." when the cwd is unavailable."""
    try:
        cwd = Path(os.getcwd())
    except OSError:
        cwd = Path(".")
    return cwd / FLOW_DIR_NAME


def validate_flow_name(name: str) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidFlowNameError("Flow name must be a non-empty string.")
    if name in (".", ".."):
        raise InvalidFlowNameError(f"Invalid flow name: {name!r}")
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if "\x00" in name or any(sep in name for sep in separators):
        raise InvalidFlowNameError(f"Flow name must not contain path separators: {name!r}")
    return name


def _wrap(exc: OSError, name: Optional[str] = None) -> FlowStoreError:
    """Re-raise an OSError as the store's error kind, keeping errno and filename."""
    if isinstance(exc, FileNotFoundError) and name is not None:
        error_cls = FlowNotFoundError
        message = f"Flow '{name}' not found"
    else:
        error_cls = FlowStoreError
        message = exc.strerror or str(exc)
    if exc.errno is None:
        return error_cls(message)
    if exc.filename is None:
        return error_cls(exc.errno, message)
    return error_cls(exc.errno, message, exc.filename)


class FlowStore:
    """Persist flows as `<name>.json` files under a single directory.

    When no root is given the directory is re-resolved from the current
    working directory on every call.
    """

    def __init__(self, root: Optional[Path | str] = None) -> None:
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path:
        return self._root if self._root is not None else resolve_root()

    def path_for(self, name: str) -> Path:
        validate_flow_name(name)
        return self.root / f"{name}{FLOW_EXTENSION}"

    def list_flows(self) -> List[str]:
        """Return stored flow names in ascending order; [] if the root is absent."""
        root = self.root
        if not root.exists():
            return []

        names: List[str] = []
        try:
            with os.scandir(root) as entries:
                for entry in entries:
                    if not entry.name.endswith(FLOW_EXTENSION):
                        continue
                    try:
                        if not entry.is_file():
                            continue
                    except OSError as exc:
                        logger.debug("Skipping unreadable entry %s: %s", entry.path, exc)
                        continue
                    names.append(entry.name[: -len(FLOW_EXTENSION)])
        except OSError as exc:
            logger.warning("Could not list flows in %s: %s", root, exc)
            raise _wrap(exc) from exc

        return sorted(names)

    def read_flow(self, name: str) -> str:
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                return handle.read()
        except FileNotFoundError as exc:
            raise _wrap(exc, name) from exc
        except UnicodeDecodeError as exc:
            logger.warning("Flow '%s' is not valid UTF-8: %s", name, exc)
            raise FlowStoreError(f"Flow '{name}' could not be decoded: {exc}") from exc
        except OSError as exc:
            logger.warning("Failed to read flow '%s': %s", name, exc)
            raise _wrap(exc, name) from exc

    def write_flow(self, name: str, data: str) -> None:
        """Create or replace `<name>.json` with `data`, creating the root if needed."""
        path = self.path_for(name)
        if not isinstance(data, str):
            raise TypeError("Flow data must be a string.")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(data)
        except OSError as exc:
            logger.warning("Failed to write flow '%s': %s", name, exc)
            raise _wrap(exc) from exc
        logger.info("Saved flow: %s", name)

    def delete_flow(self, name: str) -> None:
        """Delete the stored flow if it exists; missing flows are ignored."""
        path = self.path_for(name)
        if not path.exists():
            return
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Failed to delete flow '%s': %s", name, exc)
            raise _wrap(exc) from exc
        logger.info("Removed flow: %s", name)
