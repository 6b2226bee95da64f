import logging
from typing import Any, Callable, Dict, Optional

import flowtool_core
from flow_store import FlowNotFoundError, FlowStoreError, InvalidFlowNameError

logger = logging.getLogger(__name__)


class BadRequest(ValueError):
    pass


def _success(data=None) -> Dict[str, Any]:
    return {
        "success": True,
        "data": data,
        "error": None,
    }


def _error(code: str, message: str) -> Dict[str, Any]:
    return {
        "success": False,
        "data": None,
        "error": {
            "code": code,
            "message": message,
        },
    }


def _require_name(args: Dict[str, Any]) -> str:
    name = args.get("name")
    if not name:
        raise BadRequest("name is required")
    if not isinstance(name, str):
        raise BadRequest("name must be a string")
    return name


def list_flows(args: Dict[str, Any]):
    return {"flows": flowtool_core.list_flows()}


def read_flow(args: Dict[str, Any]):
    return {"data": flowtool_core.read_flow(_require_name(args))}


def write_flow(args: Dict[str, Any]):
    name = _require_name(args)
    data = args.get("data")
    if not isinstance(data, str):
        raise BadRequest("data must be a string")
    flowtool_core.write_flow(name, data)
    return None


def delete_flow(args: Dict[str, Any]):
    flowtool_core.delete_flow(_require_name(args))
    return None


COMMANDS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "list_flows": list_flows,
    "read_flow": read_flow,
    "write_flow": write_flow,
    "delete_flow": delete_flow,
}


def invoke(command: str, args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Run a registered command and wrap its outcome in a response envelope."""
    handler = COMMANDS.get(command)
    if handler is None:
        return _error("UNKNOWN_COMMAND", f"Unknown command: {command}")
    if args is None:
        args = {}
    if not isinstance(args, dict):
        return _error("BAD_REQUEST", "args must be an object")

    try:
        logger.debug("Invoking command '%s' with args %s", command, list(args))
        return _success(handler(args))
    except (BadRequest, InvalidFlowNameError) as exc:
        return _error("BAD_REQUEST", str(exc))
    except FlowNotFoundError as exc:
        return _error("NOT_FOUND", str(exc))
    except FlowStoreError as exc:
        return _error("IO_ERROR", str(exc))
    except Exception as exc:
        logger.exception("Unhandled exception in command %s: %s", command, exc)
        return _error("INTERNAL_ERROR", "An unexpected error occurred.")
