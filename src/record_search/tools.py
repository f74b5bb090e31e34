"""
Record tools - tool functions over the process-global store

Every tool returns a dict with a success flag. The global store is guarded by
one re-entrant lock held for the whole call.
"""

import logging
import threading
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, cast

import psutil

from .config import get_store_config
from .core import Record, RecordStore

logger = logging.getLogger(__name__)

_global_store: Optional[RecordStore] = None
_store_lock = threading.RLock()


def handle_tool_errors(func: Callable) -> Callable:
    """Uniform error envelope for tool functions."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            result = func(*args, **kwargs)
            if isinstance(result, dict) and "success" not in result:
                result["success"] = True
            return cast(Dict[str, Any], result)
        except ValueError as e:
            return {"success": False, "error": f"Invalid value: {e}", "function": func.__name__}
        except Exception as e:
            logger.exception(f"Tool {func.__name__} failed")
            return {"success": False, "error": str(e), "function": func.__name__}

    return wrapper


def get_store() -> RecordStore:
    """Global store, created lazily from the current config."""
    global _global_store
    with _store_lock:
        if _global_store is None:
            _global_store = RecordStore(get_store_config())
        return _global_store


def reset_store() -> RecordStore:
    global _global_store
    with _store_lock:
        _global_store = RecordStore(get_store_config())
        return _global_store


def clear_store() -> None:
    """Forget the global store; the next get_store() builds a new one."""
    global _global_store
    with _store_lock:
        _global_store = None


def _serialize(records: List[Record]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]


# ----- write tools -----


@handle_tool_errors
def tool_add_record(key: str, label: str, score: float) -> Dict[str, Any]:
    if not isinstance(key, str) or not isinstance(label, str):
        raise ValueError("key and label must be strings")
    with _store_lock:
        store = get_store()
        store.add_record(key, label, float(score))
        return {"key": key, "size": store.size()}


@handle_tool_errors
def tool_reset_store() -> Dict[str, Any]:
    store = reset_store()
    logger.info("Record store reset")
    return {"size": store.size()}


# ----- read tools -----


@handle_tool_errors
def tool_search_by_id(key: str) -> Dict[str, Any]:
    with _store_lock:
        record = get_store().search_by_id(key)
    return {"found": record is not None, "record": record.to_dict() if record else None}


@handle_tool_errors
def tool_search_by_name(prefix: str) -> Dict[str, Any]:
    with _store_lock:
        records = get_store().search_by_name(prefix)
    return {"records": _serialize(records), "count": len(records)}


@handle_tool_errors
def tool_search_by_exact_name(name: str) -> Dict[str, Any]:
    with _store_lock:
        records = get_store().search_by_exact_name(name)
    return {"records": _serialize(records), "count": len(records)}


@handle_tool_errors
def tool_list_records() -> Dict[str, Any]:
    with _store_lock:
        records = get_store().all_records()
    return {"records": _serialize(records), "count": len(records)}


@handle_tool_errors
def tool_get_store_stats() -> Dict[str, Any]:
    with _store_lock:
        stats = get_store().stats()
    rss = psutil.Process().memory_info().rss
    return {**stats, "process_rss_mb": round(rss / 1024 / 1024, 1)}
