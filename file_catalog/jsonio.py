# file_catalog/jsonio.py
from __future__ import annotations
import json, logging, sys
from typing import Any, Dict, Iterable, List, Optional

from .models.file_record import FileRecord

SCHEMA_VERSION = 1


def enable_json_logging():
    """Route logging to stderr at ERROR so stdout carries a single JSON document."""
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    logging.basicConfig(stream=sys.stderr, level=logging.ERROR)


def records_to_json(records: Iterable[FileRecord]) -> List[Dict[str, Any]]:
    return [
        {"path": r.path, "size": r.size, "hash": r.hash, "search_terms": list(r.search_terms)}
        for r in records
    ]


def _emit(command: str, result: str, body: Dict[str, Any]) -> None:
    payload = {"result": result, "command": command, "schema": SCHEMA_VERSION}
    payload.update(body)
    try:
        print(json.dumps(payload, ensure_ascii=False), file=sys.stdout)
    except UnicodeEncodeError:
        print(json.dumps(payload), file=sys.stdout)
    sys.stdout.flush()


def success(command: str, data: Dict[str, Any] | list | None = None,
            meta: Optional[Dict[str, Any]] = None, code: int = 0) -> int:
    body: Dict[str, Any] = {"data": data if data is not None else {}}
    if meta:
        body["meta"] = meta
    _emit(command, "success", body)
    return code


def error(command: str, message: str, debug: Optional[Dict[str, Any]] = None, code: int = 1) -> int:
    body: Dict[str, Any] = {"error": message}
    if debug:
        body["debug"] = debug
    _emit(command, "error", body)
    return code
