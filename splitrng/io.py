"""Persistence of generator state for save/replay."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from splitrng.config import DEFAULT_HASH_CONFIG, SESSION_FORMAT_VERSION
from splitrng.generator import Prng
from splitrng.state import State, StateFormatError

logger = logging.getLogger(__name__)


def write_state(path: str | Path, state: State) -> None:
    """Write the raw 16-byte state layout."""

    Path(path).write_bytes(state.to_bytes())


def read_state(path: str | Path) -> State:
    return State.from_bytes(Path(path).read_bytes())


def session_payload(prng: Prng, *, label: str | None = None) -> dict[str, Any]:
    state = prng.state()
    return {
        "format_version": SESSION_FORMAT_VERSION,
        "hash": DEFAULT_HASH_CONFIG.to_dict(),
        "label": label,
        "state": state.to_hex(),
        "words": list(state.words),
    }


def write_session(path: str | Path, prng: Prng, *, label: str | None = None) -> None:
    """Write a JSON session from which `read_session` resumes the exact stream."""

    payload = session_payload(prng, label=label)
    text = json.dumps(payload, indent=2, sort_keys=True)
    Path(path).write_text(text + "\n", encoding="utf-8")
    logger.debug("wrote session %s state=%s", path, payload["state"])


def read_session(path: str | Path) -> Prng:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise StateFormatError(f"session file is not valid UTF-8 JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise StateFormatError(f"session file must hold a JSON object: {path}")

    version = payload.get("format_version")
    if version != SESSION_FORMAT_VERSION:
        raise StateFormatError(f"unsupported session format_version {version!r} in {path}")
    if payload.get("hash") != DEFAULT_HASH_CONFIG.to_dict():
        raise StateFormatError(f"session {path} was written with a different hash layout")

    state_hex = payload.get("state")
    if not isinstance(state_hex, str):
        raise StateFormatError(f"session {path} has no state")
    state = State.from_hex(state_hex)
    if payload.get("words") != list(state.words):
        raise StateFormatError(f"session {path} words do not match its state")
    logger.debug("read session %s state=%s", path, state_hex)
    return Prng.from_state(state)
