"""Error kinds surfaced by the shuffle and reading endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class ErrorKind(str, Enum):
    EMPTY_CATALOG = "EmptyCatalog"
    MISSING_SESSION_ID = "MissingSessionId"
    SESSION_NOT_FOUND = "SessionNotFound"
    MISSING_QUESTION = "MissingQuestion"
    PICKS_NOT_ARRAY = "PicksNotArray"
    WRONG_COUNT = "WrongCount"
    INVALID_TYPE = "InvalidType"
    OUT_OF_POOL = "OutOfPool"
    DUPLICATE_PICK = "DuplicatePick"
    INVALID_BODY = "InvalidBody"


MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.EMPTY_CATALOG: "牌库为空：请检查 tarotDeck.json",
    ErrorKind.MISSING_SESSION_ID: "缺少 shuffleId",
    ErrorKind.SESSION_NOT_FOUND: "shuffleId 无效或已过期，请重新洗牌。",
    ErrorKind.MISSING_QUESTION: "缺少 question（你的问题）",
    ErrorKind.PICKS_NOT_ARRAY: "picks 必须是数组",
    ErrorKind.WRONG_COUNT: "你需要选择 {count} 张牌（picks 长度必须为 {count}）",
    ErrorKind.INVALID_TYPE: "picks 中包含非整数 id",
    ErrorKind.OUT_OF_POOL: "picks 中包含不在本次牌池的 id（请不要作弊/误传）",
    ErrorKind.DUPLICATE_PICK: "picks 里有重复 id（同一张牌不能选两次）",
    ErrorKind.INVALID_BODY: "请求体必须是 JSON 对象",
}


class ReadingError(Exception):
    """A request the reading flow refuses to serve.

    Every kind except EMPTY_CATALOG is caused by client input and maps to
    a 400; none of them is worth retrying with the same payload.
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None, status_code: Optional[int] = None):
        self.kind = kind
        self.message = message or MESSAGES[kind]
        if status_code is None:
            status_code = 500 if kind is ErrorKind.EMPTY_CATALOG else 400
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.message, "kind": self.kind.value}


class SessionNotFound(ReadingError, LookupError):
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(ErrorKind.SESSION_NOT_FOUND)
