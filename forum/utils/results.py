# forum/utils/results.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

STATUS_CODE = "sc"
MSG = "msg"


@dataclass(frozen=True)
class Outcome:
    """Result of a settings update; `message` is only set on failure."""
    success: bool
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> "Outcome":
        return cls(True)

    @classmethod
    def failure(cls, message: str) -> "Outcome":
        return cls(False, message)

    def to_json(self) -> Dict[str, Any]:
        ret: Dict[str, Any] = {STATUS_CODE: self.success}
        if not self.success and self.message is not None:
            ret[MSG] = self.message
        return ret
