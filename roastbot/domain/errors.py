# roastbot/domain/errors.py
from __future__ import annotations
import functools, logging, sqlite3
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)


class GameError(Exception):
    kind = "error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class InsufficientBalance(GameError):
    kind = "insufficient_balance"

class Blocked(GameError):
    kind = "blocked"

class NotFound(GameError):
    kind = "not_found"

class NegligibleValue(GameError):
    kind = "negligible_value"

class SelfTarget(GameError):
    kind = "self_target"

class InvalidAddress(GameError):
    kind = "invalid_address"

class Unconfigured(GameError):
    kind = "unconfigured"

class Cooldown(GameError):
    kind = "cooldown"

    def __init__(self, message: str = "", retry_after: int = 0):
        super().__init__(message)
        self.retry_after = int(retry_after)


class Outcome(BaseModel):
    """Résultat structuré d'une opération de jeu (jamais d'exception côté appelant)."""
    success: bool
    message: str = ""
    error: Optional[str] = None
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def ok(cls, message: str = "", **data) -> "Outcome":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, err: GameError, **data) -> "Outcome":
        if isinstance(err, Cooldown):
            data.setdefault("retry_after", err.retry_after)
        return cls(success=False, message=err.message, error=err.kind, data=data)


def guarded(fn: Callable[..., Outcome]) -> Callable[..., Outcome]:
    """
    Frontière d'action: GameError -> Outcome en échec, erreur SQLite -> échec générique.
    Le premier argument doit être la Database (None = non configurée).
    """
    @functools.wraps(fn)
    def wrapper(db, *args, **kwargs) -> Outcome:
        if db is None:
            return Outcome.fail(Unconfigured("Game database not configured"))
        try:
            return fn(db, *args, **kwargs)
        except GameError as e:
            return Outcome.fail(e)
        except sqlite3.Error:
            log.exception("Storage failure in %s", fn.__name__)
            return Outcome(success=False, message="Something went wrong, try again later.", error="storage")
    return wrapper
