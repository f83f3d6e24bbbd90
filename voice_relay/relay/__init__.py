from .status import SessionStatus
from .session import RelaySession
from .registry import SessionRegistry

__all__ = ["RelaySession", "SessionRegistry", "SessionStatus"]
