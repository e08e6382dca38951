from dataclasses import dataclass, field
from typing import List, Optional

MESSAGES_NAMESPACE = 'http://www.canadapost.ca/ws/messages'


@dataclass(frozen=True)
class Message:
    code: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Messages:
    message: List[Message] = field(default_factory=list)
