"""Chat users and the messages they receive."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from loopchat.console import pause_window

EMPTY_INBOX_TEXT = "Список сообщений для вас пуст"


@dataclass(frozen=True)
class Message:
    """A message together with the login of its sender."""

    from_user: str
    text: str


@dataclass(eq=False)
class User:
    """A registered user holding a password digest and an inbox."""

    login: str
    password: bytes
    name: str
    messages: list[Message] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.password = bytes(self.password)

    def add_message(self, from_user: str, text: str) -> None:
        """Append a message to the inbox."""
        self.messages.append(Message(from_user, text))

    def print_messages(self, out: TextIO | None = None, stdin: TextIO | None = None) -> None:
        """Print every message, or report an empty inbox and wait for Enter."""
        out = sys.stdout if out is None else out
        if not self.messages:
            print(EMPTY_INBOX_TEXT, file=out)
            pause_window(stdin, out)
            return
        for number, message in enumerate(self.messages, start=1):
            print(f"Сообщение {number} от {message.from_user}:\n{message.text}", file=out)

    def is_correct_password(self, password: bytes) -> bool:
        """Return whether ``password`` equals the stored digest."""
        return self.password == bytes(password)