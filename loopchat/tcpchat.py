"""Two-party TCP chat on the loopback interface.

The first instance to start becomes the server; a second one connects to it
as the client. Every message travels as a fixed, zero-padded frame.
"""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

from loopchat.console import pause_window

PORT = 7777
HOST = "127.0.0.1"
MESSAGE_LENGTH = 1024
END_STRING = "end"
LISTEN_BACKLOG = 5


def _encode_frame(text: str) -> bytes:
    payload = text.encode("utf-8")[: MESSAGE_LENGTH - 1]
    return payload.ljust(MESSAGE_LENGTH, b"\x00")


def _decode_frame(frame: bytes) -> str:
    return frame.split(b"\x00", 1)[0].decode("utf-8", errors="replace")


def _send_text(sock: socket.socket, text: str) -> None:
    sock.sendall(_encode_frame(text))


def _recv_text(sock: socket.socket) -> str | None:
    """Read one frame; return None when the peer has closed the connection."""
    chunks = bytearray()
    while len(chunks) < MESSAGE_LENGTH:
        chunk = sock.recv(MESSAGE_LENGTH - len(chunks))
        if not chunk:
            break
        chunks += chunk
    if not chunks:
        return None
    return _decode_frame(bytes(chunks))


def _read_line(stdin: TextIO) -> str | None:
    line = stdin.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def _is_end(text: str) -> bool:
    return text.startswith(END_STRING)


def client_loop(sock: socket.socket, stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Send lines typed by the user and print the server's replies until "end"."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    while True:
        print("Введите сообщение для отправки на сервер:", file=out)
        line = _read_line(stdin)
        if line is None:
            line = END_STRING
        if _is_end(line):
            _send_text(sock, line)
            print("===Клиент завершил соединение!===", file=out)
            break
        _send_text(sock, line)
        print("===Сообщение передано на сервер успешно!===", file=out)
        reply = _recv_text(sock)
        if reply is None:
            break
        print(f"Сообщение от сервера: {reply}", file=out)


def server_loop(conn: socket.socket, stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Print the client's messages and send back lines typed by the user."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    while True:
        received = _recv_text(conn)
        if received is None or _is_end(received):
            print("===Клиент завершил соединение.===", file=out)
            break
        print(f"Сообщение, полученное от клиента: {received}", file=out)
        print("Введите сообщение для отправки клиенту:", file=out)
        line = _read_line(stdin)
        _send_text(conn, "" if line is None else line)
        print("===Отправка сообщения прошла успешно!===", file=out)


def _run_server(host: str, port: int, stdin: TextIO, out: TextIO) -> bool:
    print("===Произведен вход в чат на стороне сервера.===", file=out)
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        try:
            server.bind((host, port))
        except OSError:
            print("Ошибка привязки сокета!", file=out)
            pause_window(stdin, out)
            return False
        try:
            server.listen(LISTEN_BACKLOG)
        except OSError:
            print("Ошибка: не удалось прослушать новые соединения!", file=out)
            pause_window(stdin, out)
            return False
        try:
            conn, _ = server.accept()
        except OSError:
            print("Сервер не смог получить данные от клиента!", file=out)
            pause_window(stdin, out)
            return False
        with conn:
            server_loop(conn, stdin, out)
    return True


def run_chat(
    host: str = HOST,
    port: int = PORT,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> bool:
    """Join the chat as client if a server is listening, otherwise serve.

    Returns True when a chat session took place, False when setup failed.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    try:
        probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError:
        print("Ошибка создания сокета!", file=out)
        pause_window(stdin, out)
        return False

    with probe:
        try:
            probe.connect((host, port))
        except OSError:
            connected = False
        else:
            connected = True
        if connected:
            print("===Произведен вход в чат на стороне клиента.===", file=out)
            client_loop(probe, stdin, out)
            pause_window(stdin, out)
            return True

    return _run_server(host, port, stdin, out)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Two-party TCP chat.")
    parser.add_argument("--host", default=HOST, help="address to use (default: %(default)s)")
    parser.add_argument("--port", type=int, default=PORT, help="port to use (default: %(default)s)")
    args = parser.parse_args(argv)
    return 0 if run_chat(args.host, args.port) else 1