# loopchat

This is a small console chat between two terminals on the same machine. The
package also holds the pieces the chat is built from: a user and message model
and a pure-Python SHA-1.

The chat's prompts and status lines are in Russian.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Chatting

Open two terminals and run the same command in each:

    loopchat

Options:

- `--host` sets the address to use. The default is `127.0.0.1`.
- `--port` sets the port to use. The default is `7777`.

The first instance tries to connect to that address. When the connection
fails, it becomes the server: it binds, listens and waits for one client. The
second instance connects and becomes the client.

- The client sends first. After each message it waits for the server's reply.
- The server shows each message it receives and then asks for a reply.
- A message that begins with `end` ends the conversation on both sides.
- When the client's input ends (end of file), the client sends `end`.
- When the server's input ends, the server sends an empty reply.
- The server also stops when the client closes the connection.

Each message goes over the wire as a fixed frame of 1024 bytes, padded with
zero bytes. The text is encoded as UTF-8, and anything past the first
1023 bytes is cut off.

The command exits with status 0 after a conversation has taken place. It exits
with status 1 when it could not set up the socket, for example when binding
fails. In that case it prints an error and waits for Enter. After the client
side finishes, it waits for Enter before exiting.

## Using the library

```python
from loopchat.sha1 import sha1
from loopchat.user import User

password_hash = sha1(b"password")
alice = User("alice", password_hash, "Alice")

alice.add_message("bob", "hello")
alice.is_correct_password(sha1(b"password"))   # True
alice.messages[0].from_user                    # "bob"
```

`loopchat.sha1`:

- `sha1(data)` takes bytes, a bytearray or a memoryview and returns the 20-byte
  digest. Passing a `str` raises `TypeError`.
- `cycle_shift_left(val, bit_count)` rotates a 32-bit word to the left.

`loopchat.user`:

- `Message` is a frozen dataclass with the fields `from_user` and `text`.
- `User` is a dataclass with the fields `login`, `password` (the stored digest,
  kept as `bytes`), `name` and `messages`.
- `User.add_message(from_user, text)` appends a message to `messages`.
- `User.is_correct_password(password)` compares a digest with the stored one.
- `User.print_messages(out, stdin)` writes every message, numbered from 1. If
  there are none, it says the list is empty and waits for Enter.

`loopchat.console`:

- `clear_screen(out)` writes the ANSI sequence that clears the terminal.
- `pause_window(stdin, out)` prints a prompt and waits for one line of input.

`loopchat.tcpchat`:

- `run_chat(host, port, stdin, out)` runs one conversation. It tries to connect
  as a client and falls back to serving. It returns `True` when a session took
  place and `False` when setup failed.
- `client_loop(sock, stdin, out)` runs the client side over a socket you have
  already connected.
- `server_loop(conn, stdin, out)` runs the server side over a socket you have
  already accepted.
- `main(argv)` is the command-line entry point.

Every `stdin` and `out` argument defaults to the process's standard streams.

## What it does not do

There is no menu for registering users, logging in or sending messages between
users. `User` objects live only in memory, and nothing is saved to disk.

The chat itself connects exactly two parties, one client and one server. It
does not use the user model: messages carry no login or name.