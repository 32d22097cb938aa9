"""Send a HEAD request to a host and print the raw reply."""

from __future__ import annotations

import socket
import sys
from collections.abc import Sequence

REQUEST = b"HEAD / HTTP/1.0\r\n\r\n"


def _split_service(service: str) -> tuple[str, int]:
    """Split 'host:port' (or '[ipv6]:port') into its parts."""
    if service.startswith("["):
        end = service.find("]")
        if end < 0:
            raise ValueError(f"missing ']' in address {service!r}")
        host, rest = service[1:end], service[end + 1 :]
        if not rest.startswith(":"):
            raise ValueError(f"missing port in address {service!r}")
        port_text = rest[1:]
    else:
        host, sep, port_text = service.rpartition(":")
        if not sep:
            raise ValueError(f"missing port in address {service!r}")
        if ":" in host:
            raise ValueError(f"too many colons in address {service!r}")
    if not port_text.isdigit() or int(port_text) > 65535:
        raise ValueError(f"invalid port {port_text!r}")
    return host or "localhost", int(port_text)


def head_request(service: str) -> bytes:
    """Connect to ``service`` over TCP, send a HEAD request and return the full reply."""
    host, port = _split_service(service)
    with socket.create_connection((host, port)) as conn:
        conn.sendall(REQUEST)
        chunks = []
        while chunk := conn.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks)


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the headers of the given host:port and print them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Usage: simplehttp host:port")
        return 1
    try:
        result = head_request(args[0])
    except (OSError, ValueError) as error:
        sys.stderr.write(f"Fatal error: {error}")
        return 1
    print(result.decode("utf-8", "replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())