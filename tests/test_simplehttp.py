import socket
import threading

import pytest

from learnkit.simplehttp import REQUEST, head_request, main

REPLY = b"HTTP/1.0 200 OK\r\nServer: test\r\n\r\n"


@pytest.fixture
def server():
    listener = socket.create_server(("127.0.0.1", 0))
    received = []

    def serve():
        conn, _ = listener.accept()
        with conn:
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            received.append(data)
            conn.sendall(REPLY)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield f"127.0.0.1:{listener.getsockname()[1]}", received
    thread.join(timeout=5)
    listener.close()


def test_head_request_round_trip(server):
    service, received = server
    assert head_request(service) == REPLY
    assert received == [b"HEAD / HTTP/1.0\r\n\r\n"]
    assert REQUEST == b"HEAD / HTTP/1.0\r\n\r\n"


def test_main_prints_reply(server, capsys):
    service, _ = server
    assert main([service]) == 0
    assert capsys.readouterr().out == REPLY.decode() + "\n"


@pytest.mark.parametrize("service", ["nohost", "host:port", "a:b:80", "[::1"])
def test_invalid_service(service):
    with pytest.raises(ValueError):
        head_request(service)


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Usage: ")


def test_main_reports_connection_failure(capsys):
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert main([f"127.0.0.1:{port}"]) == 1
    assert capsys.readouterr().err.startswith("Fatal error: ")


def test_main_reports_bad_address(capsys):
    assert main(["nohost"]) == 1
    assert "Fatal error: " in capsys.readouterr().err