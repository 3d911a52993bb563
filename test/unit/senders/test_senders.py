from statsdclient import senders
from statsdclient.client import StatsdClient
from statsdclient.senders.debug import LoggingSender
from statsdclient.senders.network import SocketSender

import logging
import pytest
import socket


def test_get_sender_class() -> None:
    assert senders.get_sender_class("socket") is SocketSender
    assert senders.get_sender_class("logging") is LoggingSender
    with pytest.raises(ValueError):
        senders.get_sender_class("nope")


@pytest.fixture(name="udp_server")
def fixture_udp_server():
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(5)
    yield server
    server.close()


def test_socket_sender_udp(udp_server) -> None:
    port = udp_server.getsockname()[1]
    client = StatsdClient("127.0.0.1", port, "udp", sender=SocketSender(), reduce_packet=True, fail_silently=False)
    client.send(["foo:1|c", "bar:2|g"])
    data, _ = udp_server.recvfrom(4096)
    assert data == b"foo:1|c\nbar:2|g"


def test_socket_sender_tcp() -> None:
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5)
    try:
        port = server.getsockname()[1]
        client = StatsdClient("127.0.0.1", port, "TCP", sender=SocketSender(), fail_silently=False)
        client.send(["foo:1|c", "bar:2|g"])
        conn, _ = server.accept()
        with conn:
            conn.settimeout(5)
            received = b""
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                received += chunk
        assert received == b"foo:1|c\nbar:2|g\n"
    finally:
        server.close()


def test_socket_sender_unresolvable_host() -> None:
    sender = SocketSender()
    assert sender.open("udp", "host.invalid", 8125) is None


def test_socket_sender_tcp_connection_refused() -> None:
    # grab a free port and close it again so nothing listens there
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()

    assert SocketSender(timeout=1).open("tcp", "127.0.0.1", port) is None


def test_socket_sender_unknown_protocol() -> None:
    with pytest.raises(ValueError):
        SocketSender().open("sctp", "127.0.0.1", 8125)


def test_logging_sender(caplog) -> None:
    client = StatsdClient("stats.local", 8125, "udp", sender=LoggingSender(), fail_silently=False)
    with caplog.at_level(logging.INFO, logger="LoggingSender"):
        client.send("foo:1|c")
    assert "udp://stats.local:8125: foo:1|c" in caplog.text
