# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from typing import Optional

import logging
import socket

PROTOCOL_TO_SOCKET_TYPE = {
    "udp": socket.SOCK_DGRAM,
    "tcp": socket.SOCK_STREAM,
}


class SocketSender:
    def __init__(self, *, timeout: float = 5.0) -> None:
        self.log = logging.getLogger("SocketSender")
        self.timeout = timeout

    def open(self, protocol: str, host: str, port: int) -> Optional[socket.socket]:
        protocol = (protocol or "udp").lower()
        try:
            sock_type = PROTOCOL_TO_SOCKET_TYPE[protocol]
        except KeyError as ex:
            raise ValueError(f"Unsupported protocol {protocol!r}") from ex

        try:
            addrinfo = socket.getaddrinfo(host, port, 0, sock_type)
        except (socket.gaierror, UnicodeError) as ex:
            self.log.debug("Could not resolve %s:%s: %s: %s", host, port, ex.__class__.__name__, ex)
            return None

        for family, _type, proto, _canonname, addr in addrinfo:
            sock = socket.socket(family, sock_type, proto)
            try:
                sock.settimeout(self.timeout)
                sock.connect(addr)
            except OSError as ex:
                self.log.debug("Could not connect to %s over %s: %s: %s", addr, protocol, ex.__class__.__name__, ex)
                sock.close()
                continue
            return sock
        return None

    def write(self, handle: socket.socket, message: str) -> None:
        data = message.encode("utf-8")
        if handle.type == socket.SOCK_STREAM:
            handle.sendall(data + b"\n")
        else:
            handle.send(data)

    def close(self, handle: socket.socket) -> None:
        handle.close()
