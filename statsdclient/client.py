# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
StatsD client

Sends metrics through a pluggable sender. Metric delivery is fire-and-forget: unless fail_silently
is disabled, transport errors never reach the caller.

"""
from . import entity
from .entity import format_message, StatsdData
from .reducer import reduce_packets
from .sampling import annotate
from .senders.base import Sender
from typing import List, NamedTuple, Optional, Sequence, SupportsFloat, Union

import logging

MetricData = Union[StatsdData, str, Sequence[Union[StatsdData, str]]]


class SendResult(NamedTuple):
    packets_sent: int
    error: Optional[Exception]


class StatsdClient:
    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = 8125,
        protocol: str = "udp",
        *,
        sender: Sender,
        reduce_packet: bool = False,
        fail_silently: bool = True,
    ) -> None:
        self.log = logging.getLogger("StatsdClient")
        self.host = host
        self.port = port
        self.protocol = protocol
        self.sender = sender
        self.reduce_packet = reduce_packet
        self.fail_silently = fail_silently

    @staticmethod
    def _normalize(data, own_sample_rate: bool = True) -> List[str]:
        if isinstance(data, (StatsdData, str)):
            data = [data]
        if not isinstance(data, (list, tuple)) or not data:
            return []
        return [format_message(item, own_sample_rate) for item in data if isinstance(item, (StatsdData, str))]

    def reduce_count(self, data):
        """Pack a list of messages into as few packets as possible"""
        if isinstance(data, (list, tuple)):
            return reduce_packets(data)
        return data

    def append_sample_rate(self, data: Sequence[str], sample_rate: SupportsFloat = 1) -> List[str]:
        return annotate(data, sample_rate)

    def _transmit(self, packets: Sequence[str]) -> SendResult:
        sent = 0
        error = None
        try:
            handle = self.sender.open(self.protocol, self.host, self.port)
        except Exception as ex:  # pylint: disable=broad-except
            return SendResult(packets_sent=0, error=ex)
        if not handle:
            return SendResult(packets_sent=0, error=None)

        try:
            for packet in packets:
                self.sender.write(handle, packet)
                sent += 1
        except Exception as ex:  # pylint: disable=broad-except
            error = ex

        # the handle is released even after a failed write, a write error wins over a close error
        try:
            self.sender.close(handle)
        except Exception as ex:  # pylint: disable=broad-except
            error = error or ex
        return SendResult(packets_sent=sent, error=error)

    def send(self, data: MetricData, sample_rate: SupportsFloat = 1) -> None:
        # a sample rate given to send overrides the one carried by an entity
        messages = self._normalize(data, own_sample_rate=float(sample_rate) >= 1)
        if not messages:
            return

        if float(sample_rate) < 1:
            messages = self.append_sample_rate(messages, sample_rate)
        if self.reduce_packet:
            messages = self.reduce_count(messages)

        result = self._transmit(messages)
        if result.error is not None and not self.fail_silently:
            raise result.error
        if result.error is None:
            self.log.debug("Sent %d packet(s) to %s://%s:%s", result.packets_sent, self.protocol, self.host, self.port)

    def timing(self, key: str, time_ms: SupportsFloat, sample_rate: SupportsFloat = 1) -> None:
        self.send(entity.timing(key, time_ms), sample_rate)

    def gauge(self, key: str, value: SupportsFloat, sample_rate: SupportsFloat = 1) -> None:
        self.send(entity.gauge(key, value), sample_rate)

    def set_(self, key: str, value: Union[SupportsFloat, str], sample_rate: SupportsFloat = 1) -> None:
        self.send(entity.set_(key, value), sample_rate)

    def update_count(self, key: str, delta: int, sample_rate: SupportsFloat = 1) -> None:
        self.send(entity.update_count(key, delta), sample_rate)

    def increment(self, key: str, sample_rate: SupportsFloat = 1) -> None:
        self.send(entity.increment(key), sample_rate)

    def decrement(self, key: str, sample_rate: SupportsFloat = 1) -> None:
        self.send(entity.decrement(key), sample_rate)
