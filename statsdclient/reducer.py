# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Packet reduction

StatsD servers accept several metrics in a single datagram, separated by a newline:

  https://github.com/statsd/statsd/blob/master/docs/metric_types.md#multi-metric-packets

Messages are packed greedily in their original order, a message never gets split.

"""
from functools import reduce
from typing import Iterable, List

# Safe UDP payload size: 576 byte minimum datagram size minus IP and UDP headers
MAX_PACKET_SIZE = 548
SEPARATOR = "\n"


def _byte_size(message: str) -> int:
    return len(message.encode("utf-8"))


def _combine(packets: List[str], message: str) -> List[str]:
    last_packet = packets[-1] if packets else ""
    last_size = _byte_size(last_packet)
    total_size = last_size + _byte_size(message) + len(SEPARATOR)

    if total_size > MAX_PACKET_SIZE:
        packets.append(message)
    elif packets:
        packets[-1] = last_packet + SEPARATOR + message if last_size > 0 else message
    else:
        packets.append(message)
    return packets


def reduce_packets(messages: Iterable[str]) -> List[str]:
    return reduce(_combine, messages, [])
