# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
StatsD metric entities

Wire format: "user.logins:1|c", optionally followed by "|@0.1" for sampled metrics.

"""
from .types import MetricType
from typing import SupportsFloat, Union


class StatsdData:
    def __init__(
        self, key: str, value: Union[SupportsFloat, str], metric_type: MetricType, sample_rate: SupportsFloat = 1
    ) -> None:
        self.key = key
        self.value = value
        self.metric_type = MetricType(metric_type)
        self.sample_rate = sample_rate

    @property
    def bare_message(self) -> str:
        return "{}:{}|{}".format(self.key, self.value, self.metric_type)

    @property
    def message(self) -> str:
        message = self.bare_message
        if float(self.sample_rate) < 1:
            message += "|@{}".format(self.sample_rate)
        return message

    def __str__(self):
        return self.message

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.message)

    def __eq__(self, other):
        if not isinstance(other, StatsdData):
            return NotImplemented
        return self.message == other.message

    def __hash__(self):
        return hash(self.message)


def timing(key: str, time_ms: SupportsFloat) -> StatsdData:
    return StatsdData(key, time_ms, MetricType.TIMING)


def gauge(key: str, value: SupportsFloat) -> StatsdData:
    return StatsdData(key, value, MetricType.GAUGE)


def set_(key: str, value: Union[SupportsFloat, str]) -> StatsdData:
    return StatsdData(key, value, MetricType.SET)


def update_count(key: str, delta: int, sample_rate: SupportsFloat = 1) -> StatsdData:
    return StatsdData(key, delta, MetricType.COUNT, sample_rate=sample_rate)


def increment(key: str) -> StatsdData:
    return update_count(key, 1)


def decrement(key: str) -> StatsdData:
    return update_count(key, -1)


def format_message(item: Union[StatsdData, str], own_sample_rate: bool = True) -> str:
    """Return the wire text of a metric entity or a raw message, optionally without the entity's sample rate"""
    if isinstance(item, StatsdData):
        return item.message if own_sample_rate else item.bare_message
    if isinstance(item, str):
        return item
    raise TypeError("Unsupported metric type {!r}".format(type(item).__name__))
