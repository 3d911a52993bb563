# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .client import StatsdClient
from .errors import ConfigError
from .senders import get_sender_class

import json
import logging

DEFAULT_CONFIG = {
    "host": "127.0.0.1",
    "port": 8125,
    "protocol": "udp",
    "fail_silently": True,
    "reduce_packet": False,
    "sender": "socket",
    "log_level": "INFO",
}

log = logging.getLogger("statsdclient.config")


def load_config(config_path):
    try:
        with open(config_path) as fp:
            user_config = json.load(fp)
    except FileNotFoundError as ex:
        raise ConfigError("Cannot start without json config file at {!r}".format(config_path)) from ex
    except json.JSONDecodeError as ex:
        raise ConfigError("Invalid json in config file {!r}: {}".format(config_path, ex)) from ex

    if not isinstance(user_config, dict):
        raise ConfigError("Config file {!r} must contain a json object".format(config_path))

    unknown_keys = sorted(set(user_config) - set(DEFAULT_CONFIG))
    if unknown_keys:
        raise ConfigError("Unknown config keys: {}".format(", ".join(unknown_keys)))

    config = DEFAULT_CONFIG.copy()
    config.update(user_config)
    log.info("loaded config: %r", config)
    return config


def client_from_config(config):
    try:
        sender_class = get_sender_class(config.get("sender", DEFAULT_CONFIG["sender"]))
    except ValueError as ex:
        raise ConfigError(str(ex)) from ex

    return StatsdClient(
        host=config.get("host", DEFAULT_CONFIG["host"]),
        port=int(config.get("port", DEFAULT_CONFIG["port"])),
        protocol=config.get("protocol", DEFAULT_CONFIG["protocol"]),
        sender=sender_class(),
        reduce_packet=bool(config.get("reduce_packet", DEFAULT_CONFIG["reduce_packet"])),
        fail_silently=bool(config.get("fail_silently", DEFAULT_CONFIG["fail_silently"])),
    )
