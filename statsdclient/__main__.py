# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Send raw StatsD messages from the command line

  statsdclient [--sample-rate RATE] config.json "requests:1|c" "latency:12|ms"

"""
from .config import client_from_config, load_config
from .errors import ConfigError

import logging
import sys

LOG_FORMAT = "%(asctime)s\t%(name)s\t%(levelname)s\t%(message)s"


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    args = list(args)

    sample_rate = 1.0
    if args and args[0] == "--sample-rate":
        if len(args) < 2:
            print("--sample-rate requires a value")
            return 1
        try:
            sample_rate = float(args[1])
        except ValueError:
            print("invalid sample rate {!r}".format(args[1]))
            return 1
        args = args[2:]

    if len(args) < 2:
        print("usage: statsdclient [--sample-rate RATE] config.json message [message ...]")
        return 1

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    try:
        config = load_config(args[0])
        logging.root.setLevel(config["log_level"])
        client = client_from_config(config)
    except ConfigError as ex:
        logging.fatal("statsdclient failed to start: %s", ex)
        return 1

    client.send(args[1:], sample_rate=sample_rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
