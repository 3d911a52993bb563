import logging


class LoggingSender:
    """Writes packets to the log instead of the network"""

    def __init__(self, *, level: int = logging.INFO) -> None:
        self.log = logging.getLogger("LoggingSender")
        self.level = level

    def open(self, protocol, host, port):
        return "{}://{}:{}".format(protocol, host, port)

    def write(self, handle, message):
        self.log.log(self.level, "%s: %s", handle, message)

    def close(self, handle):
        pass
