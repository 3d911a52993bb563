from .debug import LoggingSender
from .network import SocketSender

SENDER_CLASSES = {
    "logging": LoggingSender,
    "socket": SocketSender,
}


def get_sender_class(sender_type):
    try:
        return SENDER_CLASSES[sender_type]
    except KeyError as ex:
        raise ValueError(f"Unknown sender type {sender_type!r}") from ex
