from typing import Any, Optional, Protocol


class Sender(Protocol):
    """
    Transport used by StatsdClient.

    A handle is opened once per send, every packet is written through it in order and it is closed
    afterwards. open() returns a falsy value when no connection could be made.
    """

    def open(self, protocol: str, host: str, port: int) -> Optional[Any]:
        ...

    def write(self, handle: Any, message: str) -> None:
        ...

    def close(self, handle: Any) -> None:
        ...
