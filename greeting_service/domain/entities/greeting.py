from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """Represents the message returned for every request."""

    message: str

    def encode(self) -> bytes:
        return self.message.encode("utf-8")
