"""Television state machine."""

from dataclasses import dataclass, field

from recordkit.domain.common.exceptions import DomainInvariantError
from recordkit.domain.common.validators import require_integer, require_text

# Domain constraints
MAX_VOLUME = 100


@dataclass
class Television:
    """
    A television with numbered channels and a volume control.

    Channels run from 0 to ``channels`` inclusive and wrap around when
    stepping past either end. Volume stays within 0..MAX_VOLUME. Every
    operation except turning it on or off needs the set to be on.
    """

    brand: str
    channels: int
    on: bool = field(default=False, init=False)
    channel: int = field(default=0, init=False)
    volume: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.brand = require_text(self.brand, "brand", message="Brand is required")
        self.channels = require_integer(
            self.channels,
            "channels",
            minimum=1,
            message="Number of channels must be a positive integer",
        )

    def _require_on(self) -> None:
        if not self.on:
            raise DomainInvariantError("Television", "the television is off")

    def turn_on(self) -> None:
        self.on = True

    def turn_off(self) -> None:
        self.on = False

    def next_channel(self) -> int:
        self._require_on()
        self.channel = 0 if self.channel == self.channels else self.channel + 1
        return self.channel

    def previous_channel(self) -> int:
        self._require_on()
        self.channel = self.channels if self.channel == 0 else self.channel - 1
        return self.channel

    def change_channel(self, channel: int) -> int:
        """
        Jump to a channel.

        Raises:
            DomainInvariantError: If the television is off
            ValidationError: If the channel does not exist
        """
        self._require_on()
        self.channel = require_integer(
            channel,
            "channel",
            minimum=0,
            maximum=self.channels,
            message=f"Channel must be an integer from 0 to {self.channels}",
        )
        return self.channel

    def volume_up(self) -> int:
        self._require_on()
        self.volume = min(MAX_VOLUME, self.volume + 1)
        return self.volume

    def volume_down(self) -> int:
        self._require_on()
        self.volume = max(0, self.volume - 1)
        return self.volume

    def describe(self) -> str:
        return (
            f"Television {self.brand}\n"
            f"- Channels: {self.channels}\n"
            f"- Current channel: {self.channel}\n"
            f"- Current volume: {self.volume}"
        )
