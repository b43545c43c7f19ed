"""Car state machine."""

from dataclasses import dataclass, field

from recordkit.domain.common.exceptions import DomainInvariantError
from recordkit.domain.common.validators import require_text

# Domain constraints
SPEED_STEP = 10


@dataclass(frozen=True)
class CarState:
    """Read-only copy of a car's state."""

    running: bool
    speed: int
    brand: str
    model: str
    plate: str


@dataclass
class Car:
    """
    A car that can be started, stopped, sped up and slowed down.

    Business Rules:
    - Speed only changes while the engine is running
    - Speed never goes below 0
    - The engine can only be stopped at speed 0
    """

    brand: str
    model: str
    plate: str
    running: bool = field(default=False, init=False)
    speed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.brand = require_text(self.brand, "brand", message="Brand is required")
        self.model = require_text(self.model, "model", message="Model is required")
        self.plate = require_text(self.plate, "plate", message="Plate is required")

    def _require_running(self) -> None:
        if not self.running:
            raise DomainInvariantError("Car", "the engine is off")

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        """
        Turn the engine off.

        Raises:
            DomainInvariantError: If the car is still moving
        """
        if self.speed != 0:
            raise DomainInvariantError("Car", "the car must be fully stopped to turn off")
        self.running = False

    def accelerate(self) -> int:
        """Add SPEED_STEP to the speed and return the new speed."""
        self._require_running()
        self.speed += SPEED_STEP
        return self.speed

    def decelerate(self) -> int:
        """Remove SPEED_STEP from the speed, stopping at 0, and return the new speed."""
        self._require_running()
        self.speed = max(0, self.speed - SPEED_STEP)
        return self.speed

    def snapshot(self) -> CarState:
        return CarState(
            running=self.running,
            speed=self.speed,
            brand=self.brand,
            model=self.model,
            plate=self.plate,
        )

    def describe(self) -> str:
        return f"{self.brand} {self.model}, plate {self.plate}"
