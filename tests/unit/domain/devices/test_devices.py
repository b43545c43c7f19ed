"""Tests for the car, television and calculator state machines."""

import math

import pytest

from recordkit.domain.common.exceptions import DomainInvariantError, ValidationError
from recordkit.domain.devices.entities import Calculator, Car, CarState, Television


class TestCar:
    """Test suite for Car."""

    @pytest.fixture
    def car(self) -> Car:
        return Car("Toyota", "Corolla", "AB 123 CD")

    def test_starts_off_and_still(self, car: Car) -> None:
        assert car.snapshot() == CarState(
            running=False, speed=0, brand="Toyota", model="Corolla", plate="AB 123 CD"
        )
        assert car.describe() == "Toyota Corolla, plate AB 123 CD"

    def test_cannot_accelerate_when_off(self, car: Car) -> None:
        with pytest.raises(DomainInvariantError, match="engine is off"):
            car.accelerate()
        with pytest.raises(DomainInvariantError):
            car.decelerate()
        assert car.speed == 0

    def test_speed_changes_in_steps(self, car: Car) -> None:
        car.start()
        car.accelerate()
        assert car.accelerate() == 20
        assert car.decelerate() == 10

    def test_speed_floor_is_zero(self, car: Car) -> None:
        car.start()
        car.accelerate()
        car.decelerate()
        assert car.decelerate() == 0

    def test_stop_requires_standstill(self, car: Car) -> None:
        car.start()
        car.accelerate()

        with pytest.raises(DomainInvariantError, match="fully stopped"):
            car.stop()
        assert car.running is True

        car.decelerate()
        car.stop()
        assert car.snapshot().running is False

    def test_snapshot_is_read_only(self, car: Car) -> None:
        state = car.snapshot()
        with pytest.raises(AttributeError):
            state.speed = 100  # type: ignore[misc]

    def test_requires_fields(self) -> None:
        with pytest.raises(ValidationError, match="Plate is required"):
            Car("Toyota", "Corolla", "")


class TestTelevision:
    """Test suite for Television."""

    @pytest.fixture
    def tv(self) -> Television:
        tv = Television("LG", 20)
        tv.turn_on()
        return tv

    @pytest.mark.parametrize("channels", [0, -2, 2.5, "20"])
    def test_channels_positive_integer(self, channels: object) -> None:
        with pytest.raises(ValidationError, match="positive integer"):
            Television("LG", channels)  # type: ignore[arg-type]

    def test_requires_power(self) -> None:
        tv = Television("LG", 20)
        for operation in (tv.next_channel, tv.previous_channel, tv.volume_up, tv.volume_down):
            with pytest.raises(DomainInvariantError, match="television is off"):
                operation()
        with pytest.raises(DomainInvariantError):
            tv.change_channel(3)

    def test_channels_wrap(self, tv: Television) -> None:
        assert tv.previous_channel() == 20
        assert tv.next_channel() == 0
        tv.change_channel(20)
        assert tv.next_channel() == 0

    def test_change_channel_range(self, tv: Television) -> None:
        assert tv.change_channel(10) == 10
        with pytest.raises(ValidationError, match="from 0 to 20"):
            tv.change_channel(21)
        with pytest.raises(ValidationError):
            tv.change_channel(-1)
        assert tv.channel == 10

    def test_volume_clamped(self, tv: Television) -> None:
        assert tv.volume_down() == 0
        for _ in range(105):
            tv.volume_up()
        assert tv.volume == 100

    def test_turn_off_keeps_state(self, tv: Television) -> None:
        tv.change_channel(5)
        tv.turn_off()
        tv.turn_on()
        assert tv.channel == 5

    def test_describe(self, tv: Television) -> None:
        tv.change_channel(3)
        tv.volume_up()
        assert tv.describe() == (
            "Television LG\n- Channels: 20\n- Current channel: 3\n- Current volume: 1"
        )


class TestCalculator:
    """Test suite for Calculator."""

    def test_running_result(self) -> None:
        calculator = Calculator()
        calculator.add(10)
        calculator.subtract(4)
        calculator.multiply(3)
        assert calculator.divide(4) == pytest.approx(4.5)
        assert calculator.result == pytest.approx(4.5)

    def test_reset(self) -> None:
        calculator = Calculator()
        calculator.add(7)
        calculator.reset()
        assert calculator.result == 0

    def test_divide_by_zero(self) -> None:
        calculator = Calculator()
        calculator.add(5)
        with pytest.raises(DomainInvariantError, match="divide by zero"):
            calculator.divide(0)
        assert calculator.result == 5

    @pytest.mark.parametrize("value", [math.nan, math.inf, "3", None, True])
    def test_rejects_non_finite_operands(self, value: object) -> None:
        calculator = Calculator()
        with pytest.raises(ValidationError, match="Operand must be a finite number"):
            calculator.add(value)  # type: ignore[arg-type]
        assert calculator.result == 0

    @pytest.mark.parametrize(
        ("operation", "value"),
        [("multiply", 10), ("add", 1e308), ("subtract", -1e308), ("divide", 1e-308)],
    )
    def test_overflow_keeps_previous_result(self, operation: str, value: float) -> None:
        calculator = Calculator()
        calculator.add(1e308)

        with pytest.raises(DomainInvariantError, match="not be a finite number"):
            getattr(calculator, operation)(value)

        assert calculator.result == 1e308
        assert math.isfinite(calculator.add(1))
