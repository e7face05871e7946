"""
Simulation configuration: delays and the demand schedule.
Parses the form inputs and rejects malformed values before any engine exists.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union
import config


class ConfigurationError(ValueError):
    """Raised when user supplied configuration cannot start a simulation."""


def _parse_whole_number(token: str, position: int) -> int:
    """Parse one comma-separated token of the demand list."""
    text = token.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise ConfigurationError(
            f"Demand entry {position + 1} is not a number: {token!r}"
        ) from None
    if not value.is_integer():
        raise ConfigurationError(
            f"Demand entry {position + 1} is not a whole number: {token!r}"
        )
    return int(value)


@dataclass(frozen=True)
class DemandSchedule:
    """Step function mapping a day to a demand level.

    The most recent pair whose day is <= the queried day wins.
    """
    pairs: Tuple[Tuple[int, int], ...]

    @classmethod
    def from_flat(cls, values: Sequence[int]) -> "DemandSchedule":
        """Build from alternating day, level values, e.g. [0, 20, 25, 22]."""
        if len(values) % 2 != 0:
            raise ConfigurationError(
                f"Demand list needs day,level pairs but has {len(values)} entries"
            )
        pairs = tuple(
            (int(values[i]), int(values[i + 1])) for i in range(0, len(values), 2)
        )
        schedule = cls(pairs)
        schedule.validate()
        return schedule

    @classmethod
    def parse(cls, text: str) -> "DemandSchedule":
        """Parse the comma-separated form input, e.g. "0,20,25,22"."""
        if text is None or not text.strip():
            raise ConfigurationError("Demand list is empty")
        tokens = text.split(",")
        values = [_parse_whole_number(t, i) for i, t in enumerate(tokens)]
        return cls.from_flat(values)

    def validate(self):
        """Check the schedule can answer a lookup for every day >= 0."""
        if not self.pairs:
            raise ConfigurationError("Demand list is empty")
        if self.pairs[0][0] != 0:
            raise ConfigurationError(
                f"Demand list must start at day 0, not day {self.pairs[0][0]}"
            )
        for (prev_day, _), (day, _) in zip(self.pairs, self.pairs[1:]):
            if day < prev_day:
                raise ConfigurationError(
                    f"Demand days must not decrease: day {day} follows day {prev_day}"
                )

    @property
    def days(self) -> Tuple[int, ...]:
        return tuple(day for day, _ in self.pairs)

    def demand_at(self, day: int) -> int:
        """Get the demand level active on a given day.

        Args:
            day: Simulation day (>= 0)

        Returns:
            Demand level
        """
        index = bisect_right(self.days, day) - 1
        if index < 0:
            raise ConfigurationError(f"No demand defined for day {day}")
        return self.pairs[index][1]

    def to_text(self) -> str:
        return ",".join(f"{day},{level}" for day, level in self.pairs)


def _check_delay(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1 day, got {value}")


def _parse_choice(name: str, value: Union[int, str], choices: Iterable[int]) -> int:
    """Parse a discrete-choice form input."""
    try:
        parsed = int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"{name} is not a number: {value!r}") from None
    if parsed not in tuple(choices):
        raise ConfigurationError(
            f"{name} must be one of {', '.join(str(c) for c in choices)}, got {parsed}"
        )
    return parsed


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters fixed for the lifetime of one simulation run."""
    perception_delay: int = config.DEFAULT_PERCEPTION_DELAY
    response_delay: int = config.DEFAULT_RESPONSE_DELAY
    delivery_delay: int = config.DEFAULT_DELIVERY_DELAY
    demand_schedule: DemandSchedule = DemandSchedule.parse(config.DEFAULT_DEMAND)

    @classmethod
    def from_form(
        cls,
        delivery_delay: Union[int, str] = config.DEFAULT_DELIVERY_DELAY,
        perception_delay: Union[int, str] = config.DEFAULT_PERCEPTION_DELAY,
        response_delay: Union[int, str] = config.DEFAULT_RESPONSE_DELAY,
        demand_text: str = config.DEFAULT_DEMAND,
        choices: Iterable[int] = config.DELAY_CHOICES,
    ) -> "SimulationConfig":
        """Build a validated config from the raw form inputs.

        Args:
            delivery_delay: Selected delivery delay (days)
            perception_delay: Selected perception delay (days)
            response_delay: Selected response delay (days)
            demand_text: Comma-separated alternating day,level list
            choices: Allowed values for the three delays

        Returns:
            Validated SimulationConfig

        Raises:
            ConfigurationError: if any input is malformed
        """
        choices = tuple(choices)
        sim_config = cls(
            perception_delay=_parse_choice("Perception delay", perception_delay, choices),
            response_delay=_parse_choice("Response delay", response_delay, choices),
            delivery_delay=_parse_choice("Delivery delay", delivery_delay, choices),
            demand_schedule=DemandSchedule.parse(demand_text),
        )
        sim_config.validate()
        return sim_config

    def validate(self):
        """Raise ConfigurationError unless every parameter is usable."""
        _check_delay("Perception delay", self.perception_delay)
        _check_delay("Response delay", self.response_delay)
        _check_delay("Delivery delay", self.delivery_delay)
        if not isinstance(self.demand_schedule, DemandSchedule):
            raise ConfigurationError(
                f"Demand schedule has the wrong type: {type(self.demand_schedule).__name__}"
            )
        self.demand_schedule.validate()
