"""A countdown timer driven by frame delta times."""


class Timer:
    """Accumulates elapsed time and reports when a set time is reached."""

    def __init__(self, time: float) -> None:
        self._limit = time
        self.elapsed_time = 0.0

    def update(self, delta_time: float) -> None:
        self.elapsed_time += delta_time

    def reset(self) -> None:
        self.elapsed_time = 0.0

    def is_time_out(self) -> bool:
        return self.elapsed_time >= self._limit

    def set_time(self, time: float) -> None:
        self._limit = time