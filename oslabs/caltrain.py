"""A train station where passengers board trains with limited free seats."""

from __future__ import annotations

import threading


class Station:
    """Synchronises arriving trains with waiting passengers."""

    def __init__(self) -> None:
        self.seats_available = 0
        self.passengers_waiting = 0
        self.boarded_passengers = 0
        self._lock = threading.Lock()
        self._train_arrived = threading.Condition(self._lock)
        self._all_boarded = threading.Condition(self._lock)

    def load_train(self, count: int) -> None:
        """Offer ``count`` seats and return once the train may leave.

        The train leaves when it is full or no one is left waiting, and every
        passenger who took a seat has called :meth:`on_board`.
        """
        with self._lock:
            self.seats_available = count
            while self.seats_available > 0 and self.passengers_waiting > 0:
                self._train_arrived.notify_all()
                self._all_boarded.wait()
            self.seats_available = 0

    def wait_for_train(self) -> None:
        """Block until a train with a free seat arrives, then take the seat."""
        with self._lock:
            self.passengers_waiting += 1
            while self.seats_available == 0:
                self._train_arrived.wait()
            self.passengers_waiting -= 1
            self.seats_available -= 1
            self.boarded_passengers += 1

    def on_board(self) -> None:
        """Report that a passenger who took a seat is now on board."""
        with self._lock:
            self.boarded_passengers -= 1
            if self.boarded_passengers == 0 and (
                self.seats_available == 0 or self.passengers_waiting == 0
            ):
                self._all_boarded.notify()