import threading
import time

from oslabs.caltrain import Station

TIMEOUT = 5.0


def _start(target, *args):
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def _wait_until(predicate, timeout=TIMEOUT):
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            return False
        time.sleep(0.005)
    return True


def _passenger(station, boarded, guard, release=None):
    station.wait_for_train()
    with guard:
        boarded.append(threading.get_ident())
    if release is not None:
        release.wait(TIMEOUT)
    station.on_board()


def test_empty_station_train_leaves_immediately():
    station = Station()
    loader = _start(station.load_train, 10)
    loader.join(TIMEOUT)
    assert not loader.is_alive()
    assert station.seats_available == 0


def test_full_train_leaves_passengers_waiting():
    station = Station()
    boarded, guard = [], threading.Lock()
    passenger = _start(_passenger, station, boarded, guard)
    assert _wait_until(lambda: station.passengers_waiting == 1)

    loader = _start(station.load_train, 0)
    loader.join(TIMEOUT)
    assert not loader.is_alive()
    assert boarded == []
    assert station.passengers_waiting == 1

    _start(station.load_train, 1).join(TIMEOUT)
    passenger.join(TIMEOUT)
    assert len(boarded) == 1


def test_train_takes_only_as_many_as_seats():
    station = Station()
    boarded, guard = [], threading.Lock()
    passengers = [_start(_passenger, station, boarded, guard) for _ in range(5)]
    assert _wait_until(lambda: station.passengers_waiting == 5)

    loader = _start(station.load_train, 3)
    loader.join(TIMEOUT)
    assert not loader.is_alive()
    assert len(boarded) == 3
    assert station.passengers_waiting == 2

    loader = _start(station.load_train, 10)
    loader.join(TIMEOUT)
    assert not loader.is_alive()
    for passenger in passengers:
        passenger.join(TIMEOUT)
    assert len(boarded) == 5
    assert station.passengers_waiting == 0
    assert station.boarded_passengers == 0


def test_train_waits_for_on_board():
    station = Station()
    boarded, guard = [], threading.Lock()
    release = threading.Event()
    passenger = _start(_passenger, station, boarded, guard, release)
    assert _wait_until(lambda: station.passengers_waiting == 1)

    loader = _start(station.load_train, 2)
    assert _wait_until(lambda: station.boarded_passengers == 1)
    loader.join(0.1)
    assert loader.is_alive()

    release.set()
    loader.join(TIMEOUT)
    passenger.join(TIMEOUT)
    assert not loader.is_alive()
    assert station.boarded_passengers == 0


def test_late_passenger_waits_for_next_train():
    station = Station()
    _start(station.load_train, 5).join(TIMEOUT)

    boarded, guard = [], threading.Lock()
    passenger = _start(_passenger, station, boarded, guard)
    assert _wait_until(lambda: station.passengers_waiting == 1)
    time.sleep(0.05)
    assert boarded == []

    _start(station.load_train, 1).join(TIMEOUT)
    passenger.join(TIMEOUT)
    assert len(boarded) == 1
    assert not passenger.is_alive()