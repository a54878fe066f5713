"""Unit tests for the fixture data generator."""

from __future__ import annotations

import re
import threading

import pytest
from freezegun import freeze_time

from school_registry.testing import InvalidRange
from school_registry.testing import data_generator as gen


def test_next_unique_id_is_strictly_increasing() -> None:
    values = [gen.next_unique_id() for _ in range(50)]

    assert values == sorted(values)
    assert len(set(values)) == 50
    assert values[0] >= 1


def test_next_unique_id_is_unique_across_threads() -> None:
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        local = [gen.next_unique_id() for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 1600
    assert len(set(results)) == 1600


@freeze_time("2024-01-01 00:00:00")
def test_timestamp_token_starts_with_epoch_millis() -> None:
    token = gen.timestamp_token()

    assert token.startswith("1704067200000")
    assert re.fullmatch(r"1704067200000[0-9a-z]{5}", token)


def test_email_uses_prefix_or_default() -> None:
    assert re.fullmatch(r"test\d{13}[0-9a-z]{5}@example\.com", gen.email())
    assert re.fullmatch(r"school\d{13}[0-9a-z]{5}@example\.com", gen.email("school"))


def test_phone_has_north_american_shape() -> None:
    for _ in range(100):
        number = gen.phone()
        assert re.fullmatch(r"\+1[1-9]\d{2}[1-9]\d{2}[1-9]\d{3}", number), number


def test_name_is_unique_and_prefixed() -> None:
    first = gen.name("Test School")
    second = gen.name("Test School")

    assert first.startswith("Test School ")
    assert first != second
    assert re.fullmatch(r"Test Name \d+", gen.name())


def test_address_uses_known_street() -> None:
    for _ in range(50):
        number, street = gen.address().split(" ", 1)
        assert 1 <= int(number) <= 9999
        assert street in gen.STREETS


def test_random_helpers() -> None:
    items = ["a", "b", "c"]
    assert gen.random_choice(items) in items
    assert isinstance(gen.random_boolean(), bool)

    seen = {gen.random_int(1, 3) for _ in range(300)}
    assert seen == {1, 2, 3}
    assert gen.random_int(7, 7) == 7


def test_random_int_rejects_inverted_range() -> None:
    with pytest.raises(InvalidRange) as excinfo:
        gen.random_int(5, 1)

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.low == 5
    assert excinfo.value.high == 1
