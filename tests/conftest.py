"""Shared fixtures: a record store rooted in tmp_path and example pairs."""
from __future__ import annotations

import logging

import pytest

from factories import make_pair
from models.pair import Pair
from storage.record_store import RecordStore


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("pair_store")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture()
def store(tmp_path):
    return RecordStore(tmp_path)


@pytest.fixture()
def example_pairs() -> list[Pair]:
    return [
        make_pair("p1", "USD", "BTC", 1.0),
        make_pair("p2", "USD", "ETH", 2.0),
        make_pair("p3", "USD", "BRL", 3.0),
    ]
