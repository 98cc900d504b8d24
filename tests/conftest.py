"""Shared pytest fixtures: the record and rule set used across validator tests."""

import pytest


@pytest.fixture
def failing_player():
    """Record that passes the name rule and fails the other three."""
    return {
        "name": "Tom Brady",
        "number": 11,
        "position": "RB",
        "ranking": "last",
    }


@pytest.fixture
def passing_player():
    """Record that satisfies every rule in ``player_rules``."""
    return {
        "name": "Tom Brady",
        "number": 12,
        "position": "QB",
        "ranking": "GOAT",
    }


@pytest.fixture
def player_rules():
    """Rule set with a custom message for every field."""
    return {
        "name": [lambda name: len(name) > 4, "wrong name"],
        "number": [lambda number: number == 12, "wrong number"],
        "position": [lambda position: position == "QB", "wrong position"],
        "ranking": [lambda ranking: ranking == "GOAT", "GOAT"],
    }
