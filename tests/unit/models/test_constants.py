"""Unit tests for models.constants module."""

import pytest

from relayhints.models.constants import HINT_KEY_COUNT, HintKey


class TestHintKey:
    """Evidence category enum."""

    def test_count(self):
        assert HINT_KEY_COUNT == 4
        assert len(HintKey) == HINT_KEY_COUNT

    def test_values_are_contiguous_slots(self):
        assert [int(key) for key in HintKey] == list(range(HINT_KEY_COUNT))

    @pytest.mark.parametrize(
        ("key", "points"),
        [
            (HintKey.LAST_FETCH_ATTEMPT, 50),
            (HintKey.MOST_RECENT_EVENT_FETCHED, 700),
            (HintKey.LAST_IN_RELAY_LIST, 350),
            (HintKey.LAST_WRITE_TARGET, 20),
        ],
    )
    def test_base_points(self, key: HintKey, points: int):
        assert key.base_points == points

    def test_base_points_positive(self):
        assert all(key.base_points > 0 for key in HintKey)

    def test_str_is_snake_name(self):
        assert str(HintKey.LAST_IN_RELAY_LIST) == "last_in_relay_list"

    def test_from_name(self):
        assert HintKey.from_name("most_recent_event_fetched") is HintKey.MOST_RECENT_EVENT_FETCHED
        assert HintKey.from_name("LAST_WRITE_TARGET") is HintKey.LAST_WRITE_TARGET

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown hint key"):
            HintKey.from_name("last_in_dream")

    def test_usable_as_list_index(self):
        slots = [0] * HINT_KEY_COUNT
        slots[HintKey.LAST_IN_RELAY_LIST] = 7
        assert slots == [0, 0, 7, 0]
