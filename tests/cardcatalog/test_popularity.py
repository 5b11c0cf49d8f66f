import math

import pytest

from cardcatalog import constants
from cardcatalog.models import CardHistory, CardRating
from cardcatalog.popularity import PopularityLookups, normalize_embedding


def test_normalize_embedding_has_unit_length():
    embedding = normalize_embedding([3.0, 4.0] + [0.0] * 62)

    assert embedding[:2] == pytest.approx([0.6, 0.8])
    assert math.sqrt(sum(x * x for x in embedding)) == pytest.approx(1.0)


@pytest.mark.parametrize("raw", [None, [], [1.0] * 10, [0.0] * 64])
def test_normalize_embedding_falls_back_to_zero_vector(raw):
    assert normalize_embedding(raw) == [0.0] * constants.EMBEDDING_LENGTH


def test_lookups_default_when_unrated():
    lookups = PopularityLookups()

    assert lookups.get_elo("Unknown Card") == constants.DEFAULT_ELO
    assert lookups.get_embedding("Unknown Card") == [0.0] * 64
    assert lookups.get_history("missing-oracle") is None
    assert lookups.get_history(None) is None


def test_lookups_are_keyed_by_normalized_name():
    lookups = PopularityLookups()
    lookups.load_ratings(
        [CardRating(name="Lightning Bolt", elo=1500, embedding=[1.0] + [0.0] * 63)]
    )

    assert lookups.get_elo("LIGHTNING BOLT") == 1500
    assert lookups.get_embedding("lightning bolt")[0] == pytest.approx(1.0)


def test_history_accessors():
    history = CardHistory.model_validate(
        {"oracleId": "abc", "current": {"total": [12, 0.34567], "picks": 40}}
    )

    assert history.oracle_id == "abc"
    assert history.current.cube_count == 12
    assert history.current.popularity_fraction == pytest.approx(0.34567)
    assert history.current.picks == 40


def test_history_with_missing_totals():
    history = CardHistory.model_validate({"oracleId": "abc", "current": {}})

    assert history.current.cube_count == 0
    assert history.current.popularity_fraction == 0.0
