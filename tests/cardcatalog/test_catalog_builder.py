"""
End to end tests for cardcatalog/catalog_builder.py and the CLI dispatcher
"""

import argparse
import json
import pathlib

import pytest

from cardcatalog import constants
from cardcatalog.__main__ import dispatcher
from cardcatalog.catalog_builder import build_catalog, save_english_card
from cardcatalog.errors import CardCatalogError, SourceUnavailableError
from cardcatalog.models import CardHistory, CardRating
from cardcatalog.token_inference import TokenInferenceEngine

FOREST_ID = "f0000000-0000-0000-0000-000000000001"
JA_FOREST_ID = "f0000000-0000-0000-0000-0000000000ja"


@pytest.fixture
def forest(printing_factory):
    return printing_factory(
        id=FOREST_ID,
        oracle_id="forest-oracle",
        name="Forest",
        mana_cost="",
        cmc=0.0,
        type_line="Basic Land — Forest",
        oracle_text="({T}: Add {G}.)",
        colors=[],
        color_identity=["G"],
        set="tst",
        collector_number="280",
    )


@pytest.fixture
def japanese_forest(forest):
    return dict(forest, id=JA_FOREST_ID, lang="ja", printed_name="森")


class TestSaveEnglishCard:
    """Test suite for save_english_card."""

    def test_secondary_record_is_stored_first(self, catalog, token_engine, transform_factory):
        printing = transform_factory()

        cards = save_english_card(catalog, token_engine, printing)

        assert [card.id for card in cards] == [printing["id"] + "2", printing["id"]]
        assert list(catalog.card_dict) == [card.id for card in cards]
        # Only the front face may supply display images
        assert list(catalog.card_images) == ["delver of secrets"]

    def test_tokens_are_attached_before_storing(
        self, catalog, token_engine, printing_factory
    ):
        printing = printing_factory(
            oracle_text="When this creature dies, create a Food token."
        )

        (card,) = save_english_card(catalog, token_engine, printing)

        assert catalog.card_dict[card.id].tokens == [
            "bf36408d-ed85-497f-8e68-d3a922c388a0"
        ]


class TestBuildCatalog:
    """Test suite for build_catalog."""

    def test_land_and_foreign_reprint(self, forest, japanese_forest):
        catalog = build_catalog(
            [forest, japanese_forest], [forest, japanese_forest]
        )

        assert len(catalog.card_dict) == 2
        assert catalog.name_to_id == {"forest": [FOREST_ID, JA_FOREST_ID]}
        assert catalog.english == {JA_FOREST_ID: FOREST_ID}
        assert catalog.card_dict[FOREST_ID].colorcategory == "l"

    def test_foreign_printings_only_in_second_feed(self, forest, japanese_forest):
        catalog = build_catalog([forest], [forest, japanese_forest])

        assert list(catalog.card_dict) == [FOREST_ID]
        assert catalog.english == {JA_FOREST_ID: FOREST_ID}

    def test_tokens_resolve_against_earlier_records(
        self, printing_factory, token_factory
    ):
        spirit = token_factory(
            "spirit-id", "Spirit", "Token Creature — Spirit", "1", "1", ["W"]
        )
        summoner = printing_factory(
            id="summoner-id",
            oracle_id="summoner-oracle",
            name="Spirit Summoner",
            oracle_text="When Spirit Summoner enters, create a 1/1 white Spirit creature token.",
        )

        catalog = build_catalog([spirit, summoner], [])

        assert catalog.card_dict["summoner-id"].tokens == ["spirit-id"]
        assert catalog.card_dict["spirit-id"].tokens == []
        assert "spirit" not in catalog.card_images

    def test_tokens_later_in_the_feed_are_not_resolved(
        self, printing_factory, token_factory
    ):
        spirit = token_factory(
            "spirit-id", "Spirit", "Token Creature — Spirit", "1", "1", ["W"]
        )
        summoner = printing_factory(
            id="summoner-id",
            name="Spirit Summoner",
            oracle_text="When Spirit Summoner enters, create a 1/1 white Spirit creature token.",
        )

        catalog = build_catalog([summoner, spirit], [])

        assert catalog.card_dict["summoner-id"].tokens == []

    def test_popularity_inputs(self, printing_factory):
        printing = printing_factory()

        catalog = build_catalog(
            [printing],
            [],
            ratings=[CardRating(name="grizzly bears", elo=1421)],
            histories=[
                CardHistory(
                    oracle_id=printing["oracle_id"],
                    current={"total": [12, 0.5], "picks": 3},
                )
            ],
        )

        card = catalog.card_dict[printing["id"]]
        assert card.elo == 1421
        assert card.embedding == [0.0] * constants.EMBEDDING_LENGTH
        assert card.cube_count == 12
        assert card.popularity == 50.0
        assert card.pick_count == 3

    def test_custom_token_engine(self, printing_factory):
        printing = printing_factory(name="Grizzly Bears")

        catalog = build_catalog(
            [printing],
            [],
            token_engine_factory=lambda store: TokenInferenceEngine(
                store, card_overrides={"Grizzly Bears": ["bear-token"]}
            ),
        )

        assert catalog.card_dict[printing["id"]].tokens == ["bear-token"]

    def test_feeds_are_consumed_in_order(self, forest, japanese_forest):
        events = []

        def default_feed():
            events.append("default:start")
            yield forest
            events.append("default:end")

        def all_feed():
            events.append("all:start")
            yield japanese_forest

        build_catalog(default_feed(), all_feed())

        assert events == ["default:start", "default:end", "all:start"]


class TestDispatcher:
    """Test suite for the CLI dispatcher."""

    @staticmethod
    def make_args(**overrides) -> argparse.Namespace:
        args = {
            "config": None,
            "default_cards": None,
            "all_cards": None,
            "ratings": None,
            "histories": None,
            "output": None,
            "pretty": False,
            "max_workers": None,
        }
        args.update(overrides)
        return argparse.Namespace(**args)

    def test_full_run(self, tmp_path: pathlib.Path, forest, japanese_forest):
        default_cards = tmp_path / "default-cards.json"
        default_cards.write_text(json.dumps([forest]), encoding="utf-8")
        all_cards = tmp_path / "all-cards.ndjson"
        all_cards.write_text(
            "\n".join(json.dumps(card) for card in [forest, japanese_forest]),
            encoding="utf-8",
        )
        ratings = tmp_path / "ratings.json"
        ratings.write_text(json.dumps([{"name": "Forest", "elo": 900}]), encoding="utf-8")
        output = tmp_path / "out"

        dispatcher(
            self.make_args(
                default_cards=default_cards,
                all_cards=all_cards,
                ratings=ratings,
                output=output,
                pretty=True,
                max_workers=2,
            )
        )

        for name in constants.CATALOG_ARTIFACTS:
            assert (output / f"{name}.json").is_file()
        card_dict = json.loads((output / "carddict.json").read_text(encoding="utf-8"))
        assert card_dict[FOREST_ID]["elo"] == 900
        assert json.loads((output / "english.json").read_text(encoding="utf-8")) == {
            JA_FOREST_ID: FOREST_ID
        }

    def test_missing_feed_writes_nothing(self, tmp_path: pathlib.Path):
        output = tmp_path / "out"

        with pytest.raises(SourceUnavailableError):
            dispatcher(
                self.make_args(
                    default_cards=tmp_path / "missing.json",
                    all_cards=tmp_path / "missing-too.json",
                    output=output,
                )
            )

        assert not output.exists()

    def test_source_failure_is_a_catalog_error(self):
        assert issubclass(SourceUnavailableError, CardCatalogError)
