import pytest
from search.query import (
    build_query,
    MatchAll,
    MultiMatch,
    WeightedField,
    FIELD_BOOSTS,
    BOOSTED_FIELDS,
    BEST_FIELDS,
)


# ------------------------------------------------------
# FIELD TABLE
# ------------------------------------------------------

def test_field_boost_table():
    assert list(FIELD_BOOSTS.items()) == [
        ("Title", 3.0),
        ("Tags", 2.0),
        ("TenderNumber", 1.0),
        ("Description", 1.0),
        ("AISummary", 1.0),
        ("Source", 1.0),
        ("Province", 1.0),
        ("Category", 1.0),
    ]


def test_boosted_fields_follow_table_order():
    assert [f.name for f in BOOSTED_FIELDS] == list(FIELD_BOOSTS)
    assert [f.boost for f in BOOSTED_FIELDS] == list(FIELD_BOOSTS.values())


# ------------------------------------------------------
# MATCH ALL
# ------------------------------------------------------

@pytest.mark.parametrize("query", ["", "   ", "\t\n", "   "])
def test_blank_query_browses_everything(query):
    assert build_query(query) == MatchAll()


def test_match_all_dsl():
    assert MatchAll().to_dsl() == {"match_all": {}}


# ------------------------------------------------------
# MULTI MATCH
# ------------------------------------------------------

def test_text_query_is_multi_match():
    spec = build_query("bridge construction")

    assert isinstance(spec, MultiMatch)
    assert spec.terms == "bridge construction"
    assert spec.match_type == BEST_FIELDS
    assert len(spec.fields) == 8
    assert spec.fields == BOOSTED_FIELDS


def test_terms_are_passed_through_untrimmed():
    assert build_query("  roads ").terms == "  roads "


def test_single_character_query():
    assert isinstance(build_query("a"), MultiMatch)


def test_multi_match_dsl():
    dsl = build_query("roads").to_dsl()

    assert dsl == {
        "multi_match": {
            "query": "roads",
            "fields": [
                "Title^3",
                "Tags^2",
                "TenderNumber",
                "Description",
                "AISummary",
                "Source",
                "Province",
                "Category",
            ],
            "type": "best_fields",
        }
    }


def test_fractional_boost_rendering():
    assert WeightedField("Title", 2.5).to_dsl() == "Title^2.5"
    assert WeightedField("Title").to_dsl() == "Title"


def test_build_is_deterministic():
    assert build_query("water supply") == build_query("water supply")
