from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

# Field name -> boost. Order is kept in the generated query.
FIELD_BOOSTS = {
    "Title": 3.0,
    "Tags": 2.0,
    "TenderNumber": 1.0,
    "Description": 1.0,
    "AISummary": 1.0,
    "Source": 1.0,
    "Province": 1.0,
    "Category": 1.0,
}

BEST_FIELDS = "best_fields"


@dataclass(frozen=True)
class WeightedField:
    name: str
    boost: float = 1.0

    def to_dsl(self) -> str:
        if self.boost == 1.0:
            return self.name
        return f"{self.name}^{self.boost:g}"


BOOSTED_FIELDS: Tuple[WeightedField, ...] = tuple(
    WeightedField(name, boost) for name, boost in FIELD_BOOSTS.items()
)


@dataclass(frozen=True)
class MatchAll:
    def to_dsl(self) -> Dict[str, Any]:
        return {"match_all": {}}


@dataclass(frozen=True)
class MultiMatch:
    terms: str
    fields: Tuple[WeightedField, ...] = BOOSTED_FIELDS
    match_type: str = BEST_FIELDS

    def to_dsl(self) -> Dict[str, Any]:
        return {
            "multi_match": {
                "query": self.terms,
                "fields": [f.to_dsl() for f in self.fields],
                "type": self.match_type,
            }
        }


QuerySpec = Union[MatchAll, MultiMatch]


def build_query(query: str) -> QuerySpec:
    """
    Turn the caller's free text into a query description for the engine.

    Blank input browses the whole index. Anything else becomes a best-fields
    multi-match over the boosted tender fields: each document is scored by its
    single best matching field, the engine does the scoring.
    """
    if not query or not query.strip():
        return MatchAll()

    return MultiMatch(terms=query, fields=BOOSTED_FIELDS, match_type=BEST_FIELDS)
