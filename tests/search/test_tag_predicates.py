from __future__ import annotations

from school_dashboard.core.enums import TagType
from school_dashboard.search.factory import TagPredicateFactory, matches_all
from school_dashboard.search.model import SearchTag
from school_dashboard.search.predicates.keyword_predicate import KeywordPredicate
from school_dashboard.search.predicates.status_predicate import StatusPredicate
from school_dashboard.search.predicates.type_predicate import TypePredicate


def _tag(value, type_, is_valid=True):
    return SearchTag(value=value, display_value=value, type=type_, is_valid=is_valid)


def test_factory_picks_predicate_by_tag_type():
    factory = TagPredicateFactory()

    assert isinstance(factory.for_tag(_tag("garcia", TagType.KEYWORD)), KeywordPredicate)
    assert isinstance(factory.for_tag(_tag("Retirado", TagType.STATUS)), StatusPredicate)
    assert isinstance(factory.for_tag(_tag("Traslado", TagType.TYPE)), TypePredicate)


def test_factory_skips_invalid_tags():
    predicates = TagPredicateFactory().for_tags([_tag("zzz", TagType.KEYWORD, is_valid=False)])

    assert predicates == []


def test_status_and_type_predicates_only_match_students(students, staff):
    status = StatusPredicate("matriculado")
    kind = TypePredicate("continuidad")

    assert status(students[0]) is True
    assert kind(students[0]) is True
    assert status(staff[0]) is False
    assert kind(staff[0]) is False


def test_keyword_predicate_applies_to_any_person(staff):
    assert KeywordPredicate("gomez")(staff[0]) is True
    assert KeywordPredicate("10203040")(staff[0]) is True


def test_matches_all_is_conjunction(students):
    predicates = [StatusPredicate("Pendiente"), TypePredicate("Ingresante")]

    hits = [s.document_number for s in students if matches_all(s, predicates)]

    assert hits == ["70000007"]
