"""Unit tests for the link registry and the page-relative resolver."""

from __future__ import annotations

import pytest

from planner_pages.calendar import Month, Week
from planner_pages.declarations import GroupDeclaration, PageDeclaration
from planner_pages.links import LinkRegistry, LinkResolver, matches_param


def _registry(*declarations: PageDeclaration) -> LinkRegistry:
    registry = LinkRegistry()
    for page_number, declaration in enumerate(declarations, start=1):
        registry.register(declaration, page_number)
    return registry


def _cycling(registry: LinkRegistry, name: str, *keys: str) -> None:
    group = GroupDeclaration(name=name, cycle=True)
    for key in keys:
        group.add_page(PageDeclaration(key))
    registry.register_group(group)


def _weekly_registry(year: int, weeks: int) -> LinkRegistry:
    return _registry(
        *(
            PageDeclaration("weekly", id=f"week_{n}", params={"week": Week(year, n)})
            for n in range(1, weeks + 1)
        )
    )


def test_pages_are_numbered_in_registration_order() -> None:
    registry = _registry(
        PageDeclaration("index", id="index_1"),
        PageDeclaration("index", id="index_2"),
        PageDeclaration("reference"),
    )

    assert registry.page_numbers() == {"index_1": 1, "index_2": 2, "reference": 3}
    assert len(registry) == 3


@pytest.mark.parametrize("count", [0, 1, 7, 53])
def test_numbering_covers_one_to_count(count: int) -> None:
    registry = _registry(*(PageDeclaration("note", id=f"note_{n}") for n in range(count)))

    assert sorted(registry.page_numbers().values()) == list(range(1, count + 1))
    assert len(registry) == count


def test_empty_registry_resolves_nothing() -> None:
    registry = LinkRegistry()

    assert registry.page_numbers() == {}
    assert list(registry) == []
    assert registry.resolve("weekly", week=1) is None


def test_resolve_matches_by_type_and_parameters() -> None:
    registry = _weekly_registry(2025, 3)

    info = registry.resolve("weekly", week=2)

    assert info is not None
    assert info.destination_key == "week_2"
    assert info.page_number == 2


def test_resolve_without_parameters_prefers_exact_key() -> None:
    registry = _registry(
        PageDeclaration("index", id="index_1"),
        PageDeclaration("index", id="index_2"),
    )

    by_key = registry.resolve("index_2")
    by_type = registry.resolve("index")

    assert by_key is not None
    assert by_key.page_number == 2
    assert by_type is not None
    assert by_type.page_number == 1, "a bare type should resolve to its first page"


def test_misses_return_none_instead_of_raising() -> None:
    registry = _weekly_registry(2025, 2)

    assert registry.resolve("weekly", week=99) is None
    assert registry.resolve("monthly") is None
    assert registry.resolve("weekly", colour="red") is None
    assert registry.resolve_key("nope") is None
    assert registry.next_in_cycle("missing", "week_1") is None


@pytest.mark.parametrize(
    ("stored", "query", "expected"),
    [
        (12, 12, True),
        (Week(2025, 12), 12, True),
        (Month(2025, 3), 3, True),
        (Month(2025, 3), 4, False),
        (2.0, 2, True),
        (12, "12", False),
        ("12", 12, False),
        (Week(2025, 1), True, False),
        (1, True, False),
    ],
)
def test_parameter_comparison_rules(stored: object, query: object, expected: bool) -> None:
    assert matches_param(stored, query) is expected


def test_cycle_advances_and_wraps() -> None:
    registry = _registry(*(PageDeclaration(key) for key in ("A", "B", "C")))
    _cycling(registry, "letters", "A", "B", "C")

    assert registry.next_in_cycle("letters", "B") == "C"
    assert registry.next_in_cycle("letters", "C") == "A"
    assert registry.next_in_cycle("letters", "Z") == "A", (
        "a page outside the group should jump to the group's first page"
    )


def test_following_a_cycle_returns_to_the_start() -> None:
    keys = [f"grid_{n}" for n in range(8)]
    registry = _registry(*(PageDeclaration(key) for key in keys))
    _cycling(registry, "grids", *keys)

    visited = [keys[0]]
    for _ in keys:
        following = registry.next_in_cycle("grids", visited[-1])
        assert following is not None
        visited.append(following)

    assert visited[:-1] == keys
    assert visited[-1] == keys[0]


def test_non_cycling_group_has_no_next() -> None:
    registry = _registry(PageDeclaration("A"), PageDeclaration("B"))
    group = GroupDeclaration(name="plain", cycle=False)
    group.add_page(PageDeclaration("A"))
    registry.register_group(group)

    assert registry.next_in_cycle("plain", "A") is None


def test_resolver_week_navigation_stops_at_boundaries() -> None:
    registry = _weekly_registry(2025, 53)
    first = LinkResolver(registry, "weekly", {"week_num": 1}, total_weeks=53)
    middle = LinkResolver(registry, "weekly", {"week_num": 12}, total_weeks=53)
    last = LinkResolver(registry, "weekly", {"week_num": 53}, total_weeks=53)

    assert first.prev_week() is None
    assert first.next_week() == "week_2"
    assert (middle.prev_week(), middle.next_week()) == ("week_11", "week_13")
    assert last.prev_week() == "week_52"
    assert last.next_week() is None, "the final week should have no successor"


def test_resolver_tracks_group_membership_from_current_key() -> None:
    registry = _registry(*(PageDeclaration(key) for key in ("A", "B", "C")))
    _cycling(registry, "letters", "A", "B", "C")

    inside = LinkResolver(registry, "B", current_key="B")
    outside = LinkResolver(registry, "index", current_key="index_1")

    assert inside.in_group("letters")
    assert inside.next_in_group("letters") == "C"
    assert not outside.in_group("letters")
    assert outside.next_in_group("letters") == "A"
    assert inside.group_destinations("letters") == ["A", "B", "C"]


def test_resolver_page_number_follows_keys() -> None:
    registry = _weekly_registry(2025, 2)
    resolver = LinkResolver(registry)

    assert resolver.page_number("week_2") == 2
    assert resolver.page_number("week_3") is None
    assert resolver.resolve("weekly", week=Week(2025, 1)) == "week_1"
