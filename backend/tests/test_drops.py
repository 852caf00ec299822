from onchain_summer.services.drops import select_drops
from tests.factories import make_drop


def test_defaults_to_first_drop(d1, d2):
    selection = select_drops([d1, d2])

    assert selection.featured is d1
    assert selection.remaining == (d2,)


def test_featured_address_is_promoted(d1, d2):
    selection = select_drops([d1, d2], d2.address)

    assert selection.featured is d2
    assert selection.remaining == (d1,)


def test_featured_is_removed_not_swapped():
    drops = [make_drop(a) for a in ("0x1", "0x2", "0x3", "0x4")]

    selection = select_drops(drops, "0x3")

    assert selection.featured is drops[2]
    assert [d.address for d in selection.remaining] == ["0x1", "0x2", "0x4"]


def test_unknown_address_falls_back_to_first(d1, d2):
    selection = select_drops([d1, d2], "0xnope")

    assert selection.featured is d1
    assert selection.remaining == (d2,)


def test_empty_drops():
    selection = select_drops([], "0xabc")

    assert selection.featured is None
    assert selection.remaining == ()
    assert select_drops(()).featured is None


def test_same_fields_different_address_not_conflated():
    a = make_drop("0xa", name="Twin", image="/twin.jpg")
    b = make_drop("0xb", name="Twin", image="/twin.jpg")

    selection = select_drops([a, b], "0xb")

    assert selection.featured is b
    assert selection.remaining == (a,)


def test_input_is_not_mutated_and_repeat_calls_agree(d1, d2):
    drops = [d1, d2]

    first = select_drops(drops, d2.address)
    second = select_drops(drops, d2.address)

    assert drops == [d1, d2]
    assert first == second
    assert len(first.remaining) == len(drops) - 1
