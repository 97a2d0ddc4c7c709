import pytest

from mgtype.chemistry.elements import DEFAULT_RADIUS, element_radius
from mgtype.dataset.atoms import AtomRecord
from mgtype.typers import ElementIndexTyper
from mgtype.typers.element import MAX_ELEMENT_LIMIT


def test_cutoff_default():
    typer = ElementIndexTyper()
    assert typer.num_types() == 84
    assert typer.get_type(AtomRecord(atomic_num=83)).type == 83
    assert typer.get_type(AtomRecord(atomic_num=84)).type == 0
    assert typer.get_type(AtomRecord(atomic_num=92)).type == 0


def test_radius_lookup():
    typer = ElementIndexTyper()
    t, radius = typer.get_type(AtomRecord(atomic_num=6))
    assert t == 6
    assert radius == pytest.approx(element_radius(6))
    assert 0.5 < radius < 1.0


def test_type_zero_uses_fallback_radius():
    typer = ElementIndexTyper(max_element=10)
    assert typer.get_type(AtomRecord(atomic_num=17)) == (0, DEFAULT_RADIUS)
    assert typer.get_type(AtomRecord(atomic_num=0)) == (0, DEFAULT_RADIUS)


def test_names():
    typer = ElementIndexTyper(max_element=9)
    assert typer.get_type_names() == ["Dummy", "H", "He", "Li", "Be", "B", "C", "N", "O"]


def test_invalid_cutoff():
    with pytest.raises(ValueError):
        ElementIndexTyper(max_element=0)
    with pytest.raises(ValueError):
        ElementIndexTyper(max_element=MAX_ELEMENT_LIMIT + 1)


def test_largest_cutoff_names_every_element():
    typer = ElementIndexTyper(max_element=MAX_ELEMENT_LIMIT)
    names = typer.get_type_names()
    assert len(names) == MAX_ELEMENT_LIMIT
    assert names[118] == "Og"
