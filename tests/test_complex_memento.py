import dataclasses

import pytest

from patterndemos.complex_memento import ComplexNumber, Memento, Store, main


def test_default_is_zero():
    assert ComplexNumber() == ComplexNumber(0.0, 0.0)


def test_add_zero_is_identity():
    number = ComplexNumber(1.5, -2.5)
    number.add(ComplexNumber())
    assert number == ComplexNumber(1.5, -2.5)


def test_add_commutes():
    a = ComplexNumber(1.0, 2.0)
    b = ComplexNumber(3.0, 4.0)
    a.add(ComplexNumber(3.0, 4.0))
    b.add(ComplexNumber(1.0, 2.0))
    assert a == b


def test_add_leaves_argument_unchanged():
    other = ComplexNumber(3.0, 4.0)
    ComplexNumber(1.0, 2.0).add(other)
    assert other == ComplexNumber(3.0, 4.0)


def test_multiply_by_one_is_identity():
    number = ComplexNumber(3.0, 4.0)
    number.multiply(ComplexNumber(1.0, 0.0))
    assert number == ComplexNumber(3.0, 4.0)


def test_multiply_by_zero():
    number = ComplexNumber(3.0, 4.0)
    number.multiply(ComplexNumber())
    assert number == ComplexNumber(0.0, 0.0)


def test_multiply_uses_updated_real_part():
    number = ComplexNumber(1.0, 2.0)
    number.multiply(ComplexNumber(3.0, 4.0))
    assert (number.real, number.imaginary) == (-5.0, -14.0)


def test_memento_round_trip():
    number = ComplexNumber(1.0, 2.0)
    memento = number.create_memento()
    number.add(ComplexNumber(10.0, 10.0))
    number.reinstate_memento(memento)
    assert number == ComplexNumber(1.0, 2.0)


def test_memento_is_immutable():
    memento = ComplexNumber(1.0, 2.0).create_memento()
    with pytest.raises(dataclasses.FrozenInstanceError):
        memento.real = 5.0
    assert memento == Memento(1.0, 2.0)


def test_store_keeps_last_memento():
    store = Store()
    first = Memento(1.0, 2.0)
    second = Memento(3.0, 4.0)
    store.store_memento(first)
    store.store_memento(second)
    assert store.retrieve_memento() is second


def test_empty_store_gives_zero_state():
    number = ComplexNumber(7.0, 8.0)
    number.reinstate_memento(Store().retrieve_memento())
    assert number == ComplexNumber()


def test_display(capsys):
    ComplexNumber(1.0, 2.0).display()
    assert capsys.readouterr().out == "1 + 2i\n"


def test_main(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["3 + 4i", "1 + 2i", "4 + 6i", "1 + 2i"]