import pytest

from rustdrills.drills.macros import my_macro


def test_no_arguments(capsys):
    assert my_macro() == "Check out my macro!"
    assert capsys.readouterr().out == "Check out my macro!\n"


def test_one_argument():
    assert my_macro(7777) == "Look at this other macro: 7777"


def test_one_argument_includes_value():
    assert my_macro("abc").endswith("abc")


def test_too_many_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)