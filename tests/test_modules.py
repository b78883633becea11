from rustdrills.drills.modules import FRUIT, VEGGIE, favorite_snacks, make_sausage


def test_make_sausage(capsys):
    assert make_sausage() == "sausage!"
    assert capsys.readouterr().out == "sausage!\n"


def test_favorite_snacks():
    assert favorite_snacks() == "favorite snacks: Pear and Cucumber"


def test_favorite_snacks_uses_exported_names():
    line = favorite_snacks()
    assert line.endswith(f"{FRUIT} and {VEGGIE}")