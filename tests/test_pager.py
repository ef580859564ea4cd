from mdiff.pager import Pager


def test_it_prefers_the_mdiff_pager():
    env = {"MDIFF_PAGER": "more", "PAGER": "most"}
    assert Pager.command(env) == "more"


def test_it_falls_back_to_the_pager_variable():
    assert Pager.command({"PAGER": "most -s"}) == "most -s"


def test_it_skips_empty_settings():
    assert Pager.command({"MDIFF_PAGER": "", "PAGER": "most"}) == "most"


def test_it_defaults_to_less():
    assert Pager.command({}) == "less"
