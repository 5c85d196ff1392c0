import pytest

from darktimer.services import ContentFilter, build_content_filter


@pytest.fixture()
def word_filter():
    return build_content_filter(["frick"])


@pytest.mark.parametrize(
    "text",
    ["No one can beat my record", "Shitake mushrooms", "class act", "10.00 or bust"],
)
def test_allows_clean_text(word_filter, text):
    assert word_filter.is_allowed(text)


@pytest.mark.parametrize(
    "text",
    [
        "you SHIT",
        "sh1t happens",
        "what the frick",
        "<script>alert(1)</script>",
        "zero" + chr(0x200B) + "width",
    ],
)
def test_rejects_blocked_text(word_filter, text):
    assert not word_filter.is_allowed(text)


def test_custom_list_replaces_defaults():
    only_heck = ContentFilter(["Heck"])
    assert not only_heck("HECK no")
    assert only_heck("shit")
