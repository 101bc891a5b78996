import pytest

from wayfinder.models.route import URLRoute
from wayfinder.url_router import URLRouter


@pytest.fixture
def router():
    return URLRouter()


def test_host_only_is_single_segment(router):
    route = router.parse("myapp://Settings")

    assert route.scheme == "myapp"
    assert route.host == "Settings"
    assert route.segments == ("Settings",)
    assert route.query == {}


@pytest.mark.parametrize("path", ["/a/b/c", "a/b/c/", "//a//b///c//", "/a/b/c/"])
def test_slashes_collapse(router, path):
    route = router.parse(f"myapp:///{path}")

    assert route.host is None
    assert route.path_segments == ("a", "b", "c")


def test_host_precedes_path(router):
    route = router.parse("myapp://detail/list/")

    assert route.segments == ("detail", "list")
    assert route.path_segments == ("list",)


def test_opaque_path_without_authority(router):
    assert router.parse("myapp:detail/list").segments == ("detail", "list")


def test_userinfo_and_port_are_not_segments(router):
    route = router.parse("myapp://user:pw@inbox:8080/thread")

    assert route.segments == ("inbox", "thread")


def test_path_is_percent_decoded_before_split(router):
    route = router.parse("myapp://search/caf%C3%A9/a%2Fb")

    assert route.segments == ("search", "café", "a", "b")


def test_encoded_slashes_can_stay_inside_segment():
    route = URLRouter(keep_encoded_slashes=True).parse("myapp://search/caf%C3%A9/a%2Fb")

    assert route.segments == ("search", "café", "a/b")


def test_plus_in_path_is_literal():
    assert URLRouter(decode_plus=True).parse("myapp://tag/c++").segments == ("tag", "c++")


def test_query_last_value_wins(router):
    route = router.parse("myapp://list?k=1&k=2&other=x&k=3")

    assert route.query == {"k": "3", "other": "x"}


def test_valueless_items_dropped_empty_values_kept(router):
    route = router.parse("myapp://list?flag&empty=&&id=5")

    assert route.query == {"empty": "", "id": "5"}


def test_plus_handling():
    assert URLRouter().parse("myapp://s?q=a+b").query == {"q": "a+b"}
    assert URLRouter(decode_plus=True).parse("myapp://s?q=a+b").query == {"q": "a b"}


def test_fragment_is_ignored(router):
    route = router.parse("myapp://detail#section")

    assert route.segments == ("detail",)


def test_surrounding_whitespace_is_stripped(router):
    assert router.parse("  myapp://detail \n").segments == ("detail",)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "detail/list",
        "myapp://detail:99999/",
        "myapp://detail:port/",
        "myapp://[::1",
        "myapp://det\x00ail",
        None,
        42,
    ],
)
def test_malformed_input_returns_none(router, text):
    assert router.parse(text) is None


def test_objects_with_to_string_are_accepted(router):
    class FakeUrl:
        def toString(self):
            return "myapp://detail?id=1"

    assert router.parse(FakeUrl()).query == {"id": "1"}


def test_encoded_form_is_preferred_over_to_string(router):
    class FakeByteArray:
        def data(self):
            return b"myapp://detail?q=a%26b"

    class FakeUrl:
        def toEncoded(self):
            return FakeByteArray()

        def toString(self):
            return "myapp://detail?q=a&b"

    assert router.parse(FakeUrl()).query == {"q": "a&b"}


def test_scheme_support_is_case_insensitive():
    router = URLRouter(schemes=["MyApp", "https"])

    assert router.supports("myapp")
    assert router.supports("HTTPS")
    assert not router.supports("ftp")
    assert URLRouter().supports("anything")


def test_to_text_renders_route():
    router = URLRouter(keep_encoded_slashes=True)
    route = URLRoute(
        scheme="myapp",
        host="detail",
        segments=("detail", "a b", "x/y"),
        query={"id": "42", "q": "a&b"},
    )

    assert router.to_text(route) == "myapp://detail/a%20b/x%2Fy?id=42&q=a%26b"
    assert router.parse(router.to_text(route)) == route


def test_from_settings():
    router = URLRouter.from_settings(
        {"router": {"schemes": ["myapp"], "decode_plus": True, "keep_encoded_slashes": True}}
    )

    assert router.schemes == frozenset({"myapp"})
    assert router.decode_plus is True
    assert router.keep_encoded_slashes is True
    assert URLRouter.from_settings({}).keep_encoded_slashes is False
    assert URLRouter.from_settings({}).schemes is None
