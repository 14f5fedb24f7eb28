import dataclasses

import httpx
import pytest

from src.models.fetch import FetchContext, FetchRequest


class TestFetchRequest:
    def test_defaults(self) -> None:
        request = FetchRequest("/a")
        assert request.method == "GET"
        assert len(request.headers) == 0
        assert request.body is None

    def test_method_is_upper_cased(self) -> None:
        assert FetchRequest("/a", method="post").method == "POST"

    def test_headers_are_case_insensitive_and_copied(self) -> None:
        source = {"Content-Type": "text/plain"}
        request = FetchRequest("/a", headers=source)
        source["Content-Type"] = "application/json"

        assert request.headers["content-type"] == "text/plain"
        assert isinstance(request.headers, httpx.Headers)

    def test_is_frozen(self) -> None:
        request = FetchRequest("/a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.url = "/b"  # type: ignore[misc]

    def test_from_url_uses_method_headers_and_body(self) -> None:
        request = FetchRequest.from_url(
            "/a",
            {"method": "Post", "headers": {"Custom": "Header"}, "body": b"x", "credentials": "omit"},
        )
        assert request == FetchRequest("/a", method="POST", headers={"custom": "Header"}, body=b"x")

    def test_from_url_without_options(self) -> None:
        assert FetchRequest.from_url("/a", None) == FetchRequest("/a")

    def test_with_url_returns_new_instance(self) -> None:
        request = FetchRequest("/a", method="PUT", headers={"X-A": "1"})
        rewritten = request.with_url("/b")

        assert rewritten is not request
        assert request.url == "/a"
        assert rewritten == FetchRequest("/b", method="PUT", headers={"X-A": "1"})

    def test_with_headers_overwrite(self) -> None:
        request = FetchRequest("/a", headers={"Authorization": "old", "Accept": "*/*"})

        replaced = request.with_headers({"authorization": "new"})
        kept = request.with_headers({"Authorization": "new", "X-New": "1"}, overwrite=False)

        assert replaced.headers["Authorization"] == "new"
        assert kept.headers["Authorization"] == "old"
        assert kept.headers["x-new"] == "1"
        assert request.headers["Authorization"] == "old"

    def test_headers_property_returns_a_copy(self) -> None:
        request = FetchRequest("/a", headers={"Accept": "*/*"})

        request.headers["Accept"] = "text/html"
        request.headers["X-New"] = "1"

        assert request.headers["accept"] == "*/*"
        assert "x-new" not in request.headers

    def test_replace_keeps_headers(self) -> None:
        request = FetchRequest("/a", headers={"X-A": "1"})
        assert request.replace(method="post").headers["x-a"] == "1"

    def test_with_headers_keeps_multi_valued_headers(self) -> None:
        request = FetchRequest("/a", headers={"Accept": "*/*", "X-Keep": "1"})

        merged = request.with_headers([("Accept", "text/html"), ("Accept", "application/json")])
        appended = request.with_headers([("X-Tag", "a"), ("X-Tag", "b")], overwrite=False)

        assert merged.headers.get_list("accept") == ["text/html", "application/json"]
        assert merged.headers["x-keep"] == "1"
        assert appended.headers.get_list("x-tag") == ["a", "b"]
        assert appended.headers["accept"] == "*/*"

    def test_hashable(self) -> None:
        first = FetchRequest("/a", headers={"X": "1"})
        second = FetchRequest("/a", headers={"x": "1"})
        assert first == second
        assert hash(first) == hash(second)


def test_context_defaults() -> None:
    request = FetchRequest("/a")
    context = FetchContext(original_request=request, request=request)
    assert context.error is None
    assert context.event is None
