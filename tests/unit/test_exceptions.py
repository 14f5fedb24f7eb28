from src.core.exceptions import (
    FetchError,
    InvalidFetchInputError,
    PluginTransformError,
)
from src.core.messages import format_message


class TestFetchErrors:
    def test_plugin_transform_error_details(self) -> None:
        cause = ValueError("boom")
        error = PluginTransformError(cause, plugin_name="auth")

        assert error.kind == "plugin-error-request-will-fetch"
        assert error.details == {"thrownError": cause, "pluginName": "auth"}
        assert error.thrown_error is cause
        assert error.plugin_name == "auth"
        assert str(error) == (
            "An error was thrown by the request_will_fetch hook of plugin 'auth': boom"
        )

    def test_plugin_transform_error_without_name(self) -> None:
        error = PluginTransformError(TimeoutError())

        assert error.plugin_name is None
        assert "<anonymous>" in str(error)
        assert "TimeoutError()" in str(error)

    def test_invalid_input_is_type_error(self) -> None:
        error = InvalidFetchInputError(123)

        assert isinstance(error, TypeError)
        assert isinstance(error, FetchError)
        assert "got int" in str(error)

    def test_details_are_copied(self) -> None:
        details = {"thrownError": ValueError("x")}
        error = FetchError("plugin-error-request-will-fetch", details)
        details["pluginName"] = "late"

        assert "pluginName" not in error.details

    def test_repr(self) -> None:
        error = FetchError("custom-kind", {"a": 1})
        assert repr(error) == "FetchError(kind='custom-kind', details={'a': 1})"


def test_unknown_kind_falls_back_to_kind() -> None:
    assert format_message("something-else", {"a": 1}) == "something-else"
    assert str(FetchError("something-else")) == "something-else"
