"""
asyncsignals Dispatch Tests

Branch selection order of AsyncState.map and AsyncState.maybe_map.
"""

import pytest

from asyncsignals.state.async_state import AsyncState


def _map(state, **extra):
    return state.map(
        data=lambda v: f"data:{v}",
        error=lambda e, tb: f"error:{e}",
        loading=lambda: "loading",
        **extra,
    )


class TestMap:
    """Total dispatch with fixed precedence."""

    def test_data(self):
        assert _map(AsyncState.data(1)) == "data:1"

    def test_data_none(self):
        assert _map(AsyncState.data(None)) == "data:None"

    def test_error(self):
        assert _map(AsyncState.failure("E")) == "error:E"

    def test_error_branch_receives_trace(self):
        try:
            raise ValueError("bad")
        except ValueError as e:
            state = AsyncState.failure(e, e.__traceback__)

        seen = state.map(
            data=lambda v: None,
            error=lambda e, tb: (e, tb),
            loading=lambda: None,
        )

        assert seen == (state.error, state.stack_trace)
        assert seen[1] is not None

    def test_loading(self):
        assert _map(AsyncState.loading()) == "loading"

    def test_empty_state_maps_to_loading(self):
        assert _map(AsyncState.create()) == "loading"

    def test_reloading_wins_over_data(self):
        state = AsyncState.data(1).with_reloading()

        assert _map(state, reloading=lambda: "reloading") == "reloading"

    def test_reloading_wins_over_error(self):
        state = AsyncState.failure("E").with_reloading()

        assert _map(state, reloading=lambda: "reloading") == "reloading"

    def test_reloading_without_branch_falls_to_data(self):
        state = AsyncState.data(1).with_reloading()

        assert _map(state) == "data:1"

    def test_reloading_branch_ignored_when_not_reloading(self):
        assert _map(AsyncState.data(1), reloading=lambda: "reloading") == "data:1"

    def test_value_wins_over_error(self):
        state = AsyncState.data(1).with_error("E")

        assert _map(state) == "data:1"

    def test_refreshing_branch(self):
        state = AsyncState.data(1).with_loading()

        assert _map(state, refreshing=lambda: "refreshing") == "refreshing"

    def test_refreshing_without_branch_falls_to_data(self):
        assert _map(AsyncState.data(1).with_loading()) == "data:1"

    def test_refreshing_error_without_branch_falls_to_error(self):
        assert _map(AsyncState.failure("E").with_loading()) == "error:E"

    def test_plain_loading_is_not_refreshing(self):
        assert _map(AsyncState.loading(), refreshing=lambda: "refreshing") == "loading"

    def test_reloading_checked_before_refreshing(self):
        state = AsyncState.data(1).with_reloading()

        result = _map(
            state,
            reloading=lambda: "reloading",
            refreshing=lambda: "refreshing",
        )

        assert result == "reloading"

    def test_branch_errors_propagate(self):
        def fail(value):
            raise KeyError(value)

        with pytest.raises(KeyError):
            AsyncState.data(1).map(
                data=fail,
                error=lambda e, tb: None,
                loading=lambda: None,
            )


class TestMaybeMap:
    """Partial dispatch with or_else fallback."""

    def test_or_else_only(self):
        for state in (AsyncState.loading(), AsyncState.data(1), AsyncState.failure("E")):
            assert state.maybe_map(or_else=lambda: "else") == "else"

    def test_data(self):
        result = AsyncState.data(1).maybe_map(data=lambda v: v + 1, or_else=lambda: 0)

        assert result == 2

    def test_error(self):
        result = AsyncState.failure("E").maybe_map(
            error=lambda e, tb: f"error:{e}",
            or_else=lambda: "else",
        )

        assert result == "error:E"

    def test_loading(self):
        result = AsyncState.loading().maybe_map(loading=lambda: "loading", or_else=lambda: "else")

        assert result == "loading"

    def test_error_state_with_other_branches_uses_or_else(self):
        """Branches for other cases do not catch an error state."""
        result = AsyncState.failure("E").maybe_map(
            data=lambda v: "data",
            loading=lambda: "loading",
            or_else=lambda: "else",
        )

        assert result == "else"

    def test_loading_without_branch_uses_or_else(self):
        result = AsyncState.loading().maybe_map(
            data=lambda v: "data",
            error=lambda e, tb: "error",
            or_else=lambda: "else",
        )

        assert result == "else"

    def test_empty_state_uses_or_else(self):
        result = AsyncState.create().maybe_map(loading=lambda: "loading", or_else=lambda: "else")

        assert result == "else"

    def test_reloading(self):
        state = AsyncState.data(1).with_reloading()

        result = state.maybe_map(
            reloading=lambda: "reloading",
            data=lambda v: "data",
            or_else=lambda: "else",
        )

        assert result == "reloading"

    def test_reloading_without_branch_falls_through(self):
        state = AsyncState.data(1).with_reloading()

        assert state.maybe_map(data=lambda v: "data", or_else=lambda: "else") == "data"
        assert state.maybe_map(loading=lambda: "loading", or_else=lambda: "else") == "else"

    def test_error_over_data_without_data_branch(self):
        """A held value without a data branch falls through to the error branch."""
        state = AsyncState.data(1).with_error("E")

        result = state.maybe_map(error=lambda e, tb: f"error:{e}", or_else=lambda: "else")

        assert result == "error:E"

    def test_refreshing_data_prefers_data_over_loading(self):
        state = AsyncState.data(1).with_loading()

        result = state.maybe_map(
            data=lambda v: "data",
            loading=lambda: "loading",
            or_else=lambda: "else",
        )

        assert result == "data"

    def test_refreshing_data_uses_loading_without_data_branch(self):
        state = AsyncState.data(1).with_loading()

        assert state.maybe_map(loading=lambda: "loading", or_else=lambda: "else") == "loading"

    def test_refreshing_branch(self):
        state = AsyncState.failure("E").with_loading()

        result = state.maybe_map(
            refreshing=lambda: "refreshing",
            error=lambda e, tb: "error",
            or_else=lambda: "else",
        )

        assert result == "refreshing"
