"""Tests for maybe_selector, result_selector and Selection."""

import copy
from types import SimpleNamespace

import pytest

from selector_monads import (
    Err,
    Just,
    Nothing,
    Ok,
    Selection,
    UndefinedResultError,
    container_of,
    is_maybe,
    is_result,
    maybe_selector,
    result_selector,
)

PROFILE_URL = "http://website.test/user/1/profile"


@maybe_selector
def maybe_user(state, result):
    return {"profile_url": lambda: result.map(lambda user: user["profile_url"])}


def maybe_root(state):
    return SimpleNamespace(
        session=lambda: maybe_session(state),
        user=lambda user_id: maybe_user(state, state["users"].get(user_id)),
    )


def maybe_session(state):
    return SimpleNamespace(
        user=lambda: maybe_user(state, maybe_root(state).user(state["session"]["user_id"])),
    )


@result_selector
def result_user(state, result):
    return {"profile_url": lambda: result.map(lambda user: user["profile_url"])}


def result_root(state):
    return SimpleNamespace(
        session=lambda: result_session(state),
        user=lambda user_id: result_user(state, state["users"].get(user_id)),
    )


def result_session(state):
    return SimpleNamespace(
        user=lambda: result_user(state, result_root(state).user(state["session"]["user_id"])),
    )


class TestSelection:
    """Tests for the Selection composite."""

    def test_forwards_container_operations(self):
        """Container attributes and operations are reachable."""
        s = Selection(Just(2), {})
        assert s.value == 2
        assert s.is_nothing is False
        assert s.map(lambda x: x + 1) == Just(3)
        assert s.get() == 2

    def test_exposes_accessors(self):
        """Accessors from the mapping are reachable."""
        s = Selection(Nothing, {"answer": lambda: 42})
        assert s.answer() == 42

    def test_accessors_override_container_operations(self):
        """An accessor named like a container operation wins."""
        s = Selection(Just(2), {"map": lambda f: "overridden"})
        assert s.map(str) == "overridden"
        assert s.get() == 2

    def test_missing_attribute_raises(self):
        """Unknown names raise AttributeError."""
        with pytest.raises(AttributeError):
            Selection(Just(1), {}).nope  # noqa: B018

    def test_equality_with_container(self):
        """A Selection equals its container and other selections over it."""
        s = Selection(Just(1), {"a": lambda: 1})
        assert s == Just(1)
        assert Just(1) == s
        assert s == Selection(Just(1), {})
        assert s != Just(2)
        assert hash(s) == hash(Just(1))

    def test_container_of(self):
        """container_of() unwraps selections and passes anything else through."""
        j = Just(1)
        assert container_of(Selection(j, {})) is j
        assert container_of(j) is j
        assert container_of(5) == 5

    def test_is_recognized_as_container(self):
        """Type tests recognize selections by their container's tag."""
        assert is_maybe(Selection(Nothing, {}))
        assert is_result(Selection(Ok(1), {}))
        assert not is_result(Selection(Nothing, {}))

    def test_copy(self):
        """Selections can be shallow-copied."""
        s = Selection(Just(1), {"a": lambda: 1})
        copied = copy.copy(s)
        assert copied == s
        assert copied.a() == 1

    def test_dir_lists_accessors_and_operations(self):
        """dir() includes both accessor names and container operations."""
        names = dir(Selection(Just(1), {"profile_url": lambda: None}))
        assert "profile_url" in names
        assert "flat_map" in names

    def test_repr(self):
        """repr() shows the container and accessor names."""
        assert repr(Selection(Just(1), {"b": None, "a": None})) == "Selection(Just(value=1), selectors=['a', 'b'])"


class TestMaybeSelectorNormalization:
    """Tests for how maybe_selector normalizes its result argument."""

    def test_missing_result_is_nothing(self):
        """No result argument yields Nothing."""
        seen = []

        @maybe_selector
        def sel(state, result):
            seen.append(result)
            return {"extra": lambda: "x"}

        s = sel({})
        assert s == Nothing
        assert s.is_nothing is True
        assert s.extra() == "x"
        assert seen == [Nothing]

    def test_none_result_is_nothing(self):
        """A None result yields Nothing."""
        assert maybe_user({}, None) == Nothing

    def test_raw_value_is_wrapped(self):
        """A raw value is wrapped with maybe()."""
        s = maybe_user({}, {"profile_url": "u"})
        assert s == Just({"profile_url": "u"})

    def test_container_is_not_rewrapped(self):
        """An existing Maybe is handed to the factory as is."""
        seen = []

        @maybe_selector
        def sel(state, result):
            seen.append(result)
            return {}

        j = Just(1)
        s = sel({}, j)
        assert seen[0] is j
        assert container_of(s) is j

    def test_nothing_is_not_rewrapped(self):
        """Nothing passed in stays Nothing rather than Just(Nothing)."""
        assert container_of(maybe_user({}, Nothing)) is Nothing

    def test_selection_is_unwrapped(self):
        """A selection passed in contributes its container, not its accessors."""
        seen = []

        @maybe_selector
        def sel(state, result):
            seen.append(result)
            return {}

        previous = maybe_user({}, {"profile_url": "u"})
        s = sel({}, previous)
        assert seen[0] is container_of(previous)
        with pytest.raises(AttributeError):
            s.profile_url  # noqa: B018

    def test_factory_receives_state(self):
        """The factory is called with the state it was given."""
        state = {"k": 1}

        @maybe_selector
        def sel(s, result):
            return {"state": lambda: s}

        assert sel(state, 1).state() is state

    def test_wraps_factory_metadata(self):
        """The selector keeps the factory's name and docstring."""

        @maybe_selector
        def documented(state, result):
            """Doc."""
            return {}

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Doc."


class TestMaybeSelectorChaining:
    """End-to-end chains over a Maybe selector."""

    def test_handles_missing_user(self, app_state):
        """A missing user short-circuits to Nothing."""
        assert maybe_root(app_state).user("-1").profile_url().value is None

    def test_missing_user_in_empty_state(self):
        """An empty user table short-circuits to Nothing."""
        assert maybe_root({"users": {}}).user("missing").profile_url().value is None

    def test_allows_chaining_on_present_values(self, app_state):
        """A present user chains through to its profile URL."""
        assert maybe_root(app_state).user("1").profile_url().value == PROFILE_URL

    def test_chains_through_session(self, app_state):
        """A selection can feed the next selector."""
        assert maybe_root(app_state).session().user().profile_url().value == PROFILE_URL

    def test_selection_is_a_container(self, app_state):
        """The composite supports container operations directly."""
        user = maybe_root(app_state).user("1")
        assert user.map(lambda u: u["id"]).get() == "1"
        assert user.join(lambda: "none", lambda u: u["id"]) == "1"


class TestResultSelectorNormalization:
    """Tests for how result_selector normalizes its result argument."""

    def test_missing_result_is_err(self):
        """No result argument yields Err('result is undefined')."""
        s = result_user({})
        assert s.is_ok is False
        assert isinstance(s.get_error(), UndefinedResultError)
        assert str(s.get_error()) == "result is undefined"

    def test_raw_value_is_wrapped(self):
        """A raw value is wrapped with result()."""
        assert result_user({}, {"profile_url": "u"}) == Ok({"profile_url": "u"})

    def test_exception_is_wrapped_as_err(self):
        """A raw exception becomes Err of that exception."""
        exc = KeyError("user")
        s = result_user({}, exc)
        assert s.get_error() is exc

    def test_container_is_not_rewrapped(self):
        """An existing Result is handed through as is."""
        e = Err(ValueError("fail"))
        assert container_of(result_user({}, e)) is e
        o = Ok(1)
        assert container_of(result_user({}, o)) is o

    def test_accessors_merged_on_err(self):
        """Accessors are available on an Err selection too."""
        s = result_user({})
        assert s.profile_url().is_ok is False


class TestResultSelectorChaining:
    """End-to-end chains over a Result selector."""

    def test_handles_missing_user(self, app_state):
        """A missing user raises 'result is undefined' on get()."""
        with pytest.raises(UndefinedResultError, match="^result is undefined$"):
            result_root(app_state).user("-1").profile_url().get()

    def test_allows_chaining_on_present_values(self, app_state):
        """A present user chains through to its profile URL."""
        assert result_root(app_state).session().user().profile_url().get() == PROFILE_URL

    def test_err_propagates_through_session(self):
        """A session pointing at a missing user stays Err."""
        state = {"session": {"user_id": "2"}, "users": {}}
        chained = result_root(state).session().user().profile_url()
        assert chained.join(str, lambda url: url) == "result is undefined"
