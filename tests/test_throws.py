from __future__ import annotations

import re

import pytest

from flatroute import InvalidArgumentError, route, route_sync, stage, stage_sync

SYNC_SOURCE_MESSAGE = 'Argument type mismatch: The first argument is expected to be "iterable".'
ASYNC_SOURCE_MESSAGE = (
    'Argument type mismatch: The first argument is expected to be "iterable" or "asyncIterable".'
)


def action_message(received: str) -> str:
    return (
        "Argument type mismatch: The second argument is expected to be a "
        f'"function", but received "{received}".'
    )


def test_route_sync_rejects_non_iterable_source():
    with pytest.raises(InvalidArgumentError, match=re.escape(SYNC_SOURCE_MESSAGE)) as info:
        route_sync(123, lambda x: x)

    assert str(info.value) == SYNC_SOURCE_MESSAGE
    assert info.value.position == "first"


def test_route_sync_rejects_async_iterable_source():
    async def source():
        yield 1

    with pytest.raises(InvalidArgumentError, match=re.escape(SYNC_SOURCE_MESSAGE)):
        route_sync(source(), lambda x: x)


def test_route_sync_rejects_non_callable_action():
    with pytest.raises(InvalidArgumentError) as info:
        route_sync([1, 2, 3], 123)

    assert str(info.value) == action_message("number")
    assert info.value.position == "second"


@pytest.mark.parametrize(
    ("action", "received"),
    [
        (None, "null"),
        ({"a": 1}, "object"),
        ([1], "object"),
        ("upper", "string"),
        (True, "boolean"),
        (1.5, "number"),
    ],
)
def test_route_sync_names_the_received_type(action, received):
    with pytest.raises(InvalidArgumentError) as info:
        route_sync([1], action)

    assert str(info.value) == action_message(received)


def test_source_is_checked_before_action():
    with pytest.raises(InvalidArgumentError) as info:
        route_sync(123, 123)

    assert str(info.value) == SYNC_SOURCE_MESSAGE


def test_invalid_argument_is_a_type_error():
    with pytest.raises(TypeError):
        route_sync(None, print)


def test_no_item_is_pulled_before_failing():
    pulled = []

    def source():
        for i in range(3):
            pulled.append(i)
            yield i

    with pytest.raises(InvalidArgumentError):
        route_sync(source(), 123)
    assert pulled == []


@pytest.mark.asyncio
async def test_route_rejects_non_iterable_source():
    with pytest.raises(InvalidArgumentError, match=re.escape(ASYNC_SOURCE_MESSAGE)):
        async for _ in route(123, lambda x: x):
            pass


@pytest.mark.asyncio
async def test_route_rejects_non_callable_action():
    with pytest.raises(InvalidArgumentError) as info:
        async for _ in route([1, 2, 3], 123):
            pass

    assert str(info.value) == action_message("number")


@pytest.mark.asyncio
async def test_route_fails_on_first_step():
    routed = route(123, lambda x: x)

    with pytest.raises(InvalidArgumentError):
        await anext(routed)


@pytest.mark.asyncio
async def test_route_checks_before_pulling():
    pulled = []

    async def source():
        for i in range(3):
            pulled.append(i)
            yield i

    with pytest.raises(InvalidArgumentError):
        await anext(route(source(), None))
    assert pulled == []


def test_stages_check_action_eagerly():
    with pytest.raises(InvalidArgumentError, match=re.escape(action_message("number"))):
        stage(42)
    with pytest.raises(InvalidArgumentError, match=re.escape(action_message("null"))):
        stage_sync(None)
