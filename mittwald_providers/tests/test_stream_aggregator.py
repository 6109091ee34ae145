from __future__ import annotations

import asyncio

import pytest

from mittwald_providers.base.models import StreamedChatChunk, ToolCallDelta, ToolFunction
from mittwald_providers.base.streaming import (
    StreamAggregator,
    StreamedChatOutput,
    StreamState,
    aggregate_chunks_async,
    decode_tool_arguments,
)
from mittwald_providers.mittwald.stream_helpers import translate_chunk
from mittwald_providers.tests.utils import chunk


def _feed_all(agg: StreamAggregator, raws) -> None:
    for raw in raws:
        agg.feed(translate_chunk(raw))


def test_text_stream_is_concatenated_in_order():
    agg = StreamAggregator()
    assert agg.state is StreamState.OPEN  # nosec B101
    _feed_all(
        agg,
        [
            chunk(role="assistant", content="Hel"),
            chunk(content="lo"),
            chunk(content=" world", finish_reason="stop"),
        ],
    )
    out = agg.reconstruct_output()
    assert out.message.role == "assistant" and out.message.text == "Hello world"  # nosec B101
    assert out.finish_reason == "stop"  # nosec B101


def test_first_role_sticks():
    agg = StreamAggregator()
    agg.feed(StreamedChatChunk(role="assistant"))
    agg.feed(StreamedChatChunk(role="tool", content="x"))
    assert agg.result.role == "assistant"  # nosec B101


def test_state_moves_to_accumulating_then_finished():
    agg = StreamAggregator()
    agg.feed(StreamedChatChunk(content="a"))
    assert agg.state is StreamState.ACCUMULATING  # nosec B101
    agg.feed(StreamedChatChunk(finish_reason="length"))
    assert agg.finished  # nosec B101
    agg.feed(StreamedChatChunk(finish_reason="stop"))
    assert agg.result.finish_reason == "length"  # nosec B101


def test_reconstruct_before_finish_raises():
    agg = StreamAggregator()
    agg.feed(StreamedChatChunk(content="partial"))
    with pytest.raises(RuntimeError):
        agg.reconstruct_output()


def test_usage_is_overwritten_not_summed():
    agg = StreamAggregator()
    _feed_all(
        agg,
        [
            chunk(content="a", usage={"prompt_tokens": 5, "completion_tokens": 1, "total_tokens": 6}),
            chunk(content="b", finish_reason="stop", usage={"completion_tokens": 2, "total_tokens": 7}),
            chunk(
                empty_choices=True,
                usage={
                    "prompt_tokens": 5,
                    "completion_tokens": 3,
                    "total_tokens": 8,
                    "completion_tokens_details": {"reasoning_tokens": 2},
                    "prompt_tokens_details": {"cached_tokens": 4},
                },
            ),
        ],
    )
    usage = agg.reconstruct_output().usage
    assert usage.to_dict() == {"input": 5, "output": 3, "total": 8, "reasoning": 2, "cached": 4}  # nosec B101


def test_partial_usage_keeps_earlier_fields():
    agg = StreamAggregator()
    agg.feed(StreamedChatChunk(usage={"input": 9, "output": None}))
    agg.feed(StreamedChatChunk(usage={"output": 4}, finish_reason="stop"))
    assert agg.result.usage.input == 9 and agg.result.usage.output == 4  # nosec B101


def test_tool_call_fragments_merge_by_index():
    weather = ToolFunction(name="get_weather")
    agg = StreamAggregator(tools=[weather])
    _feed_all(
        agg,
        [
            chunk(role="assistant", tool_calls=[{"index": 0, "id": "call_a", "function": {"name": "get_weather", "arguments": '{"ci'}}]),
            chunk(tool_calls=[{"index": 1, "id": "call_b", "function": {"name": "get_time", "arguments": "{}"}}]),
            chunk(tool_calls=[{"index": 0, "function": {"arguments": 'ty": "Berlin"}'}}]),
            chunk(finish_reason="tool_calls"),
        ],
    )
    calls = agg.reconstruct_output().message.tool_calls
    assert [c.id for c in calls] == ["call_a", "call_b"]  # nosec B101
    assert calls[0].arguments == {"city": "Berlin"}  # nosec B101
    assert calls[0].function is weather and calls[1].function is None  # nosec B101


def test_tool_call_id_and_name_are_set_once():
    agg = StreamAggregator()
    agg.feed(StreamedChatChunk(tool_calls=[ToolCallDelta(index=0, id="first", name="a")]))
    agg.feed(StreamedChatChunk(tool_calls=[ToolCallDelta(index=0, id="second", name="b", arguments="{}")]))
    merged = agg.result.tool_calls[0]
    assert (merged.id, merged.name, merged.arguments) == ("first", "a", "{}")  # nosec B101


@pytest.mark.parametrize(
    "raw, expected",
    [("", {}), ("{not json", {}), ("[1, 2]", {"value": [1, 2]}), ('{"a": 1}', {"a": 1})],
)
def test_decode_tool_arguments(raw, expected):
    assert decode_tool_arguments(raw) == expected  # nosec B101


def test_malformed_chunks_are_ignored():
    agg = StreamAggregator()
    agg.feed(None)
    agg.feed({"choices": "nope"})
    agg.feed(translate_chunk({"choices": [None]}))
    agg.feed(translate_chunk(object()))
    assert agg.result.content == "" and agg.result.finish_reason is None  # nosec B101


def test_stream_without_finish_reason_is_final_after_close():
    agg = StreamAggregator()
    agg.feed(StreamedChatChunk(content="cut"))
    agg.close()
    out = agg.reconstruct_output()
    assert out.message.text == "cut" and out.finish_reason is None  # nosec B101


def test_streamed_output_is_single_pass():
    output = StreamedChatOutput(
        [StreamedChatChunk(role="assistant", content="a"), StreamedChatChunk(content="b", finish_reason="stop")]
    )
    seen = []
    for part in output:
        seen.append(part.content)
        assert output.aggregate.content == "".join(seen)  # nosec B101
    assert output.exhausted and output.finish_reason == "stop"  # nosec B101
    with pytest.raises(RuntimeError):
        iter(output)
    assert output.reconstruct_output().message.text == "ab"  # nosec B101


def test_reconstruct_drains_a_partially_consumed_stream():
    output = StreamedChatOutput(
        [StreamedChatChunk(content="x"), StreamedChatChunk(content="y"), StreamedChatChunk(content="z", finish_reason="stop")]
    )
    it = iter(output)
    next(it)
    assert output.reconstruct_output().message.text == "xyz"  # nosec B101
    assert output.exhausted  # nosec B101


def test_reconstruct_without_iteration_consumes_everything():
    output = StreamedChatOutput([StreamedChatChunk(content="only", finish_reason="stop")])
    assert output.reconstruct_output().message.text == "only"  # nosec B101


def test_async_aggregation():
    async def _source():
        for raw in (chunk(role="assistant", content="as"), chunk(content="ync", finish_reason="stop")):
            yield translate_chunk(raw)

    out = asyncio.run(aggregate_chunks_async(_source()))
    assert out.message.text == "async" and out.finish_reason == "stop"  # nosec B101
