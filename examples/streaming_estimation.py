"""
Streaming estimation example
============================

Feeds chunks from an async source into estimate_stream() and prints the
running total as each chunk arrives. Stopping the loop early stops
pulling chunks from the source.

Run:
    python examples/streaming_estimation.py
"""

import asyncio

from fuzzy_token_estimator import FuzzyModelConfig, SimpleModelConfigProvider, create_fuzzy_estimator


async def fake_llm_stream():
    """Simulate an LLM streaming its reply."""
    for chunk in ["Hello ", "world ", "こんにちは", "、今日は", " 2024 年 ", "です！"]:
        await asyncio.sleep(0.05)
        yield chunk


async def main() -> None:
    provider = SimpleModelConfigProvider(
        {
            "mock-model": FuzzyModelConfig(
                chars_per_token=4,
                overhead=0,
                cjk_tokens_per_char=1.2,
                mixed_text_multiplier=1.05,
            )
        },
        default_model="mock-model",
    )
    estimator = create_fuzzy_estimator(provider)

    async for item in estimator.estimate_stream(fake_llm_stream()):
        print(f"  chunk={item.chunk!r:<14} tokens={item.tokens:<3} total={item.total}")


if __name__ == "__main__":
    asyncio.run(main())
