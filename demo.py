"""
nanobench demo script.

Run this directly to see the marks and the report in action:
    python demo.py
"""

import asyncio
import time

import nanobench
from nanobench import watch, watch_block


# --- 1. Function decorator ---------------------------------------------------

@watch
def fibonacci(n):
    """Compute nth Fibonacci number recursively."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


@watch("sum of range")
def heavy_sum(limit):
    """Sum a large range."""
    return sum(range(limit))


# --- 2. Async decorator ------------------------------------------------------

@watch("async fetch simulation")
async def fake_fetch(url):
    """Simulate an async HTTP request."""
    await asyncio.sleep(0.005)
    return f"response from {url}"


# --- 3. Manual marks ---------------------------------------------------------

def process_order(order_id):
    """Simulate a multi-step order processing flow with a paused wait."""
    order = nanobench.mark(f"process_order({order_id})").start()

    time.sleep(0.003)
    order.pause()
    time.sleep(0.010)       # waiting on a queue, not counted
    order.start()

    time.sleep(0.005)
    order.stop()


# --- run everything ----------------------------------------------------------

def main():
    """Execute all demos and print the report."""
    heavy_sum(1_000_000)
    heavy_sum(5_000_000)
    fibonacci(20)
    asyncio.run(fake_fetch("https://api.example.com/data"))

    with watch_block("json serialization simulation"):
        time.sleep(0.002)

    process_order(42)

    print("\n--- report ---")
    print(nanobench.report(), end="")

    print("\n--- only marks above 10% ---")
    nanobench.bench.add_filter(lambda mark_id, result, percent: percent > 10)
    nanobench.summary()


if __name__ == "__main__":
    main()
