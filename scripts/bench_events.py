#!/usr/bin/env python3
"""Benchmark event ingestion: accepted events/s, request latency, flush lag.

Usage:
  From host (API on localhost):
    export API_URL=http://localhost:8000
    uv run python scripts/bench_events.py [--num-events 500] [--duplicate-every 5]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

TEMPLATES = (
    "Kamil Moskała 7:{m:02d} PM can we move meeting number {i} to Friday",
    "Invoice {i} for project Apollo is due, amount {i}00 PLN",
    "Message to Anna Nowak about deadline {i} for the quarterly report",
)


def event_text(i: int) -> str:
    return TEMPLATES[i % len(TEMPLATES)].format(i=i, m=i % 60)


def wait_for_flush(client: httpx.Client, api_url: str, timeout: float) -> float:
    """Poll /v1/status until nothing is pending; returns seconds waited."""
    t0 = time.perf_counter()
    while time.perf_counter() - t0 < timeout:
        r = client.get(f"{api_url}/v1/status")
        r.raise_for_status()
        if r.json()["pending"] == 0:
            break
        time.sleep(0.1)
    return time.perf_counter() - t0


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark event ingestion")
    parser.add_argument("--num-events", type=int, default=200, help="Number of events to post")
    parser.add_argument(
        "--duplicate-every", type=int, default=0, help="Resend the previous event every N events"
    )
    parser.add_argument("--flush-timeout", type=float, default=30.0, help="Seconds to wait for flush")
    parser.add_argument("--output", type=str, default="/results/bench_events.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")

    latencies: list[float] = []
    accepted = 0
    errors = 0

    print(f"Posting {args.num_events} events...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        r = client.get(f"{api_url}/v1/status")
        r.raise_for_status()
        collected_before = r.json()["chunks_collected"]

        for i in range(args.num_events):
            dup = args.duplicate_every and i and i % args.duplicate_every == 0
            text = event_text(i - 1 if dup else i)
            t0 = time.perf_counter()
            r = client.post(f"{api_url}/v1/events", json={"text": text, "app": "Slack"})
            elapsed = time.perf_counter() - t0
            if r.status_code == 202:
                latencies.append(elapsed)
                accepted += int(r.json()["accepted"])
            else:
                errors += 1
        total_elapsed = time.perf_counter() - start_total

        flush_lag = wait_for_flush(client, api_url, args.flush_timeout)
        r = client.get(f"{api_url}/v1/status")
        r.raise_for_status()
        status = r.json()

    n = len(latencies)
    if n == 0:
        print("No successful requests.")
        return 1

    events_per_sec = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    stored = status["chunks_collected"] - collected_before

    summary = (
        f"Event benchmark (n={n}, accepted={accepted}, errors={errors})\n"
        f"  Throughput: {events_per_sec:.2f} events/s\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms\n"
        f"  Flush lag: {flush_lag:.2f} s, stored={stored}, last_error={status['last_error']}\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
