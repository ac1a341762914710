"""
Rush Hour Simulation Script

Fires concurrent order creations and status updates at a running API
and checks that every created order got a distinct id and can be read
back with its final status.

Run from project root (with the API running):
    python scripts/simulate.py --orders 50

Author: Khalil Bannouri
Version: 1.0.0
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import datetime
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:3000"
TOTAL_ORDERS = 50

FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Wilson", "Taylor"]
STATUS_FLOW = ["DELIVERING", "DELIVERED"]


def generate_random_items(menu: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Pick 1-4 random dishes from the daily menu."""
    return [
        {"itemName": random.choice(menu)["name"], "quantity": random.randint(1, 3)}
        for _ in range(random.randint(1, 4))
    ]


def generate_order_payload(menu: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate payload for POST /api/orders."""
    return {
        "customerName": f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
        "contents": generate_random_items(menu),
    }


async def run_order_lifecycle(
    client: httpx.AsyncClient,
    order_num: int,
    menu: list[dict[str, Any]],
) -> dict[str, Any]:
    """Create one order, then walk it through the delivery statuses."""
    start_time = time.time()

    try:
        response = await client.post(
            f"{API_BASE_URL}/api/orders",
            json=generate_order_payload(menu),
            timeout=30.0,
        )
        if response.status_code != 201:
            return {
                "order_num": order_num,
                "success": False,
                "error": response.text[:100],
                "time": round(time.time() - start_time, 3),
            }

        order_id = response.json()["data"]["id"]
        for status in STATUS_FLOW:
            response = await client.put(
                f"{API_BASE_URL}/api/orders/{order_id}",
                json={"status": status},
                timeout=30.0,
            )
            response.raise_for_status()

        return {
            "order_num": order_num,
            "success": True,
            "order_id": order_id,
            "time": round(time.time() - start_time, 3),
        }
    except httpx.HTTPError as e:
        return {
            "order_num": order_num,
            "success": False,
            "error": str(e)[:100],
            "time": round(time.time() - start_time, 3),
        }


async def verify_orders(client: httpx.AsyncClient, order_ids: list[str]) -> list[str]:
    """Return the ids that cannot be read back as DELIVERED."""
    problems = []
    for order_id in order_ids:
        response = await client.get(f"{API_BASE_URL}/api/orders/{order_id}")
        if response.status_code != 200:
            problems.append(order_id)
        elif response.json()["data"]["status"] != "DELIVERED":
            problems.append(order_id)
    return problems


async def run_simulation(num_orders: int = TOTAL_ORDERS) -> dict[str, Any]:
    """
    Run the rush hour simulation.

    Args:
        num_orders: Number of orders to simulate
    """
    print("=" * 70)
    print("🔥 RUSH HOUR SIMULATION - CONCURRENT ORDERS")
    print("=" * 70)
    print(f"📋 Total Orders: {num_orders}")
    print(f"🎯 Target: {API_BASE_URL}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{API_BASE_URL}/api/daily-menu")
        response.raise_for_status()
        menu = response.json()["data"]

        print(f"\n🚀 Firing {num_orders} orders...\n")
        tasks = [run_order_lifecycle(client, i + 1, menu) for i in range(num_orders)]
        results = await asyncio.gather(*tasks)

        successful = [r for r in results if r["success"]]
        failed = [r for r in results if not r["success"]]
        order_ids = [r["order_id"] for r in successful]
        problems = await verify_orders(client, order_ids)

    total_time = round(time.time() - start_time, 2)
    duplicates = len(order_ids) - len(set(order_ids))

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"\n✅ Successful Orders: {len(successful)}/{num_orders}")
    print(f"❌ Failed Orders: {len(failed)}/{num_orders}")
    print(f"⏱️  Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"\n📈 Average lifecycle: {avg_time}s")

    print(f"\n🔍 Duplicate ids: {duplicates}")
    print(f"🔍 Orders not DELIVERED on read-back: {len(problems)}")

    if failed:
        print(f"\n⚠️  Failed Order Details (showing first 5):")
        for f in failed[:5]:
            print(f"   Order #{f['order_num']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_orders,
        "successful": len(successful),
        "failed": len(failed),
        "duplicates": duplicates,
        "problems": problems,
        "total_time": total_time,
    }


async def check_single_flow() -> bool:
    """Exercise the API once before the rush."""
    print("\n" + "=" * 70)
    print("🧪 TESTING SINGLE FLOW")
    print("=" * 70)

    async with httpx.AsyncClient() as client:
        print("\n1️⃣ Health Check...")
        response = await client.get(f"{API_BASE_URL}/health")
        if response.status_code != 200:
            print(f"   ❌ Failed: {response.text}")
            return False
        print(f"   ✅ Status: {response.json().get('status')}")

        print("\n2️⃣ Invalid Order (zero quantity)...")
        response = await client.post(
            f"{API_BASE_URL}/api/orders",
            json={"customerName": "Alice", "contents": [{"itemName": "Pizza", "quantity": 0}]},
        )
        if response.status_code == 400:
            print(f"   ✅ Rejected: {response.json().get('reason')}")
        else:
            print(f"   ❌ Expected 400, got {response.status_code}")
            return False

        print("\n3️⃣ Unknown Order...")
        response = await client.get(f"{API_BASE_URL}/api/orders/nonexistent-id")
        if response.status_code == 404:
            print("   ✅ Not found")
        else:
            print(f"   ❌ Expected 404, got {response.status_code}")
            return False

    print("\n" + "=" * 70)
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rush Hour Simulation Script")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--skip-tests", action="store_true", help="Skip the single flow check")
    args = parser.parse_args()

    if not args.skip_tests and not asyncio.run(check_single_flow()):
        print("\n❌ Pre-flight checks failed. Fix issues before running simulation.")
        sys.exit(1)

    summary = asyncio.run(run_simulation(args.orders))
    if summary["failed"] or summary["duplicates"] or summary["problems"]:
        sys.exit(1)
