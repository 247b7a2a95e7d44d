#!/usr/bin/env python3
"""
Interactive local checkout harness (no HTTP).

Usage:
  python3 scripts/checkout_local.py

What it does:
- Builds a BookingAssembler through the project wiring (in-memory gateway in dev)
- Lets you pick a service, extra items, a pickup slot and an address
- Prints the live quote and missing fields, then submits and shows the order timeline
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from laundry.application.use_cases.pricing import select_service  # noqa: E402
from laundry.application.utils.schedule import TIME_SLOTS, available_pickup_dates  # noqa: E402
from laundry.wiring.dependencies import (  # noqa: E402
    get_booking_assembler,
    get_catalog,
    get_notification_center,
    get_order_tracker,
)


def _print_header() -> None:
    print("\nLocal Checkout Harness")
    print("-" * 60)
    print("Commands:")
    print("  /service <id> [units]   select a service (see /services)")
    print("  /extra <name> <qty>     set an extra item quantity")
    print("  /slot <n>               pick the n-th slot on the first pickup date")
    print("  /address <text>         set the pickup address")
    print("  /quote                  show the running total")
    print("  /submit                 place the order")
    print("  /services, /quit")
    print("-" * 60)


def _print_quote(booking) -> None:
    total = booking.quote()
    print(f"base: {total.base_amount}  extras: {total.extra_item_amount}  delivery: {total.delivery_fee}")
    print(f"total: {total.final_amount}  stage: {booking.stage.value}")
    missing = booking.missing_fields()
    if missing:
        print(f"missing: {', '.join(missing)}")


async def _submit(booking) -> None:
    result = await booking.submit()
    print(f"outcome: {result.outcome.value}")
    if result.missing:
        print(f"missing: {', '.join(result.missing)}")
    if result.error:
        print(f"error: {result.error}")
    if result.order_id:
        timeline = await get_order_tracker().timeline_for_order_id(result.order_id)
        for step in timeline.steps:
            print(f"  [{'x' if step.completed else ' '}] {step.label}")
        print(f"progress: {timeline.progress_percent}%")
        print(f"unread notifications: {get_notification_center().unread_count()}")


def main() -> None:
    catalog = get_catalog()
    booking = get_booking_assembler()
    first_date = available_pickup_dates()[0]
    _print_header()

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue
        cmd, _, rest = line.partition(" ")
        args = rest.split()

        try:
            if cmd in ("/quit", "/exit"):
                print("Bye!")
                return
            if cmd == "/services":
                for s in catalog.list_services():
                    print(f"  {s.service_id:<10} {s.name:<24} {s.base_price_per_unit}/{s.unit}")
            elif cmd == "/service" and args:
                record = catalog.get_service(args[0])
                if record is None:
                    print(f"Unknown service: {args[0]}")
                    continue
                units = args[1] if len(args) > 1 else "1"
                booking.select_service(
                    select_service(record.service_id, record.base_price_per_unit, units, name=record.name)
                )
                _print_quote(booking)
            elif cmd == "/extra" and len(args) == 2:
                booking.set_extra_quantity(args[0], int(args[1]))
                _print_quote(booking)
            elif cmd == "/slot" and args:
                slot = TIME_SLOTS[int(args[0]) - 1]
                booking.set_schedule(first_date, slot)
                print(f"pickup: {first_date.isoformat()} {slot.label}")
            elif cmd == "/address" and rest:
                booking.set_address(rest)
                _print_quote(booking)
            elif cmd == "/quote":
                _print_quote(booking)
            elif cmd == "/submit":
                asyncio.run(_submit(booking))
            else:
                print("Unknown command, see the list above.")
        except (ValueError, KeyError, IndexError, ArithmeticError, RuntimeError) as e:
            print(f"ERROR: {e}")


if __name__ == "__main__":
    main()
