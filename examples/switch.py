"""Light switch -- the simplest possible interstate program.

Demonstrates:
- Building a behavior table of plain functions and static values
- Triggering actions that transition reentrantly
- Enter/exit hooks and passing extra arguments through a transition
- Vetoing a transition from an exit hook

Run: python -m examples.switch
"""

import logging

from interstate import Interstate


def turn_off(machine: Interstate) -> None:
    machine.transition("off")


def turn_on(machine: Interstate, who: str = "nobody") -> None:
    machine.transition("on", who)


def enter_on(machine: Interstate, who: str) -> str:
    print(f"  light switched on by {who}")
    return "lit"


def exit_on(machine: Interstate, who: str) -> bool | None:
    # Stay on while the one who switched it on is still in the room.
    if who == "night-owl":
        print("  night-owl is still reading, staying on")
        return False
    return None


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="  %(name)s: %(message)s")
    print("=== Light switch ===\n")

    switch = Interstate("off", {
        "on": {
            "toggle": turn_off,
            "label": "ON",
            "onEnterState": enter_on,
            "onExitState": exit_on,
        },
        "off": {
            "toggle": turn_on,
            "label": "OFF",
        },
    })

    print(f"label: {switch.trigger('label')}")
    switch.trigger("toggle", "alice")
    print(f"label: {switch.trigger('label')}")
    switch.trigger("toggle")
    print(f"label: {switch.trigger('label')}")

    switch.trigger("toggle", "night-owl")
    result = switch.trigger("label")
    print(f"label: {result}")
    print(f"transition to off returned {switch.transition('off')!r}")
    print(f"\nDone. Switch is {switch.state!r}.")


if __name__ == "__main__":
    main()
