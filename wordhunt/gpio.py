from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, TYPE_CHECKING

from .config import CFG

if TYPE_CHECKING:
    from .input_queue import InputQueue

logger = logging.getLogger(__name__)

GPIO_AVAILABLE = True
IS_WINDOWS = sys.platform.startswith("win")
try:
    from gpiozero import Button  # type: ignore
except Exception:  # pragma: no cover - gpiozero is optional
    GPIO_AVAILABLE = False
    Button = None  # type: ignore

GPIO_PULL_UP = True
GPIO_BOUNCE_TIME = 0.05


def init_gpio(iq: "InputQueue", pins: Optional[Dict[str, int]] = None) -> Dict[str, "Button"]:
    """Wire arcade buttons to queue commands; empty dict when no GPIO."""
    if IS_WINDOWS or not GPIO_AVAILABLE or Button is None:
        return {}
    pins = dict(pins if pins is not None else CFG.get("pins", {}))
    buttons = {}
    for name, pin in pins.items():
        try:
            buttons[name] = Button(int(pin), pull_up=GPIO_PULL_UP, bounce_time=GPIO_BOUNCE_TIME)
        except Exception as exc:  # no pin factory off a Raspberry Pi
            logger.warning("GPIO button %s on pin %s unavailable: %s", name, pin, exc)
    for name, btn in buttons.items():
        btn.when_pressed = (lambda n=name: iq.push(n))
    if buttons:
        logger.info("GPIO buttons ready: %s", ", ".join(sorted(buttons)))
    return buttons


__all__ = [
    "GPIO_AVAILABLE",
    "IS_WINDOWS",
    "GPIO_PULL_UP",
    "GPIO_BOUNCE_TIME",
    "init_gpio",
]
