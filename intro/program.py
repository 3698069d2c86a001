"""
Intro program – functions, arithmetic, string formatting and console output.
Prints six fixed lines: a banner, a sum, two greetings, a parity check, a banner.
"""
from __future__ import annotations
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

log = logging.getLogger(__name__)


class ProgramInputs(BaseModel):
    """Literals consumed by the entry sequence."""
    model_config = ConfigDict(frozen=True, strict=True)

    left: int = 5
    right: int = 3
    guest: str = "Алексей"
    visitor: str = "Данил"
    number: int = 7


def add(a: int, b: int) -> int:
    return a + b


def greet(name: str) -> None:
    """Prints the greeting itself; returns nothing."""
    print(f"Привет, {name}! Добро пожаловать в Rust!")


def build_greeting(name: str) -> str:
    """Returns the greeting for the caller to print."""
    return f"Привет {name}!"


def is_even(n: int) -> bool:
    return n % 2 == 0


def format_bool(value: bool) -> str:
    # true/false, not Python's True/False
    return "true" if value else "false"


def run(inputs: Optional[ProgramInputs] = None) -> None:
    if inputs is None:
        inputs = ProgramInputs()
    log.debug("Entry sequence start: %r", inputs)

    print("=== Начало программы ===")

    result = add(inputs.left, inputs.right)
    log.debug("add(%d, %d) = %d", inputs.left, inputs.right, result)
    print(f"Результат сложения: {result}")

    greet(inputs.guest)

    print(build_greeting(inputs.visitor))

    even = is_even(inputs.number)
    log.debug("is_even(%d) = %s", inputs.number, even)
    print(f"Число {inputs.number} чётное: {format_bool(even)}")

    print("=== Конец программы ===")
    log.debug("Entry sequence finished")


def main() -> int:
    logging.basicConfig(level=logging.WARNING)
    run()
    return 0
