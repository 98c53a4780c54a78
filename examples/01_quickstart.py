from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok

from trycatch import pair, trycatch


def divide(a: float, b: float) -> float:
    if b == 0:
        raise ValueError("Division by zero")
    return a / b


async def main() -> None:
    banner("01_quickstart: trycatch + pair + match")

    safe_divide = trycatch(divide)

    # Go-style destructuring
    value, err = await pair(safe_divide(10, 2))
    print(f"10 / 2 -> value={value!r}, err={err!r}")

    value, err = await pair(safe_divide(10, 0))
    print(f"10 / 0 -> value={value!r}, err={err}")

    # Or match on the Result directly
    match await safe_divide(1, 4):
        case Ok(quarter):
            print(f"1 / 4 -> {quarter}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
