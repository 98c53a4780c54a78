from __future__ import annotations

import json
import time

from _infra import FakeHTTPClient, banner, run

from trycatch import ConversionError, DetectionPolicy, is_async, make_async, pair, trycatch


def parse_config(raw: str) -> dict:
    return json.loads(raw)


async def main() -> None:
    banner("03_make_async: classify, convert, compose")

    client = FakeHTTPClient()

    for fn in (client.get_user, parse_config, time.time):
        check = is_async(fn, verbose=True)
        print(f"{getattr(fn, '__qualname__', fn)!s:>24}: {check}")

    # Already async: refused, returned as a value
    refused = make_async(client.get_user)
    print(f"refused: {isinstance(refused, ConversionError)}")

    # Zero-arg and side-effect free: let the probe decide
    now = make_async(time.time, DetectionPolicy.probing())
    if not isinstance(now, ConversionError):
        print(f"now: {await now()}")

    # Needs arguments, so no probe: force it
    parse = make_async(parse_config, force_conversion=True)
    if not isinstance(parse, ConversionError):
        config, err = await pair(trycatch(parse)('{"debug": true'))
        print(f"config={config!r}, err={err}")


if __name__ == "__main__":
    run(main)
