from __future__ import annotations

import json

from _infra import APIException, FakeHTTPClient, banner, run

from trycatch import TryCatchError, is_error_container, pair, trycatch


async def main() -> None:
    banner("02_inspect_errors: branch on the root cause, ship it as JSON")

    client = FakeHTTPClient(delay_seconds=0.01, fail_count=1)
    get_user = trycatch(client.get_user)

    _, err = await pair(get_user(42))
    if err is None:
        return

    # Root cause without unwrapping
    if err.is_instance_of(APIException) and err.get_original_property("status") >= 500:
        print(f"transient failure ({err.get_original_property('status')}): {err.message}")

    err.print()

    # Across a process boundary: only message and timestamp survive intact
    wire = json.dumps(err.serialize())
    restored = TryCatchError.deserialize(json.loads(wire))
    print(f"restored: {restored} at {restored.timestamp}, structural={is_error_container(restored)}")

    # Second call succeeds
    user, err = await pair(get_user(42))
    print(f"retry by hand -> {user!r}, err={err!r}")


if __name__ == "__main__":
    run(main)
