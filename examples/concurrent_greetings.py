"""Example of sharing one encoder configuration across worker threads.

Each worker encodes a greeting with the same Config constants. Config values
are frozen and the encoder keeps no state, so no locking is needed.
"""

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from base64_config import MIME, STANDARD, URL_SAFE, Config, encode

NAMES = ["Tim", "Eston", "Aaron", "Ben"]

CONFIGS = {
    "standard": STANDARD,
    "url-safe": URL_SAFE,
    "mime": MIME,
}


def greet(name: str, config: Config) -> Tuple[str, str]:
    """Encode a greeting for `name`."""
    message = f"{name} says hello from a worker thread!"
    return message, encode(message.encode("utf-8"), config)


def main() -> None:
    """Encode every greeting under every configuration concurrently."""
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    with ThreadPoolExecutor(max_workers=len(NAMES)) as pool:
        for label, config in CONFIGS.items():
            results: List[Tuple[str, str]] = list(
                pool.map(lambda name: greet(name, config), NAMES)
            )
            print(f"[{label}]")
            for message, encoded in results:
                print(f"  {message}")
                print(f"    {encoded!r}")


if __name__ == "__main__":
    main()
