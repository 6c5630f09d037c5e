from __future__ import annotations

import argparse
import time

from .core.schema import SCHEMA_POLICIES
from .core.settings import RegistrySettings, configure_logging
from .runtime.server import run


def main() -> None:
    settings = RegistrySettings.from_env()

    p = argparse.ArgumentParser(prog="interactables", description="interactables: partial-update registry server")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--schema-policy", choices=SCHEMA_POLICIES, default=None)
    p.add_argument("--log-level", default=settings.log_level)
    args = p.parse_args()

    configure_logging(args.log_level)
    srv = run(
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        new_server=True,
        schema_policy=args.schema_policy,
    )
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
