import asyncio
import sys

from wavechat.utils import load_env
from wavechat.adapters.controller import command_line_controller


def main() -> int:
    load_env()
    return asyncio.run(command_line_controller(sys.argv[1:]))


if __name__ == "__main__":
    sys.exit(main())
