import asyncio
import sys
import traceback

from wavechat.utils import load_env, print_banner
from wavechat.adapters.controller import command_line_controller

if __name__ == "__main__":
    load_env()
    print_banner()

    try:
        exit_code = asyncio.run(command_line_controller(sys.argv[1:]))
        sys.exit(exit_code)
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)
