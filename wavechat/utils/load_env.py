#!/usr/bin/env python3
"""
Environment Variable Loader

Loads environment variables from a .env file so that `$VAR` references in
config.yaml (and WAVECHAT_CONFIG_PATH itself) resolve before components start.
"""

import os
import argparse
from typing import Optional

from dotenv import load_dotenv


def load_env(env_file: Optional[str] = None) -> bool:
    """
    Load environment variables from a .env file.

    Args:
        env_file: Path to the .env file. If None, looks for .env in the current directory.

    Returns:
        bool: True if a file was loaded, False if it does not exist
    """
    if env_file is None:
        env_file = ".env"

    if not os.path.exists(env_file):
        return False

    # override=True so the .env file wins over the inherited environment
    load_dotenv(env_file, override=True)
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load environment variables from a .env file")
    parser.add_argument("--env-file", type=str, help="Path to the .env file")
    args = parser.parse_args()

    if load_env(args.env_file):
        print(f"Loaded environment variables from {args.env_file or '.env'}")
    else:
        print(f"Warning: Environment file {args.env_file or '.env'} not found.")
