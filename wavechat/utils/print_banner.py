"""
Banner printing utility for WaveChat.
"""

def print_banner():
    """Print ASCII art banner for WaveChat"""
    banner = r"""
 __        __             ____ _           _
 \ \      / /_ ___   ____/ ___| |__   __ _| |_
  \ \ /\ / / _` \ \ / / _ \ |   | '_ \ / _` | __|
   \ V  V / (_| |\ V /  __/ |___| | | | (_| | |_
    \_/\_/ \__,_| \_/ \___|\____|_| |_|\__,_|\__|

    Voice-first conversations, stored locally
    """
    print(banner)
    print("=" * 50)
