"""
Controller module.

The HTTP API controller and the command-line controller, both thin layers
over the DatabaseService.
"""

from wavechat.adapters.controller.api_controller import APIController
from wavechat.adapters.controller.command_line import command_line_controller

__all__ = ["APIController", "command_line_controller"]
