#!/usr/bin/env python3
"""
Command-line controller for the database service.

Provides subcommands to inspect conversations, send messages, reset the
local data and serve the HTTP API.
"""

import argparse
import sys
import traceback
from typing import List, Optional

from wavechat.core.exceptions import ConfigurationError, WaveChatError
from wavechat.adapters.services import DatabaseService
from wavechat.core.models import MESSAGE_TYPE_AUDIO
from wavechat.utils.config import get_component_config
from wavechat.utils.time_utils import (
    format_message_time,
    format_relative_time,
    group_messages_by_date,
    voice_message_preview,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wavechat", description="WaveChat local database tools")
    parser.add_argument("--config", help="Path to config.yaml (defaults to $WAVECHAT_CONFIG_PATH or config.yaml)")
    parser.add_argument("--no-latency", action="store_true", help="Disable the simulated network delay")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("conversations", help="List conversations")

    messages_parser = subparsers.add_parser("messages", help="Show the messages of a conversation")
    messages_parser.add_argument("conversation_id")

    send_parser = subparsers.add_parser("send", help="Send a text message as the current user")
    send_parser.add_argument("conversation_id")
    send_parser.add_argument("text")

    subparsers.add_parser("reset", help="Clear all data and re-seed the sample conversations")
    subparsers.add_parser("health", help="Check the health of the storage components")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    return parser


def _build_service(args: argparse.Namespace) -> DatabaseService:
    try:
        config = get_component_config("database_service", args.config)
    except ConfigurationError:
        config = {}
    if args.no_latency:
        config = {**config, "latency_scale": 0}
    return DatabaseService(config=config, config_path=args.config)


def print_conversations(conversations) -> None:
    if not conversations:
        print("No conversations yet.")
        return
    for conversation in conversations:
        unread = conversation.get("unreadCount", 0)
        badge = f" ({unread} unread)" if unread else ""
        when = format_relative_time(conversation.get("lastMessageTimestamp"))
        print(f"[{conversation['id']}] {conversation.get('participantName', '')}{badge}")
        print(f"    {conversation.get('lastMessage', '')}  ·  {when}")


def print_messages(messages) -> None:
    if not messages:
        print("No messages in this conversation.")
        return
    for message in group_messages_by_date(messages):
        if message.get("showDateSeparator"):
            print(f"--- {message['dateString']} ---")
        if message.get("type") == MESSAGE_TYPE_AUDIO:
            body = voice_message_preview(message.get("audioDuration") or 0)
            tags = message.get("tags") or []
            if tags:
                body += f" [{', '.join(tags)}]"
        else:
            body = message.get("text", "")
        print(f"{format_message_time(message['timestamp'])}  {message.get('senderName', '')}: {body}")


def print_health(health) -> None:
    print("\nHealth Status:")
    print(f"Overall health: {'Healthy' if health['healthy'] else 'Unhealthy'}")
    print(f"Message: {health['message']}")
    print("Component status:")
    for component, status in health.get("components", {}).items():
        health_str = "Healthy" if status.get("healthy", False) else "Unhealthy"
        print(f"  - {component}: {health_str}")


async def serve(args: argparse.Namespace, service: DatabaseService) -> None:
    import uvicorn
    from wavechat.adapters.controller.api_controller import APIController

    api_controller = APIController(service=service, config_path=args.config)
    await api_controller.initialize()

    host = args.host or api_controller.config.get("host", "0.0.0.0")
    port = args.port or api_controller.config.get("port", 8000)
    print(f"Starting API server on {host}:{port}...")
    config = uvicorn.Config(api_controller.get_app(), host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()


async def command_line_controller(argv: Optional[List[str]] = None) -> int:
    """
    Run one CLI subcommand.

    Args:
        argv: Arguments without the program name. If None, uses sys.argv.

    Returns:
        int: Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        service = _build_service(args)
        if args.command == "serve":
            await serve(args, service)
            return 0

        await service.initialize()

        if args.command == "conversations":
            print_conversations(await service.get_conversations())
        elif args.command == "messages":
            print_messages(await service.get_messages(args.conversation_id))
        elif args.command == "send":
            message = await service.send_text_message({
                "conversationId": args.conversation_id,
                "text": args.text,
            })
            print(f"Sent message {message['id']} to conversation {args.conversation_id}")
        elif args.command == "reset":
            await service.clear_all_data()
            print("All data cleared and sample conversations restored.")
        elif args.command == "health":
            health = await service.healthcheck()
            print_health(health)
            return 0 if health["healthy"] else 1

    except WaveChatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    return 0
