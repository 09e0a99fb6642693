from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field

from wavechat.core.exceptions import (
    ConfigurationError,
    ConversationNotFoundError,
    MessageNotFoundError,
    ValidationError,
)
from wavechat.adapters.loggers import StructuredLogger
from wavechat.adapters.services import DatabaseService
from wavechat.utils.config import get_component_config


class ConversationRequest(BaseModel):
    name: str = Field(..., min_length=1)
    avatar: Optional[str] = None


class TextMessageRequest(BaseModel):
    text: str = Field(..., min_length=1)
    senderId: Optional[str] = None
    timestamp: Optional[str] = None


class ReadRequest(BaseModel):
    userId: Optional[str] = None


class TagsRequest(BaseModel):
    tags: List[str]


class ReactionRequest(BaseModel):
    emoji: str = Field(..., min_length=1)
    timestamp: float = Field(..., ge=0)
    username: Optional[str] = None
    userId: Optional[str] = None


class ReplyRequest(BaseModel):
    text: str = Field(..., min_length=1)
    timestamp: float = Field(..., ge=0)
    username: Optional[str] = None
    userId: Optional[str] = None


class APIController:
    """
    HTTP interface to the database service.

    Args:
        service: The database service. If None, one is built from config.yaml.
        config_path: Optional configuration file path.
        logger: Logger instance. If None, creates a new one.
    """

    def __init__(
        self,
        service: Optional[DatabaseService] = None,
        config_path: Optional[str] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        if logger is None:
            logger = StructuredLogger(name="api_controller")
            logger.initialize(config_path)
        self.logger = logger

        try:
            self.config = get_component_config("api", config_path)
        except ConfigurationError:
            self.config = {}

        self.service = service or DatabaseService(config_path=config_path)
        self._is_initialized = False

        self.app = FastAPI(
            title=self.config.get("title", "WaveChat API"),
            description="API for WaveChat conversations and voice messages",
        )
        # Allow requests from the configured origins (all by default)
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=self.config.get("cors_origins", ["*"]),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        self._setup_routes()

    async def initialize(self):
        """
        Initialize the database service before enabling API endpoints.
        """
        if not self._is_initialized:
            await self.service.initialize()
            self._is_initialized = True

    def _check_initialized(self) -> None:
        if not self._is_initialized:
            raise HTTPException(status_code=503, detail="API not initialized. Please wait for initialization to complete.")

    def _http_error(self, error: Exception) -> HTTPException:
        if isinstance(error, (ConversationNotFoundError, MessageNotFoundError)):
            return HTTPException(status_code=404, detail=str(error))
        if isinstance(error, ValidationError):
            return HTTPException(status_code=422, detail=str(error))

        self.logger.error({
            "action": "API_REQUEST_FAILED",
            "message": "Unhandled error while serving request",
            "exception": error,
        })
        return HTTPException(status_code=500, detail=str(error))

    async def _require_conversation(self, conversation_id: str) -> None:
        if not await self.service.has_conversation(conversation_id):
            raise ConversationNotFoundError(f"Conversation not found: {conversation_id}")

    def _setup_routes(self):
        app = self.app

        @app.get("/health")
        async def health() -> Dict[str, Any]:
            return await self.service.healthcheck()

        @app.get("/conversations")
        async def list_conversations() -> List[Dict[str, Any]]:
            self._check_initialized()
            try:
                return await self.service.get_conversations()
            except Exception as e:
                raise self._http_error(e)

        @app.post("/conversations", status_code=201)
        async def create_conversation(request: ConversationRequest) -> Dict[str, Any]:
            self._check_initialized()
            try:
                return await self.service.create_new_conversation(request.model_dump(exclude_none=True))
            except Exception as e:
                raise self._http_error(e)

        @app.get("/conversations/{conversation_id}/messages")
        async def list_messages(conversation_id: str) -> List[Dict[str, Any]]:
            """
            Get the messages of a conversation, oldest first.

            Raises:
                HTTPException: 404 if the conversation does not exist
            """
            self._check_initialized()
            try:
                await self._require_conversation(conversation_id)
                return await self.service.get_messages(conversation_id)
            except Exception as e:
                raise self._http_error(e)

        @app.post("/conversations/{conversation_id}/messages", status_code=201)
        async def send_message(conversation_id: str, request: TextMessageRequest) -> Dict[str, Any]:
            self._check_initialized()
            try:
                await self._require_conversation(conversation_id)
                return await self.service.send_text_message({
                    "conversationId": conversation_id,
                    **request.model_dump(exclude_none=True),
                })
            except Exception as e:
                raise self._http_error(e)

        @app.post("/conversations/{conversation_id}/read")
        async def mark_read(conversation_id: str, request: Optional[ReadRequest] = None) -> Dict[str, Any]:
            self._check_initialized()
            try:
                await self._require_conversation(conversation_id)
                user_id = request.userId if request else None
                success = await self.service.mark_messages_as_read(conversation_id, user_id)
                return {"success": success}
            except Exception as e:
                raise self._http_error(e)

        @app.put("/messages/{message_id}/tags")
        async def update_tags(message_id: str, request: TagsRequest) -> Dict[str, Any]:
            self._check_initialized()
            try:
                if not await self.service.update_message_tags(message_id, request.tags):
                    raise MessageNotFoundError(f"Message not found: {message_id}")
                return {"success": True, "tags": request.tags}
            except Exception as e:
                raise self._http_error(e)

        @app.delete("/messages/{message_id}")
        async def delete_message(message_id: str) -> Dict[str, Any]:
            self._check_initialized()
            try:
                if not await self.service.delete_message(message_id):
                    raise MessageNotFoundError(f"Message not found: {message_id}")
                return {"success": True}
            except Exception as e:
                raise self._http_error(e)

        @app.get("/messages/{message_id}/reactions")
        async def list_reactions(message_id: str) -> List[Dict[str, Any]]:
            self._check_initialized()
            try:
                return await self.service.get_message_reactions(message_id)
            except Exception as e:
                raise self._http_error(e)

        @app.post("/messages/{message_id}/reactions", status_code=201)
        async def add_reaction(message_id: str, request: ReactionRequest) -> Dict[str, Any]:
            self._check_initialized()
            try:
                success = await self.service.add_reaction_to_message(
                    message_id, request.model_dump(exclude_none=True)
                )
                return {"success": success}
            except Exception as e:
                raise self._http_error(e)

        @app.get("/messages/{message_id}/replies")
        async def list_replies(message_id: str) -> List[Dict[str, Any]]:
            self._check_initialized()
            try:
                return await self.service.get_message_replies(message_id)
            except Exception as e:
                raise self._http_error(e)

        @app.post("/messages/{message_id}/replies", status_code=201)
        async def add_reply(message_id: str, request: ReplyRequest) -> Dict[str, Any]:
            self._check_initialized()
            try:
                success = await self.service.add_reply_to_message(
                    message_id, request.model_dump(exclude_none=True)
                )
                return {"success": success}
            except Exception as e:
                raise self._http_error(e)

        @app.get("/messages/{message_id}/transcript")
        async def get_transcript(message_id: str) -> Dict[str, Any]:
            self._check_initialized()
            try:
                return await self.service.get_message_transcript(message_id)
            except Exception as e:
                raise self._http_error(e)

    def get_app(self) -> FastAPI:
        """
        Get the FastAPI application instance.

        Returns:
            FastAPI: The configured FastAPI application
        """
        return self.app
