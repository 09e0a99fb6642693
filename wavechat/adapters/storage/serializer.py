"""
Serialization utilities for the stored collections.

This module converts between Python objects and the JSON blobs held in the
key-value store, validating each blob against its schema.
"""

import json
import jsonschema
from typing import Any, Dict, Optional

from wavechat.core.exceptions import SerializationError, ValidationError
from wavechat.adapters.loggers import StructuredLogger
from wavechat.adapters.storage.schema import (
    COLLECTION_SCHEMAS,
    CONVERSATIONS_STORAGE_KEY,
    REACTION_SCHEMA,
    REPLY_SCHEMA,
)


class CollectionSerializer:
    """
    Handles serialization, deserialization, and validation of stored collections.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None, config_path: Optional[str] = None):
        """
        Initialize the serializer.

        Args:
            logger: Optional logger instance for reporting validation errors.
            config_path: Optional configuration file path for the default logger.
        """
        self.schemas = COLLECTION_SCHEMAS
        if logger is None:
            logger = StructuredLogger(name=__name__)
            logger.initialize(config_path)
        self.logger = logger

    def empty(self, key: str) -> Any:
        """Return the empty value of a collection ([] for conversations, {} otherwise)."""
        return [] if key == CONVERSATIONS_STORAGE_KEY else {}

    def _schema_for(self, key: str) -> Dict[str, Any]:
        try:
            return self.schemas[key]
        except KeyError:
            raise SerializationError(f"No schema registered for collection: {key}")

    def validate(self, key: str, value: Any) -> None:
        """
        Validate a collection against its schema.

        Raises:
            SerializationError: If validation fails.
        """
        try:
            jsonschema.validate(instance=value, schema=self._schema_for(key))
        except jsonschema.exceptions.ValidationError as e:
            self.logger.error({
                "action": "COLLECTION_VALIDATION_FAILED",
                "message": f"Collection validation failed: {e.message}",
                "data": {"collection": key, "path": list(e.absolute_path)},
                "exception": e,
            })
            raise SerializationError(f"Invalid {key} structure: {e.message}")

    def serialize(self, key: str, value: Any) -> str:
        """
        Convert a collection to a JSON string after validating it.

        Raises:
            SerializationError: If the collection fails schema validation.
        """
        self.validate(key, value)
        return json.dumps(value, ensure_ascii=False)

    def deserialize(self, key: str, json_string: Optional[str]) -> Any:
        """
        Convert a stored JSON string to a collection.

        A missing value (None or empty string) gives the empty collection.

        Raises:
            SerializationError: If the JSON is malformed or fails schema validation.
        """
        if not json_string:
            return self.empty(key)

        try:
            value = json.loads(json_string)
        except json.JSONDecodeError as e:
            self.logger.error({
                "action": "JSON_PARSING_FAILED",
                "message": f"JSON parsing failed: {str(e)}",
                "data": {"collection": key},
                "exception": e,
            })
            raise SerializationError(f"Malformed JSON in {key}: {str(e)}")

        # A stored JSON null is treated like a missing value
        if value is None:
            return self.empty(key)

        self.validate(key, value)
        return value

    def validate_reaction(self, reaction: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If the reaction is malformed.
        """
        try:
            jsonschema.validate(instance=reaction, schema=REACTION_SCHEMA)
        except jsonschema.exceptions.ValidationError as e:
            raise ValidationError(f"Invalid reaction: {e.message}")

    def validate_reply(self, reply: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If the reply is malformed.
        """
        try:
            jsonschema.validate(instance=reply, schema=REPLY_SCHEMA)
        except jsonschema.exceptions.ValidationError as e:
            raise ValidationError(f"Invalid reply: {e.message}")
