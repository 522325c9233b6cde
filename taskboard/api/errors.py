# taskboard/api/errors.py
import logging
from typing import Any, Callable, Dict, TypeVar

from graphql import GraphQLError

from taskboard.utils.errors import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

BAD_USER_INPUT = "BAD_USER_INPUT"
NOT_FOUND = "NOT_FOUND"


def user_error(message: str, code: str = BAD_USER_INPUT) -> GraphQLError:
    """An error whose message is safe to show to the caller"""
    return GraphQLError(message, extensions={"code": code})


def validated(validator: Callable[[Dict[str, Any]], T], data: Dict[str, Any]) -> T:
    """Run a validator, turning ValidationError into a user-facing GraphQL error"""
    try:
        return validator(data)
    except ValidationError as exc:
        logger.info(f"Rejected mutation input: {exc.message}")
        raise user_error(exc.message) from exc


def should_mask_error(error: GraphQLError) -> bool:
    # Unexpected exceptions (datastore, mapping) are hidden behind a generic
    # message; GraphQL syntax/validation errors and user errors pass through
    original = error.original_error
    return original is not None and not isinstance(original, GraphQLError)
