import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from urlshortener.dao.results import StoreError, StoreErrorKind


__all__ = ['handle_dynamodb_errors', 'CONDITIONAL_CHECK_FAILED']

F = TypeVar('F', bound=Callable[..., Any])

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


def handle_dynamodb_errors(on_condition_failure: StoreErrorKind = StoreErrorKind.CONDITION_FAILED) -> Callable[[F], F]:
    """Wrap DynamoDB-interacting DAO methods to return StoreError results

    A failed ConditionExpression is reported as `on_condition_failure`; any
    other ClientError or BotoCoreError, and any item missing a record
    attribute, are reported as STORE_ERROR. The original exception is kept as
    `StoreError.cause` for diagnostics.

    Args:
        on_condition_failure (StoreErrorKind):
            Kind returned when DynamoDB rejects the request's ConditionExpression.

    Returns:
        Callable[[F], F]:
            Decorator for DAO methods performing DynamoDB operations.

    Example:
        >>> @handle_dynamodb_errors(on_condition_failure=StoreErrorKind.CONFLICT)
        ... def insert(self, record):
        ...     self.table.put_item(Item=record.to_dict(), ConditionExpression=Attr('slug').not_exists())
        ...     return record
    """

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except ClientError as e:
                error_code = e.response.get('Error', {}).get('Code')
                if error_code == CONDITIONAL_CHECK_FAILED:
                    return StoreError(
                        on_condition_failure,
                        f"Condition check failed on DynamoDB table '{self.table_name}'.",
                        e,
                    )
                return StoreError(
                    StoreErrorKind.STORE_ERROR,
                    f"DynamoDB request to table '{self.table_name}' failed ({error_code}).",
                    e,
                )
            except BotoCoreError as e:
                return StoreError(
                    StoreErrorKind.STORE_ERROR,
                    f"Can't reach DynamoDB table '{self.table_name}'.",
                    e,
                )
            except KeyError as e:
                return StoreError(
                    StoreErrorKind.STORE_ERROR,
                    f"Malformed item in DynamoDB table '{self.table_name}' (missing attribute {e}).",
                    e,
                )

        return wrapper

    return decorator
