import json
import base64
from dataclasses import dataclass
from typing import Any

from urlshortener.types import LambdaEvent


@dataclass(frozen=True)
class ApiRequest:
    """The parts of an API Gateway proxy event the URL routes care about."""

    method: str
    resource: str
    slug: str | None = None
    body: str | None = None

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'ApiRequest':
        path_parameters = event.get('pathParameters') or {}
        body = event.get('body')
        if body and event.get('isBase64Encoded'):
            body = base64.b64decode(body).decode('utf-8')

        return cls(
            method=(event.get('httpMethod') or '').upper(),
            resource=event.get('resource') or '',
            slug=path_parameters.get('slug'),
            body=body,
        )

    def json(self) -> dict[str, Any]:
        """Parse the body as a JSON object (an empty body parses as `{}`)

        Raises:
            json.JSONDecodeError:
                If the body isn't valid JSON.
            ValueError:
                If the body is valid JSON but not an object.
        """
        payload = json.loads(self.body or '{}')
        if not isinstance(payload, dict):
            raise ValueError(f'Request body must be a JSON object (got {type(payload).__name__}).')
        return payload
