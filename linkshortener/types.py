from datetime import datetime
from typing import Any, TypeAlias
from collections.abc import Callable

from linkshortener.models import GeoLocation


# Type aliases for API Gateway proxy dictionaries
LambdaEvent: TypeAlias = dict[str, Any]
LambdaContext: TypeAlias = Any
LambdaResponse: TypeAlias = dict[str, Any]
LambdaHandler: TypeAlias = Callable[[LambdaEvent, LambdaContext], LambdaResponse]

# Injectable collaborators
Clock: TypeAlias = Callable[[], datetime]
GeoLocator: TypeAlias = Callable[[str | None], GeoLocation | None]
