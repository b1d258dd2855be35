"""Register ORM models with the declarative base."""

from trustlet.models.business import Business  # noqa: F401
from trustlet.models.review import Review  # noqa: F401
from trustlet.models.subscription import Subscription  # noqa: F401
