"""Data models used by the application.

Split into:
- `api_models`: Pydantic models used for responses
- `domain_models`: visitor identities and the session payload

Import submodules to make them available as `models.api_models`.
"""

from . import api_models, domain_models

from .api_models import (
	StatsSummary,
	PageData,
	ThemeColors,
	Theme,
)

from .domain_models import (
	Session,
	AuthenticatedVisitor,
	AnonymousVisitor,
	Identity,
)

__all__ = [
	# submodules
	"api_models",
	"domain_models",
	# api models
	"StatsSummary",
	"PageData",
	"ThemeColors",
	"Theme",
	# domain models
	"Session",
	"AuthenticatedVisitor",
	"AnonymousVisitor",
	"Identity",
]
