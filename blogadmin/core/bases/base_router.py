from typing import Any, Callable, List, Optional
from fastapi import APIRouter


class BaseRouter:
    """Base router class: owns an APIRouter and a service dependency."""

    def __init__(
        self,
        service_dependency: Callable[..., Any],
        tags: Optional[List[str]] = None,
        prefix: str = "",
        dependencies: Optional[List[Any]] = None
    ):
        self.service_dependency = service_dependency
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix

        # Create router
        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags, #type:ignore
            dependencies=dependencies or [] #type:ignore
        )

        # Register routes
        self._register_routes()

    def _register_routes(self) -> None:
        """Register routes. Subclasses add their endpoints here."""
        raise NotImplementedError

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
