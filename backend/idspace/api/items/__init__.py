"""Items API package.

- routes: paging, add, select, unselect and reorder endpoints
- schemas: request and response bodies
- dependencies: store and service injection
"""

from idspace.api.items.routes import router

__all__ = ["router"]
