"""Repository explorer: pagination, URL state, controller and views."""
