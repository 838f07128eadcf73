"""REST API routes for the todo collection server."""
