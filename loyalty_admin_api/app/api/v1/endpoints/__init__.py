"""
Endpoint subpackage for API v1.

``crud.py`` builds the standard list/get/create/update/delete router
for an entity; the other modules add relationship and statistics
routes.  The routers are aggregated in ``router.py`` at the package
level and then included in the main application.
"""
