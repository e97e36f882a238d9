"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
concern.  Domain routers are aggregated in ``api/router.py``; the
``fallback`` router is included by the application factory after
everything else.
"""
