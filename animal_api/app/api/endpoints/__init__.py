"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
(cats, dogs) or for operational checks (health).  The routers are
aggregated in ``api/router.py``.
"""
