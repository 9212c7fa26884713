"""Route Modules - one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - fallback is registered last: it matches every path
"""
