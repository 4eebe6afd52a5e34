"""Route Modules - one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Literal paths registered before parameterised ones (first match wins)
"""
