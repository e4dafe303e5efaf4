# -*- coding: utf-8 -*-
"""HTTP API over the skincdn resolver.

- Backend: FastAPI (ASGI)
- Data: one ResolverStore, swapped atomically on refresh
"""

__all__ = ["__version__"]
__version__ = "0.3.0"
