# src/papertheme/engine/__init__.py
"""Color engines for papertheme.

- ColorEngine / TokenSource: abstract base classes
- MaterialColorEngine: Material Design 3 engine backed by materialyoucolor

Usage:
    from papertheme.engine import MaterialColorEngine
"""

from papertheme.engine.base import ColorEngine, TokenSource
from papertheme.engine.material import MaterialColorEngine, MaterialTokenSource

__all__ = ["ColorEngine", "TokenSource", "MaterialColorEngine", "MaterialTokenSource"]
