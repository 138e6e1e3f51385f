"""Values exchanged between the mapping layer and statement binders."""

from .persistent_values import PersistentValues

__all__ = ["PersistentValues"]
