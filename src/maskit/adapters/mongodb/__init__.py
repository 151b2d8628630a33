"""MongoDB adapter – compiled mask store.

Requires the ``mongodb`` extra::

    pip install "maskit[mongodb]"
"""

from maskit.adapters.mongodb.mask_store import MongoMaskStore

__all__ = ["MongoMaskStore"]
